"""Input system: translate pygame events into StateStack input forwarding.

Key events forward their key code and mouse button events their button number;
both are passed through to the current state untouched.
"""
from typing import Iterable, Set
import logging

import pygame

from gamestack.manager import StateStack

_logger = logging.getLogger("gamestack.input")


class InputSystem:
    def __init__(self, stack: StateStack):
        self.stack = stack
        self._pressed: Set[int] = set()

    def process(self, events: Iterable[pygame.event.Event]) -> bool:
        """Forward input events to the stack. Returns True if QUIT was seen."""
        quit_requested = False
        for ev in events:
            if ev.type == pygame.QUIT:
                quit_requested = True
            elif ev.type == pygame.KEYDOWN:
                self._down(ev.key)
            elif ev.type == pygame.KEYUP:
                self._up(ev.key)
            elif ev.type == pygame.MOUSEBUTTONDOWN:
                self._down(ev.button)
            elif ev.type == pygame.MOUSEBUTTONUP:
                self._up(ev.button)
        return quit_requested

    def _down(self, code: int) -> None:
        self._pressed.add(code)
        self.stack.on_input_down(code)

    def _up(self, code: int) -> None:
        self._pressed.discard(code)
        self.stack.on_input_up(code)

    def is_pressed(self, code: int) -> bool:
        return code in self._pressed
