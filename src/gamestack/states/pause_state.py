"""Pause overlay drawn over the state beneath it.

P/Escape resumes (pop without re-running the covered state's setup), T returns
to the title screen and Q empties the stack.
"""
import logging

import pygame

from gamestack.config import TransitionOptions
from gamestack.state import GameState

_logger = logging.getLogger("gamestack.pause_state")


class PauseState(GameState):
    def __init__(self, context):
        self.context = context
        self._font = None
        self._overlay = None

    def setup(self):
        _logger.info("Paused")
        self._font = pygame.font.Font(None, 48)
        self._overlay = pygame.Surface(self.context.config.window_size, pygame.SRCALPHA)
        self._overlay.fill((0, 0, 0, 160))

    def on_input_down(self, code):
        states = self.context.states
        if code in (pygame.K_p, pygame.K_ESCAPE):
            states.pop_state(TransitionOptions(run_setup=False))
        elif code == pygame.K_t:
            from gamestack.states.play_state import PlayState
            from gamestack.states.title_state import TitleState

            states.pop_until(PlayState)
            states.switch_state(TitleState)
        elif code == pygame.K_q:
            states.clear()

    def update(self, elapsed):
        pass

    def draw(self):
        covered = self.context.states.previous()
        if covered is not None:
            covered.draw()
        surface = self.context.screen
        surface.blit(self._overlay, (0, 0))
        label = self._font.render("Paused - P resume, T title, Q quit", True, (255, 255, 255))
        lw, lh = label.get_size()
        sw, sh = surface.get_size()
        surface.blit(label, ((sw - lw) // 2, (sh - lh) // 2))
