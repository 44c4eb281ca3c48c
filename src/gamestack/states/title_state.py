"""A minimal title screen.

Enter starts the game by switching to PlayState; Escape pops the title off
the stack, which ends the demo.
"""
import logging

import pygame

from gamestack.state import GameState

_logger = logging.getLogger("gamestack.title_state")


class TitleState(GameState):
    def __init__(self, context):
        self.context = context
        self._font = None
        self._small_font = None
        self._blink = 0.0

    def setup(self):
        _logger.info("Entering TitleState")
        self._font = pygame.font.Font(None, 72)
        self._small_font = pygame.font.Font(None, 36)
        self._blink = 0.0

    def finalize(self):
        _logger.info("Leaving TitleState")

    def on_input_down(self, code):
        if code in (pygame.K_RETURN, pygame.K_KP_ENTER):
            from gamestack.states.play_state import PlayState

            self.context.states.switch_state(PlayState)
        elif code == pygame.K_ESCAPE:
            self.context.states.pop_state()

    def update(self, elapsed):
        self._blink = (self._blink + elapsed) % 1.0

    def draw(self):
        surface = self.context.screen
        surface.fill((24, 96, 24))
        text_surf = self._font.render("gamestack", True, (255, 255, 255))
        tw, th = text_surf.get_size()
        sw, sh = surface.get_size()
        surface.blit(text_surf, ((sw - tw) // 2, (sh - th) // 2 - 80))
        if self._blink < 0.6:
            hint = self._small_font.render("Press Enter to start, Escape to quit", True, (230, 230, 200))
            hw, _ = hint.get_size()
            surface.blit(hint, ((sw - hw) // 2, sh // 2 + 20))
