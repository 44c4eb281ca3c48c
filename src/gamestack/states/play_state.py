"""Gameplay state: a square steered with the arrow keys.

P or Escape pushes PauseState on top without finalizing this state, so the
pause overlay can keep drawing the frozen play field underneath it.
"""
import logging

import pygame

from gamestack.config import TransitionOptions
from gamestack.state import GameState

_logger = logging.getLogger("gamestack.play_state")

SPEED = 240.0  # pixels per second
SIZE = 32

_DIRECTIONS = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
}


class PlayState(GameState):
    def __init__(self, context):
        self.context = context
        self.position = [0.0, 0.0]

    def setup(self):
        _logger.info("Starting PlayState")
        w, h = self.context.config.window_size
        self.position = [(w - SIZE) / 2, (h - SIZE) / 2]

    def finalize(self):
        _logger.info("Leaving PlayState")

    def on_input_down(self, code):
        if code in (pygame.K_p, pygame.K_ESCAPE):
            from gamestack.states.pause_state import PauseState

            self.context.states.push_state(PauseState, TransitionOptions(run_finalize=False))

    def update(self, elapsed):
        w, h = self.context.config.window_size
        for key, (dx, dy) in _DIRECTIONS.items():
            if self.context.input.is_pressed(key):
                self.position[0] += dx * SPEED * elapsed
                self.position[1] += dy * SPEED * elapsed
        self.position[0] = max(0.0, min(w - SIZE, self.position[0]))
        self.position[1] = max(0.0, min(h - SIZE, self.position[1]))

    def draw(self):
        surface = self.context.screen
        surface.fill((30, 30, 48))
        rect = pygame.Rect(int(self.position[0]), int(self.position[1]), SIZE, SIZE)
        pygame.draw.rect(surface, (200, 160, 60), rect, border_radius=6)
