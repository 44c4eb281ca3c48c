from __future__ import annotations

"""Application bootstrap and main loop for the gamestack demo.

The loop owns timing and the window; everything else is delegated to whichever
state is current on the StateStack.
"""
import logging
from typing import Optional

import pygame

from gamestack.config import Config
from gamestack.input import InputSystem
from gamestack.logger import configure_logging
from gamestack.manager import StateStack
from gamestack.states.pause_state import PauseState
from gamestack.states.play_state import PlayState
from gamestack.states.title_state import TitleState


_logger = logging.getLogger("gamestack.app")


class Application:
    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        configure_logging(self.config.debug, self.config.log_level)
        self.screen: Optional[pygame.Surface] = None
        self.running = False

        self.states = StateStack()
        self.input = InputSystem(self.states)
        self.states.register(TitleState, lambda: TitleState(self))
        self.states.register(PlayState, lambda: PlayState(self))
        self.states.register(PauseState, lambda: PauseState(self))

        _logger.info("Application initialized. window=%s fps=%d", self.config.window_size, self.config.fps)

    def run(self) -> None:
        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption(self.config.title)
        clock = pygame.time.Clock()

        self.states.push_state(TitleState)

        self.running = True
        try:
            while self.running:
                dt = clock.tick(self.config.fps) / 1000.0
                if self.input.process(pygame.event.get()):
                    self.running = False
                    break

                self.states.update(dt)
                if self.states.current() is None:
                    _logger.info("State stack is empty; leaving main loop")
                    self.running = False
                    break

                self.states.draw()
                pygame.display.flip()
        except Exception:
            _logger.exception("Unhandled exception in main loop")
            raise
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        _logger.info("Shutting down application")
        self.running = False
        self.states.clear()
        pygame.quit()
