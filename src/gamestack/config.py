"""Configuration defaults and constants.

Keep this file light: constants, the per-transition options and a small Config
dataclass for the pygame host.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


DEFAULT_WINDOW_SIZE: Tuple[int, int] = (960, 640)
DEFAULT_FPS: int = 60
DEFAULT_TITLE: str = "gamestack demo"


@dataclass(frozen=True)
class TransitionOptions:
    run_setup: bool = True
    run_finalize: bool = True


DEFAULT_OPTIONS = TransitionOptions()


@dataclass
class Config:
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE
    fps: int = DEFAULT_FPS
    title: str = DEFAULT_TITLE
    debug: bool = False
    log_level: Optional[str] = None
