"""State-stack manager for game main loops."""
from gamestack.config import DEFAULT_OPTIONS, TransitionOptions
from gamestack.errors import GameStackError, MissingCapability, RegistrationError
from gamestack.manager import StateStack
from gamestack.state import CAPABILITIES, GameState, supports

__all__ = [
    "CAPABILITIES",
    "DEFAULT_OPTIONS",
    "GameStackError",
    "GameState",
    "MissingCapability",
    "RegistrationError",
    "StateStack",
    "TransitionOptions",
    "supports",
]

__version__ = "0.1.0"
