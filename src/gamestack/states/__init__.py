"""Demo states driven by the pygame Application.

Each state takes the Application as its context and is built through a factory
registered on the application's StateStack.
"""

__all__ = [
    "title_state",
    "play_state",
    "pause_state",
]
