"""Base state interface for states managed by a StateStack.

A state supports a fixed set of capabilities. `setup` and `finalize` are
optional hooks (set either to None on a subclass to opt out); `update` and
`draw` must be implemented; the input handlers default to no-ops.
"""
from typing import Any

CAPABILITIES = ("setup", "finalize", "update", "draw", "on_input_down", "on_input_up")


class GameState:
    def setup(self) -> None:
        """Called each time this state becomes the current state."""

    def finalize(self) -> None:
        """Called each time this state stops being the current state."""

    def update(self, elapsed: float) -> None:
        raise NotImplementedError()

    def draw(self) -> None:
        raise NotImplementedError()

    def on_input_down(self, code: Any) -> None:
        pass

    def on_input_up(self, code: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


def supports(state: object, capability: str) -> bool:
    """Return True if `state` carries a callable for `capability`."""
    if capability not in CAPABILITIES:
        raise ValueError(f"unknown capability: {capability!r}")
    return callable(getattr(state, capability, None))
