"""Exceptions raised by gamestack."""


class GameStackError(Exception):
    pass


class MissingCapability(GameStackError, AttributeError):
    """The current state cannot receive a forwarded call."""

    def __init__(self, state: object, capability: str):
        super().__init__(f"{state!r} does not support {capability}()")
        self.state = state
        self.capability = capability


class RegistrationError(GameStackError, TypeError):
    """A state type or factory could not be registered or used."""
