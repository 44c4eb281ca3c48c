"""StateStack: push/pop/switch states and forward updates, draws and input.

The current state is the top of the stack and is the only one that receives
forwarded calls. States referenced by class are built once and cached, so a
class always resolves to the same instance for the lifetime of the stack.

Transitions requested from inside a setup/finalize hook are queued and run in
order after the outer transition completes.
"""
from __future__ import annotations

from collections import deque
import functools
import logging
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple, Type, Union

from gamestack.config import DEFAULT_OPTIONS, TransitionOptions
from gamestack.errors import MissingCapability, RegistrationError
from gamestack.state import GameState, supports

_logger = logging.getLogger("gamestack.manager")

StateRef = Union[GameState, Type[GameState]]


def _transition(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._transitioning:
            _logger.debug("Deferring nested %s%r", method.__name__, args)
            self._pending.append((method, args, kwargs))
            return
        self._transitioning = True
        try:
            method(self, *args, **kwargs)
            while self._pending:
                queued, q_args, q_kwargs = self._pending.popleft()
                queued(self, *q_args, **q_kwargs)
        finally:
            self._pending.clear()
            self._transitioning = False

    return wrapper


def _is_state_type(obj: object) -> bool:
    return isinstance(obj, type) and issubclass(obj, GameState) and obj is not GameState


def _is_direct_state_type(obj: object) -> bool:
    return isinstance(obj, type) and GameState in obj.__bases__


class StateStack:
    def __init__(self):
        self._stack: List[GameState] = []
        self._instances: Dict[type, GameState] = {}
        self._factories: Dict[type, Callable[[], GameState]] = {}
        self._pending: Deque[Tuple[Callable, tuple, dict]] = deque()
        self._transitioning = False
        self._inside_state: Optional[GameState] = None

    # -- registry -----------------------------------------------------------

    def register(self, state_type: Type[GameState], factory: Optional[Callable[[], GameState]] = None) -> None:
        """Declare how the singleton for `state_type` is built.

        Without a factory the class is called with no arguments. Registering
        a type whose singleton already exists is rejected.
        """
        if not _is_state_type(state_type):
            raise RegistrationError(f"{state_type!r} is not a GameState subclass")
        if state_type in self._instances:
            raise RegistrationError(f"{state_type.__name__} has already been constructed")
        self._factories[state_type] = factory if factory is not None else state_type
        _logger.debug("Registered factory for %s", state_type.__name__)

    def resolve(self, state_ref: Any) -> Optional[GameState]:
        """Turn an instance or a state class into a state instance.

        Only direct GameState subclasses and registered classes resolve by
        class. Returns None (and logs a warning) for anything else.
        """
        if isinstance(state_ref, GameState):
            return state_ref
        if self._resolvable(state_ref):
            instance = self._instances.get(state_ref)
            if instance is None:
                factory = self._factories.get(state_ref, state_ref)
                instance = factory()
                if not isinstance(instance, GameState):
                    raise RegistrationError(
                        f"factory for {state_ref.__name__} returned {instance!r}, not a GameState"
                    )
                self._instances[state_ref] = instance
                _logger.debug("Created %s instance", state_ref.__name__)
            return instance
        _logger.warning("Ignoring invalid state reference: %r", state_ref)
        return None

    def _resolvable(self, state_type: object) -> bool:
        """Classes resolve when they derive directly from GameState or were registered."""
        if not isinstance(state_type, type):
            return False
        return state_type in self._factories or _is_direct_state_type(state_type)

    # -- transitions --------------------------------------------------------

    @_transition
    def switch_state(self, state_ref: StateRef, options: TransitionOptions = DEFAULT_OPTIONS) -> None:
        """Replace the current state with `state_ref`."""
        new_state = self.resolve(state_ref)
        if new_state is None:
            return
        self._activate(new_state, options)
        if self._stack:
            self._stack[-1] = new_state
        else:
            self._stack.append(new_state)
        _logger.debug("Switched to %r (depth %d)", new_state, len(self._stack))

    @_transition
    def push_state(self, state_ref: StateRef, options: TransitionOptions = DEFAULT_OPTIONS) -> None:
        """Put `state_ref` on top of the stack, covering the current state."""
        new_state = self.resolve(state_ref)
        if new_state is None:
            return
        self._activate(new_state, options)
        self._stack.append(new_state)
        _logger.debug("Pushed %r (depth %d)", new_state, len(self._stack))

    @_transition
    def pop_state(self, options: TransitionOptions = DEFAULT_OPTIONS) -> None:
        """Remove the current state and re-activate the one beneath it."""
        current = self.current()
        if current is not None and options.run_finalize and supports(current, "finalize"):
            current.finalize()
        if self._stack:
            self._stack.pop()
        revealed = self.current()
        if revealed is not None and options.run_setup and supports(revealed, "setup"):
            revealed.setup()
        _logger.debug("Popped %r, current is now %r", current, revealed)

    @_transition
    def pop_until(self, target: StateRef) -> None:
        """Drop states from the top until `target` is current, without hooks.

        The target itself is retained as the new current state. A class target
        matches its cached singleton; a class that was never built cannot be on
        the stack, so the stack ends empty.
        """
        if isinstance(target, type):
            target = self._instances.get(target) if self._resolvable(target) else None
        while self._stack and self._stack[-1] is not target:
            self._stack.pop()
        _logger.debug("Unwound stack to %r (depth %d)", self.current(), len(self._stack))

    @_transition
    def clear(self) -> None:
        self._stack.clear()
        _logger.debug("Cleared state stack")

    def _activate(self, new_state: GameState, options: TransitionOptions) -> None:
        outgoing = self.current()
        if outgoing is not None and options.run_finalize and supports(outgoing, "finalize"):
            outgoing.finalize()
        if options.run_setup and supports(new_state, "setup"):
            new_state.setup()

    # -- queries ------------------------------------------------------------

    def current(self) -> Optional[GameState]:
        return self._stack[-1] if self._stack else None

    def previous(self) -> Optional[GameState]:
        return self._stack[-2] if len(self._stack) >= 2 else None

    @property
    def states(self) -> Tuple[GameState, ...]:
        return tuple(self._stack)

    @property
    def instances(self) -> Dict[type, GameState]:
        return dict(self._instances)

    @property
    def inside_state(self) -> Optional[GameState]:
        """The state whose forwarded call is running, if any."""
        return self._inside_state

    def __len__(self) -> int:
        return len(self._stack)

    # -- forwarding ---------------------------------------------------------

    def update(self, elapsed: float = 1) -> None:
        self._forward("update", elapsed)

    def draw(self) -> None:
        self._forward("draw")

    def on_input_down(self, code: Any) -> None:
        self._forward("on_input_down", code)

    def on_input_up(self, code: Any) -> None:
        self._forward("on_input_up", code)

    def _forward(self, capability: str, *args: Any) -> None:
        state = self.current()
        if state is None:
            return
        handler = getattr(state, capability, None)
        if not callable(handler):
            raise MissingCapability(state, capability)
        outer = self._inside_state
        self._inside_state = state
        try:
            handler(*args)
        finally:
            self._inside_state = outer
