"""
Pytest configuration and shared fake states.
"""

import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from gamestack.manager import StateStack  # noqa: E402
from gamestack.state import GameState  # noqa: E402


class RecordingState:
    """Mixin recording every call it receives, optionally into a shared journal.

    Concrete doubles list GameState as a direct base so they resolve by class.
    """

    def __init__(self, journal=None):
        self.calls = []
        self.journal = journal

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.journal is not None:
            self.journal.append((type(self).__name__, name))

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)

    def setup(self):
        self._record("setup")

    def finalize(self):
        self._record("finalize")

    def update(self, elapsed):
        self._record("update", elapsed)

    def draw(self):
        self._record("draw")

    def on_input_down(self, code):
        self._record("on_input_down", code)

    def on_input_up(self, code):
        self._record("on_input_up", code)


class StateA(RecordingState, GameState):
    pass


class StateB(RecordingState, GameState):
    pass


class StateC(RecordingState, GameState):
    pass


@pytest.fixture
def stack():
    return StateStack()


@pytest.fixture
def journal():
    return []


@pytest.fixture
def journaled_stack(stack, journal):
    for state_type in (StateA, StateB, StateC):
        stack.register(state_type, lambda t=state_type: t(journal))
    return stack
