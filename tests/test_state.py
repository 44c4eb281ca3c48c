"""
Tests for the GameState base class and capability probing.
"""

import pytest

from gamestack.config import DEFAULT_OPTIONS, TransitionOptions
from gamestack.state import CAPABILITIES, GameState, supports


def test_base_hooks_are_noops():
    state = GameState()
    state.setup()
    state.finalize()
    state.on_input_down(1)
    state.on_input_up(1)


def test_base_update_and_draw_must_be_overridden():
    state = GameState()
    with pytest.raises(NotImplementedError):
        state.update(0.1)
    with pytest.raises(NotImplementedError):
        state.draw()


def test_supports_every_capability_on_base_state():
    state = GameState()
    assert all(supports(state, name) for name in CAPABILITIES)


def test_supports_reports_opted_out_hooks():
    class Quiet(GameState):
        finalize = None

    assert supports(Quiet(), "setup")
    assert not supports(Quiet(), "finalize")


def test_supports_duck_typed_objects():
    class Duck:
        def draw(self):
            pass

    assert supports(Duck(), "draw")
    assert not supports(Duck(), "update")


def test_supports_rejects_unknown_capability():
    with pytest.raises(ValueError):
        supports(GameState(), "render")


def test_transition_options_defaults():
    assert DEFAULT_OPTIONS == TransitionOptions(run_setup=True, run_finalize=True)


def test_transition_options_are_immutable():
    options = TransitionOptions(run_setup=False)
    with pytest.raises(AttributeError):
        options.run_setup = True
