"""
Tests for translating pygame events into StateStack input forwarding.
"""

import pygame

from gamestack.input import InputSystem

from conftest import StateA


def _key(event_type, key):
    return pygame.event.Event(event_type, key=key)


def test_key_events_reach_current_state(stack):
    stack.push_state(StateA)
    inputs = InputSystem(stack)

    quit_requested = inputs.process([
        _key(pygame.KEYDOWN, pygame.K_SPACE),
        _key(pygame.KEYUP, pygame.K_SPACE),
    ])

    assert quit_requested is False
    a = stack.resolve(StateA)
    assert a.calls[1:] == [
        ("on_input_down", pygame.K_SPACE),
        ("on_input_up", pygame.K_SPACE),
    ]


def test_mouse_buttons_are_forwarded(stack):
    stack.push_state(StateA)
    InputSystem(stack).process([
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0)),
    ])
    a = stack.resolve(StateA)
    assert a.count("on_input_down") == 1
    assert a.count("on_input_up") == 1


def test_pressed_codes_are_tracked(stack):
    inputs = InputSystem(stack)
    inputs.process([_key(pygame.KEYDOWN, pygame.K_LEFT)])
    assert inputs.is_pressed(pygame.K_LEFT)
    inputs.process([_key(pygame.KEYUP, pygame.K_LEFT)])
    assert not inputs.is_pressed(pygame.K_LEFT)


def test_quit_event_is_reported(stack):
    assert InputSystem(stack).process([pygame.event.Event(pygame.QUIT)]) is True


def test_other_events_are_ignored(stack):
    stack.push_state(StateA)
    InputSystem(stack).process([pygame.event.Event(pygame.USEREVENT)])
    assert stack.resolve(StateA).calls == [("setup",)]
