"""
test_input_manager.py
---------------------
Unit tests for held-key sampling and escape detection.
"""

import pygame
import pytest

from skyline.core.services.input_manager import InputManager, InputFrame
from tests.conftest import make_input_manager, make_key_state, key_down_event


@pytest.mark.parametrize("keys, expected", [
    ((), InputFrame()),
    ((pygame.K_a,), InputFrame(left=True)),
    ((pygame.K_LEFT,), InputFrame(left=True)),
    ((pygame.K_d,), InputFrame(right=True)),
    ((pygame.K_RIGHT,), InputFrame(right=True)),
    ((pygame.K_w,), InputFrame(jump=True)),
    ((pygame.K_UP,), InputFrame(jump=True)),
    ((pygame.K_SPACE,), InputFrame(jump=True)),
    ((pygame.K_a, pygame.K_d, pygame.K_SPACE), InputFrame(left=True, right=True, jump=True)),
])
def test_poll_maps_held_keys(keys, expected):
    assert make_input_manager(*keys).poll() == expected


def test_unbound_keys_are_ignored():
    assert make_input_manager(pygame.K_q, pygame.K_s).poll() == InputFrame()


def test_custom_bindings():
    manager = InputManager(key_bindings={"jump": [pygame.K_j], "back": [pygame.K_q]},
                           key_state_source=lambda: make_key_state(pygame.K_j))
    assert manager.poll() == InputFrame(jump=True)


def test_is_back_event():
    manager = make_input_manager()
    assert manager.is_back_event(key_down_event(pygame.K_ESCAPE)) is True
    assert manager.is_back_event(key_down_event(pygame.K_SPACE)) is False
    assert manager.is_back_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)) is False
