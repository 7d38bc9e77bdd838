"""
test_platform.py
----------------
Unit tests for static platforms and the fixed level layout.
"""

import dataclasses

import pytest

from skyline.core.runtime.game_settings import Level
from skyline.entities.platform import Platform, LEVEL_PLATFORMS, build_level


def test_edges():
    platform = Platform(200, 450, 150, 20)
    assert (platform.left, platform.right) == (200, 350)
    assert (platform.top, platform.bottom) == (450, 470)
    assert tuple(platform.rect) == (200, 450, 150, 20)


def test_platforms_are_immutable():
    platform = Platform(0, 0, 10, 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        platform.x = 5


def test_level_layout_matches_fixed_positions():
    ground = Level.GROUND_LEVEL
    expected = [
        (0, ground - 20), (200, ground - 100), (0, ground - 160), (200, ground - 240),
        (0, ground - 320), (200, ground - 400), (400, ground - 480), (600, ground - 160),
    ]
    assert [(p.x, p.y) for p in LEVEL_PLATFORMS] == expected
    assert all(p.width == Level.PLATFORM_WIDTH for p in LEVEL_PLATFORMS)
    assert all(p.height == Level.PLATFORM_HEIGHT for p in LEVEL_PLATFORMS)


def test_level_is_a_tuple_rebuilt_identically():
    assert isinstance(LEVEL_PLATFORMS, tuple)
    assert build_level() == LEVEL_PLATFORMS
