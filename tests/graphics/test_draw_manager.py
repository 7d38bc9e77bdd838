"""
test_draw_manager.py
--------------------
Layered queue behaviour of the DrawManager.
"""

import pygame
import pytest

from skyline.core.runtime.game_settings import Colors
from skyline.graphics.draw_manager import DrawManager


@pytest.fixture
def draw_manager():
    return DrawManager()


@pytest.fixture
def target():
    return pygame.Surface((100, 100))


def test_none_surface_is_skipped(draw_manager):
    draw_manager.queue_draw(None, pygame.Rect(0, 0, 10, 10))
    assert draw_manager.queued_count() == 0
    assert draw_manager.skipped == 1


def test_higher_layers_draw_on_top(draw_manager, target):
    red = pygame.Surface((10, 10))
    red.fill((255, 0, 0))
    blue = pygame.Surface((10, 10))
    blue.fill((0, 0, 255))

    draw_manager.queue_draw(blue, pygame.Rect(0, 0, 10, 10), layer=5)
    draw_manager.queue_draw(red, pygame.Rect(0, 0, 10, 10), layer=1)
    draw_manager.render(target)

    assert target.get_at((5, 5))[:3] == (0, 0, 255)


def test_shapes_render_and_frame_is_cleared(draw_manager, target):
    target.fill((9, 9, 9))
    draw_manager.queue_shape("rect", pygame.Rect(0, 0, 20, 20), (255, 229, 204), layer=100)
    draw_manager.render(target)

    assert target.get_at((10, 10))[:3] == (255, 229, 204)
    assert target.get_at((50, 50))[:3] == Colors.CLEAR[:3]


def test_clear_empties_queues(draw_manager):
    draw_manager.queue_shape("rect", pygame.Rect(0, 0, 1, 1), (0, 0, 0))
    draw_manager.queue_draw(None, None)
    draw_manager.clear()
    assert draw_manager.queued_count() == 0
    assert draw_manager.skipped == 0
