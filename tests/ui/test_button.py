"""
test_button.py
--------------
Unit tests for button hit-testing, hover and drawing.
"""

import pygame
import pytest

from skyline.core.runtime.game_settings import Colors, Layers
from skyline.ui.elements.button import UIButton


@pytest.fixture
def button():
    return UIButton({"id": "play_button", "text": "PLAY", "action": "play"},
                    pygame.Rect(300, 150, 200, 50))


@pytest.mark.parametrize("pos, inside", [
    ((300, 150), True),   # top-left corner
    ((500, 200), True),   # bottom-right corner, edges are inclusive
    ((400, 175), True),
    ((299, 175), False),
    ((501, 175), False),
    ((400, 149), False),
    ((400, 201), False),
])
def test_contains_point(button, pos, inside):
    assert button.contains_point(pos) is inside


def test_handle_click_returns_action(button):
    assert button.handle_click((400, 175)) == "play"
    assert button.handle_click((10, 10)) is None


def test_hover_changes_fill(button, mock_draw_manager):
    button.draw(mock_draw_manager, None)
    assert mock_draw_manager.queue_shape.call_args.args[2] == Colors.BUTTON

    button.set_hovered(True)
    button.draw(mock_draw_manager, None)
    assert mock_draw_manager.queue_shape.call_args.args[2] == Colors.BUTTON_HOVER


def test_label_is_centred_above_fill(button, mock_draw_manager):
    font = pygame.font.Font(None, 24)
    button.draw(mock_draw_manager, font)

    assert mock_draw_manager.queue_shape.call_args.kwargs["layer"] == Layers.UI
    label, rect = mock_draw_manager.queue_draw.call_args.args
    assert isinstance(label, pygame.Surface)
    assert rect.center == button.rect.center
    assert mock_draw_manager.queue_draw.call_args.kwargs["layer"] == Layers.UI + 1
