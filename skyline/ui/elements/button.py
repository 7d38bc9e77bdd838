"""
button.py
---------
Clickable button with a hover state.
"""

import pygame
from typing import Any, Dict, Optional, Tuple

from skyline.core.runtime.game_settings import Colors, Layers
from skyline.ui.core.ui_loader import register_element


@register_element('button')
class UIButton:
    """Rectangle + label + action; hover is recomputed from the mouse position."""

    def __init__(self, config: Dict[str, Any], rect: pygame.Rect):
        """
        Initialize button.

        Args:
            config: Element configuration (id, text, action)
            rect: Resolved screen rectangle
        """
        self.id = config.get('id')
        self.text = config.get('text', '')
        self.action = config.get('action')
        self.rect = rect
        self.is_hovered = False

    def contains_point(self, pos: Tuple[int, int]) -> bool:
        """Hit-test with inclusive edges."""
        x, y = pos
        return (self.rect.x <= x <= self.rect.x + self.rect.width
                and self.rect.y <= y <= self.rect.y + self.rect.height)

    def set_hovered(self, hovered: bool):
        self.is_hovered = hovered

    def handle_click(self, pos: Tuple[int, int]) -> Optional[str]:
        """Return this button's action if the click landed on it."""
        if self.contains_point(pos):
            return self.action
        return None

    def draw(self, draw_manager, font):
        """Queue the button fill and its centred label."""
        color = Colors.BUTTON_HOVER if self.is_hovered else Colors.BUTTON
        draw_manager.queue_shape("rect", self.rect, color, layer=Layers.UI)
        if self.text and font is not None:
            label = font.render(self.text, True, Colors.BUTTON_TEXT)
            label_rect = label.get_rect(center=self.rect.center)
            draw_manager.queue_draw(label, label_rect, layer=Layers.UI + 1)
