"""
anchor_resolver.py
------------------
Resolves element positions from screen anchors and offsets.
"""

import pygame
from typing import Tuple


class AnchorResolver:
    """Resolves ui element rectangles against the logical screen size."""

    _ALIGNMENT_MULTIPLIERS = {
        'top_left': (0, 0), 'top_center': (0.5, 0), 'top': (0.5, 0), 'top_right': (1, 0),
        'center_left': (0, 0.5), 'left': (0, 0.5), 'center': (0.5, 0.5),
        'center_right': (1, 0.5), 'right': (1, 0.5),
        'bottom_left': (0, 1), 'bottom_center': (0.5, 1), 'bottom': (0.5, 1), 'bottom_right': (1, 1),
    }

    def __init__(self, game_width: int, game_height: int):
        self.game_width = game_width
        self.game_height = game_height

    def anchor_point(self, anchor: str) -> Tuple[int, int]:
        """Screen point for a named anchor (unknown names fall back to top_left)."""
        mx, my = self._ALIGNMENT_MULTIPLIERS.get(anchor, (0, 0))
        return int(self.game_width * mx), int(self.game_height * my)

    def resolve(self, anchor: str, offset, size) -> pygame.Rect:
        """
        Place a rect so its top-left corner sits at anchor + offset.

        Args:
            anchor: Screen anchor name ("center", "top_left", ...)
            offset: [dx, dy] from the anchor point
            size: [width, height]
        """
        ax, ay = self.anchor_point(anchor)
        dx, dy = offset
        width, height = size
        return pygame.Rect(ax + int(dx), ay + int(dy), int(width), int(height))
