"""
platform.py
-----------
Static collision surfaces.

Platforms are immutable axis-aligned rectangles created once at import time
from the fixed level layout.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

from skyline.core.runtime.game_settings import Level


@dataclass(frozen=True)
class Platform:
    """Immutable axis-aligned rectangle the player can stand on."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)


def build_level() -> Tuple[Platform, ...]:
    """Build the platform set from the fixed level layout."""
    return tuple(
        Platform(
            x,
            Level.GROUND_LEVEL - height_above_ground,
            Level.PLATFORM_WIDTH,
            Level.PLATFORM_HEIGHT,
        )
        for x, height_above_ground in Level.LAYOUT
    )


LEVEL_PLATFORMS: Tuple[Platform, ...] = build_level()
