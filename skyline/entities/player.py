"""
player.py
---------
Player state and per-tick kinematics.

Responsibilities
----------------
- Apply horizontal input and clamp the player inside the screen.
- Integrate vertical velocity under gravity.
- Land on static platforms and on the ground line.
- Report win/lose outcomes to the caller instead of changing game state.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import pygame

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_settings import Display, Physics, Level, PlayerDefaults
from skyline.core.services.input_manager import InputFrame
from skyline.entities.platform import Platform


class Outcome(Enum):
    """Run-ending signal produced by a kinematics step."""
    WIN = "win"
    LOSE = "lose"


@dataclass
class Player:
    """Player rectangle with vertical velocity and grounded flag."""

    x: int
    y: int
    width: int = PlayerDefaults.WIDTH
    height: int = PlayerDefaults.HEIGHT
    vel_y: float = 0.0
    grounded: bool = False
    speed: int = PlayerDefaults.SPEED

    @classmethod
    def spawn(cls) -> "Player":
        """Fresh player standing on the first platform."""
        return cls(x=PlayerDefaults.SPAWN_X, y=PlayerDefaults.SPAWN_Y, grounded=True)

    # ===========================================================
    # Geometry
    # ===========================================================

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def overlaps_horizontally(self, platform: Platform) -> bool:
        return self.right > platform.left and self.x < platform.right

    def is_landing_on(self, platform: Platform) -> bool:
        """True when the bottom edge sits inside the platform's vertical band."""
        return (platform.top <= self.bottom <= platform.bottom
                and self.overlaps_horizontally(platform))

    # ===========================================================
    # Kinematics
    # ===========================================================

    def update(self, controls: InputFrame, platforms: Sequence[Platform]) -> Optional[Outcome]:
        """
        Advance the player by one tick.

        Args:
            controls: Held left/right/jump state for this tick
            platforms: Static collision surfaces

        Returns:
            Outcome.LOSE, Outcome.WIN or None. Lose takes priority when both
            conditions hold in the same tick.
        """
        self._move_horizontal(controls)

        self.vel_y += Physics.GRAVITY
        self.y += math.floor(self.vel_y)

        self._resolve_platforms(platforms)

        outcome = None
        if self.bottom >= Level.GROUND_LEVEL:
            self._land(Level.GROUND_LEVEL)
            outcome = Outcome.LOSE

        if self.right >= Display.WIDTH and outcome is None:
            outcome = Outcome.WIN

        if self.grounded and controls.jump:
            self.vel_y = Physics.JUMP_SPEED
            self.grounded = False

        return outcome

    def _move_horizontal(self, controls: InputFrame):
        self.x += self.speed * (int(controls.right) - int(controls.left))
        self.x = max(0, min(self.x, Display.WIDTH - self.width))

    def _resolve_platforms(self, platforms: Sequence[Platform]):
        """Snap onto the highest platform whose band contains the bottom edge."""
        self.grounded = False

        support = None
        for platform in platforms:
            if not self.is_landing_on(platform):
                continue
            if support is None or platform.top < support.top:
                support = platform

        if support is not None:
            self._land(support.top)
            DebugLogger.trace(f"Landed on platform at ({support.x}, {support.y})")

    def _land(self, surface_y: int):
        self.y = surface_y - self.height
        self.grounded = True
        self.vel_y = 0.0
