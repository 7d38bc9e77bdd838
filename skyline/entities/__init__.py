"""
skyline/entities/__init__.py
----------------------------
Entity module exports.

Exports:
    Platform        - Immutable collision rectangle
    LEVEL_PLATFORMS - The fixed level layout
    Player          - Player state and per-tick kinematics
    Outcome         - Win/lose signal returned by Player.update
"""

from skyline.entities.platform import Platform, LEVEL_PLATFORMS
from skyline.entities.player import Player, Outcome

__all__ = [
    'Platform',
    'LEVEL_PLATFORMS',
    'Player',
    'Outcome',
]
