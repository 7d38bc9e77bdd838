"""
Runtime configuration exports.

Provides game-wide constants and settings. All exports are lightweight
class constants with no initialization overhead.
"""

from skyline.core.runtime.game_settings import (
    Display,
    Physics,
    Level,
    PlayerDefaults,
    Assets,
    Fonts,
    Colors,
    Layers,
)

__all__ = [
    'Display',
    'Physics',
    'Level',
    'PlayerDefaults',
    'Assets',
    'Fonts',
    'Colors',
    'Layers',
]
