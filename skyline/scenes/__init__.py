"""
Scene module exports.

Provides base scene classes and lifecycle states.
"""

from skyline.scenes.scene_state import SceneState
from skyline.scenes.base_scene import BaseScene
from skyline.scenes.menu_scene import MenuScene

__all__ = [
    'SceneState',
    'BaseScene',
    'MenuScene',
]
