"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (enter, exit)
- Shared access to the scene manager's services
- Abstract methods for update, draw, handle_event
"""

from abc import ABC, abstractmethod

import pygame

from skyline.core.runtime.game_settings import Display, Layers
from skyline.scenes.scene_state import SceneState

SCREEN_RECT = pygame.Rect(0, 0, Display.WIDTH, Display.HEIGHT)


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        scene_manager: Owner that applies actions to the game session
    """

    def __init__(self, scene_manager):
        self.scene_manager = scene_manager
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def assets(self):
        return self.scene_manager.assets

    @property
    def ui(self):
        return self.scene_manager.ui_manager

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before transitioning to another scene."""
        pass

    # ===========================================================
    # Helpers
    # ===========================================================

    def draw_background(self, draw_manager):
        """Queue the selected background; a missing texture is skipped by the queue."""
        draw_manager.queue_draw(self.assets.background(), SCREEN_RECT, layer=Layers.BACKGROUND)

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """Render the scene."""
        pass

    @abstractmethod
    def handle_event(self, event):
        """Handle input events."""
        pass
