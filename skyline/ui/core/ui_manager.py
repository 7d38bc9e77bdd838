"""
ui_manager.py
-------------
Owns screen layouts, button hover state, click routing and label font.
"""

import os
from typing import Dict, List, Optional, Tuple

import pygame
import yaml

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.errors import InitializationError
from skyline.core.runtime.game_settings import Display, Fonts, Assets
from skyline.ui.core.anchor_resolver import AnchorResolver
from skyline.ui.core.ui_loader import UILoader


class UIManager:
    """Manages named screens of buttons."""

    def __init__(self, game_width: int = Display.WIDTH, game_height: int = Display.HEIGHT,
                 asset_root: str = Assets.ROOT, loader=None):
        """
        Initialize ui manager.

        Args:
            game_width: Logical game width
            game_height: Logical game height
            asset_root: Directory the font path is relative to
            loader: Optional UILoader override
        """
        self.anchor_resolver = AnchorResolver(game_width, game_height)
        self.loader = loader or UILoader(self.anchor_resolver)
        self.asset_root = asset_root
        self.screens: Dict[str, List] = {}
        self._font = None

        DebugLogger.init_entry("UIManager")

    # ===================================================================
    # Screen Management
    # ===================================================================

    def load_screen(self, name: str, filename: str):
        """
        Load and register a screen from a YAML file.

        Raises:
            InitializationError: If the layout is missing or malformed
        """
        try:
            self.screens[name] = self.loader.load(filename)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            raise InitializationError(f"Could not load screen '{name}': {e}") from e
        DebugLogger.init_sub(f"Screen '{name}' ({len(self.screens[name])} buttons)")

    def buttons(self, name: str) -> List:
        return self.screens.get(name, [])

    # ===================================================================
    # Input
    # ===================================================================

    def update_hover(self, name: str, mouse_pos: Tuple[int, int]):
        """Recompute hover for the given screen's buttons only."""
        for button in self.buttons(name):
            button.set_hovered(button.contains_point(mouse_pos))

    def handle_click(self, name: str, mouse_pos: Tuple[int, int]) -> Optional[str]:
        """Return the action of the first button under the cursor, if any."""
        for button in self.buttons(name):
            action = button.handle_click(mouse_pos)
            if action is not None:
                DebugLogger.action(f"Clicked '{button.text}'", category="ui")
                return action
        return None

    # ===================================================================
    # Rendering
    # ===================================================================

    @property
    def font(self):
        if self._font is None:
            self._font = self._load_font(Fonts.SIZE)
        return self._font

    def _load_font(self, size: int):
        """Load the label font, falling back to pygame's default font."""
        font_path = os.path.join(self.asset_root, Fonts.PATH)
        try:
            return pygame.font.Font(font_path, size)
        except (FileNotFoundError, OSError, pygame.error) as e:
            DebugLogger.warn(f"Missing font at {font_path} ({e}) - using default font", category="loading")
            return pygame.font.Font(Fonts.FALLBACK, size)

    def draw(self, name: str, draw_manager):
        for button in self.buttons(name):
            button.draw(draw_manager, self.font)
