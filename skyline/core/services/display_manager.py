"""
display_manager.py
------------------
Window creation and presentation.
"""

import pygame

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.errors import InitializationError
from skyline.core.runtime.game_settings import Display


class DisplayManager:
    """Owns the window surface the game renders into."""

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT, caption=Display.CAPTION):
        """
        Create the window.

        Raises:
            InitializationError: If the window cannot be created
        """
        DebugLogger.init_entry("DisplayManager")
        self.width = width
        self.height = height

        try:
            self.window = pygame.display.set_mode((width, height))
        except pygame.error as e:
            raise InitializationError(f"Window could not be created: {e}") from e

        pygame.display.set_caption(caption)
        DebugLogger.init_sub(f"Display Mode: Windowed ({width}x{height})")

    def get_game_surface(self) -> pygame.Surface:
        return self.window

    def present(self):
        pygame.display.flip()
