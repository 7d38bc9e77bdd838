"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Run one update per tick, paced by the clock
- Coordinate event handling, updates, and rendering
- Release every acquired resource on all exit paths
"""

import pygame

from skyline.audio.sound_manager import SoundManager
from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.errors import InitializationError
from skyline.core.runtime.game_settings import Assets, Physics
from skyline.core.services.display_manager import DisplayManager
from skyline.core.services.input_manager import InputManager
from skyline.core.services.scene_manager import SceneManager
from skyline.graphics.asset_selection import AssetSelection
from skyline.graphics.draw_manager import DrawManager
from skyline.graphics.texture_manager import TextureManager
from skyline.ui.core.ui_manager import UIManager


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Single-threaded: poll events, update the active scene once, draw, present.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, asset_root: str = Assets.ROOT, muted: bool = False):
        self.asset_root = asset_root
        self.muted = muted
        self.display = None
        self.scene_manager = None
        self.clock = None

    def _init_pygame(self):
        """
        Initialize the video and font subsystems.

        The mixer is left to SoundManager so --mute never opens the audio device.

        Raises:
            InitializationError: If video or font support is unavailable
        """
        try:
            pygame.display.init()
        except pygame.error as e:
            raise InitializationError(f"SDL video could not initialize: {e}") from e
        try:
            pygame.font.init()
        except pygame.error as e:
            raise InitializationError(f"Font system could not initialize: {e}") from e
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self, textures, sound):
        """Initialize display, input, drawing, ui and scene systems."""
        self.display = DisplayManager()
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()
        self.ui_manager = UIManager(asset_root=self.asset_root)
        self.assets = AssetSelection(textures)

        self.scene_manager = SceneManager(
            self.input_manager,
            self.ui_manager,
            self.assets,
            sound,
        )
        self.clock = pygame.time.Clock()

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """
        Initialize everything, then run until the game is closed.

        Raises:
            InitializationError: If a subsystem, the window or a layout fails
            AssetLoadError: If the music track is missing
        """
        DebugLogger.section("Initializing MainLoop")
        try:
            self._init_pygame()
            with TextureManager(self.asset_root) as textures, \
                    SoundManager(self.asset_root, enabled=not self.muted) as sound:
                self._init_core_systems(textures, sound)
                self._loop()
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def _loop(self):
        DebugLogger.section("Game Loop")
        dt = 1.0 / Physics.TICK_RATE

        while self.scene_manager.running:
            self.clock.tick(Physics.TICK_RATE)

            self._handle_events()
            if not self.scene_manager.running:
                break

            self.scene_manager.update(dt)
            self._draw()

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route quit requests to the session and everything else to the scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Quit signal received")
                self.scene_manager.session = self.scene_manager.session.stop()
                break
            self.scene_manager.handle_event(event)
            if not self.scene_manager.running:
                break

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.scene_manager.draw(self.draw_manager)
        self.draw_manager.render(self.display.get_game_surface())
        self.display.present()
