"""
asset_selection.py
------------------
Committed map and skin choices and the textures they resolve to.

Selections outlive game sessions: a player reset keeps the chosen skin and
a return to the menu keeps the chosen background.
"""

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_settings import Display, Assets, PlayerDefaults


class AssetSelection:
    """Tracks the selected background and skin paths."""

    def __init__(self, textures, background=Assets.DEFAULT_BACKGROUND, skin=Assets.SKINS[0]):
        self.textures = textures
        self.background_path = background
        self.skin_path = skin

    def select_background(self, path: str):
        self.background_path = path
        DebugLogger.action(f"Map selected: {path}", category="ui")

    def select_skin(self, path: str):
        self.skin_path = path
        DebugLogger.action(f"Skin selected: {path}", category="ui")

    def background(self):
        return self.textures.load(self.background_path, (Display.WIDTH, Display.HEIGHT))

    def player_texture(self):
        return self.textures.load(self.skin_path, (PlayerDefaults.WIDTH, PlayerDefaults.HEIGHT))

    def thumbnail(self, path: str):
        return self.textures.load(path, Assets.THUMBNAIL_SIZE)
