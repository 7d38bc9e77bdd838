"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    CAPTION: str = "Skyline Jump"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Per-tick physics constants (units are pixels and ticks)."""
    TICK_RATE: int = 120
    GRAVITY: float = 0.2
    JUMP_SPEED: float = -6.0


# ===========================================================
# Level Layout
# ===========================================================

class Level:
    """Ground line and platform dimensions."""
    GROUND_LEVEL: int = Display.HEIGHT - 50
    PLATFORM_WIDTH: int = 150
    PLATFORM_HEIGHT: int = 20

    # (x, height above the ground line) for every platform, in collision order
    LAYOUT = (
        (0, 20),
        (200, 100),
        (0, 160),
        (200, 240),
        (0, 320),
        (200, 400),
        (400, 480),
        (600, 160),
    )


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Player configuration defaults."""
    WIDTH: int = 50
    HEIGHT: int = 50
    SPEED: int = 3
    SPAWN_X: int = 0
    SPAWN_Y: int = Level.GROUND_LEVEL - Level.PLATFORM_HEIGHT - HEIGHT


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset paths, relative to the asset root."""
    ROOT: str = "."

    DEFAULT_BACKGROUND: str = "images/london.bmp"

    MAPS = (
        "images/nyc.bmp",
        "images/sydney.bmp",
        "images/london.bmp",
        "images/pisa.bmp",
        "images/moai.bmp",
        "images/pjatk.bmp",
    )

    SKINS = (
        "skins/dziekan.bmp",
        "skins/rektor.bmp",
    )

    MUSIC: str = "music/test.wav"

    THUMBNAIL_SIZE = (200, 200)


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    PATH: str = "fonts/pixeloid-font/PixeloidMono-d94EV.ttf"
    SIZE: int = 24
    FALLBACK: str = None


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """RGB colors used by the renderer."""
    CLEAR = (0, 0, 0)
    PLATFORM = (255, 229, 204)
    BUTTON = (50, 50, 50)
    BUTTON_HOVER = (100, 50, 50)
    BUTTON_TEXT = (255, 255, 255)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    PLATFORMS: int = 100
    THUMBNAIL: int = 200
    PLAYER: int = 400
    UI: int = 600
