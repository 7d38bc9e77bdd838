"""
scene_manager.py
----------------
Owns the game session and routes events, updates and draws to the scene of
the active GameState.

Responsibilities
----------------
- Apply actions to the session and swap scenes on state changes.
- Start/pause music on PLAY and ESCAPE.
- Forward events, updates and draw calls to the active scene.
"""

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_session import GameSession
from skyline.core.runtime.game_state import GameState, Action
from skyline.scenes.scene_state import SceneState
from skyline.scenes.main_menu_scene import MainMenuScene
from skyline.scenes.selection_scene import MapSelectScene, SkinSelectScene
from skyline.scenes.game_scene import GameScene
from skyline.scenes.result_scene import WinScene, LoseScene

# (screen name, layout file) pairs loaded at startup
SCREEN_LAYOUTS = (
    ("main_menu", "screens/main_menu.yaml"),
    ("map_screen", "screens/selector.yaml"),
    ("skin_screen", "screens/selector.yaml"),
    ("win", "screens/win.yaml"),
    ("lose", "screens/lose.yaml"),
)


class SceneManager:
    """Coordinates the session record and the per-state scenes."""

    def __init__(self, input_manager, ui_manager, assets, sound_manager, session=None):
        """
        Initialize scene registry.

        Args:
            input_manager: InputManager sampling held keys
            ui_manager: UIManager with button screens
            assets: AssetSelection for backgrounds, skins and thumbnails
            sound_manager: SoundManager for the music track
            session: Starting session (fresh main-menu session if None)
        """
        self.input_manager = input_manager
        self.ui_manager = ui_manager
        self.assets = assets
        self.sound_manager = sound_manager
        DebugLogger.init_entry("SceneManager")

        for name, filename in SCREEN_LAYOUTS:
            self.ui_manager.load_screen(name, filename)

        self.scenes = {
            GameState.MAIN_MENU: MainMenuScene(self),
            GameState.MAP_SCREEN: MapSelectScene(self),
            GameState.SKIN_SCREEN: SkinSelectScene(self),
            GameState.GAME_SCREEN: GameScene(self),
            GameState.WIN_SCREEN: WinScene(self),
            GameState.LOSE_SCREEN: LoseScene(self),
        }
        DebugLogger.init_sub(f"Registered {len(self.scenes)} scenes")

        self.session = session or GameSession()
        self._enter(self.session.state)

    # ===========================================================
    # Session Control
    # ===========================================================

    @property
    def running(self) -> bool:
        return self.session.running

    @property
    def active_scene(self):
        return self.scenes[self.session.state]

    def dispatch(self, action: Action):
        """Apply an action to the session and swap scenes if the state changed."""
        previous = self.session
        self.session = previous.apply(action)
        if self.session is previous:
            return

        if previous.state == GameState.MAIN_MENU and action == Action.PLAY:
            self.sound_manager.play()
        elif action == Action.ESCAPE:
            self.sound_manager.pause()

        if self.session.state != previous.state:
            self._exit(previous.state)
            self._enter(self.session.state)

    def _enter(self, state: GameState):
        scene = self.scenes[state]
        scene.state = SceneState.ACTIVE
        scene.on_enter()
        DebugLogger.section(f"Active Scene: {scene.__class__.__name__}")

    def _exit(self, state: GameState):
        scene = self.scenes[state]
        scene.on_exit()
        scene.state = SceneState.INACTIVE
        DebugLogger.state(f"Exiting {scene.__class__.__name__}", category="scene")

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def handle_event(self, event):
        self.active_scene.handle_event(event)

    def update(self, dt: float):
        self.active_scene.update(dt)

    def draw(self, draw_manager):
        self.active_scene.draw(draw_manager)
