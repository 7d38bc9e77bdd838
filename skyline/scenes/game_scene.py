"""
game_scene.py
-------------
Gameplay screen: one kinematics step per tick over the fixed platform set.
"""

from skyline.core.runtime.game_settings import Colors, Layers
from skyline.core.runtime.game_state import Action
from skyline.entities.platform import LEVEL_PLATFORMS
from skyline.scenes.base_scene import BaseScene


class GameScene(BaseScene):
    """Runs the player against the level until it wins, loses or escapes."""

    def __init__(self, scene_manager, platforms=LEVEL_PLATFORMS):
        super().__init__(scene_manager)
        self.platforms = platforms

    def handle_event(self, event):
        if self.scene_manager.input_manager.is_back_event(event):
            self.scene_manager.dispatch(Action.ESCAPE)

    def update(self, dt: float):
        player = self.scene_manager.session.player
        controls = self.scene_manager.input_manager.poll()
        outcome = player.update(controls, self.platforms)
        if outcome is not None:
            self.scene_manager.dispatch(Action(outcome.value))

    def draw(self, draw_manager):
        self.draw_background(draw_manager)
        for platform in self.platforms:
            draw_manager.queue_shape("rect", platform.rect, Colors.PLATFORM, layer=Layers.PLATFORMS)
        player = self.scene_manager.session.player
        draw_manager.queue_draw(self.assets.player_texture(), player.rect, layer=Layers.PLAYER)
