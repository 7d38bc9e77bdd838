"""
menu_scene.py
-------------
Base class for button-driven screens.
"""

import pygame

from skyline.core.runtime.game_state import Action
from skyline.scenes.base_scene import BaseScene


class MenuScene(BaseScene):
    """Routes mouse motion to hover state and clicks to button actions."""

    screen_name = None

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.ui.update_hover(self.screen_name, event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            action = self.ui.handle_click(self.screen_name, event.pos)
            if action is not None:
                self.on_action(Action(action))

    def on_action(self, action: Action):
        """Forward a button action to the state machine."""
        self.scene_manager.dispatch(action)

    def update(self, dt: float):
        pass

    def draw(self, draw_manager):
        self.draw_background(draw_manager)
        self.ui.draw(self.screen_name, draw_manager)
