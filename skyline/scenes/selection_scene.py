"""
selection_scene.py
------------------
Map and skin carousels.

Arrows cycle a thumbnail preview without leaving the screen, SELECT commits
the previewed asset, BACK returns to the main menu.
"""

import pygame

from skyline.core.runtime.game_settings import Assets, Display, Layers
from skyline.core.runtime.game_state import Action
from skyline.scenes.menu_scene import MenuScene
from skyline.ui.elements.carousel import Carousel


class SelectionScene(MenuScene):
    """Carousel screen; subclasses decide what SELECT commits."""

    items = ()

    def __init__(self, scene_manager):
        super().__init__(scene_manager)
        self.carousel = Carousel(self.items)

    @property
    def thumbnail_rect(self) -> pygame.Rect:
        width, height = Assets.THUMBNAIL_SIZE
        return pygame.Rect(Display.WIDTH // 2 - width // 2, Display.HEIGHT // 2 - height // 2,
                           width, height)

    def on_action(self, action: Action):
        if action == Action.PREVIOUS:
            self.carousel.previous()
        elif action == Action.NEXT:
            self.carousel.next()
        elif action == Action.SELECT:
            self.commit(self.carousel.current)
        super().on_action(action)

    def commit(self, path: str):
        raise NotImplementedError

    def draw(self, draw_manager):
        super().draw(draw_manager)
        draw_manager.queue_draw(self.assets.thumbnail(self.carousel.current),
                                self.thumbnail_rect, layer=Layers.THUMBNAIL)


class MapSelectScene(SelectionScene):
    """Chooses the background used by every screen."""

    screen_name = "map_screen"
    items = Assets.MAPS

    def commit(self, path: str):
        self.assets.select_background(path)


class SkinSelectScene(SelectionScene):
    """Chooses the player texture."""

    screen_name = "skin_screen"
    items = Assets.SKINS

    def commit(self, path: str):
        self.assets.select_skin(path)
