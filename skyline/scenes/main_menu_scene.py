"""
main_menu_scene.py
------------------
Main menu - play, skins, map, exit.
"""

from skyline.scenes.menu_scene import MenuScene


class MainMenuScene(MenuScene):
    """Main menu scene with navigation."""

    screen_name = "main_menu"
