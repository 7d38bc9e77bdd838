"""
result_scene.py
---------------
End-of-run screens.
"""

from skyline.scenes.menu_scene import MenuScene


class WinScene(MenuScene):
    screen_name = "win"


class LoseScene(MenuScene):
    screen_name = "lose"
