"""
test_main_loop.py
-----------------
Runs the real loop headless with scripted event batches.
"""

from unittest.mock import patch

import pygame
import pytest

from skyline.core.errors import InitializationError
from skyline.core.runtime.game_state import GameState
from skyline.core.runtime.main_loop import MainLoop

pytestmark = pytest.mark.integration


@pytest.fixture
def keep_pygame():
    """The loop quits pygame on exit; keep it alive for the rest of the run."""
    with patch("skyline.core.runtime.main_loop.pygame.quit") as quit_:
        yield quit_


def run_with_events(loop, batches):
    with patch("skyline.core.runtime.main_loop.pygame.event.get", side_effect=batches):
        loop.run()


def test_quit_event_ends_loop(tmp_path, keep_pygame):
    loop = MainLoop(asset_root=str(tmp_path), muted=True)
    run_with_events(loop, [[pygame.event.Event(pygame.QUIT)]])

    assert loop.scene_manager.running is False
    keep_pygame.assert_called_once()


def test_muted_run_never_opens_audio_device(tmp_path, keep_pygame):
    loop = MainLoop(asset_root=str(tmp_path), muted=True)
    with patch("skyline.core.runtime.main_loop.pygame.mixer.init") as mixer_init:
        run_with_events(loop, [[pygame.event.Event(pygame.QUIT)]])

    mixer_init.assert_not_called()


def test_video_failure_raises_initialization_error(tmp_path, keep_pygame):
    loop = MainLoop(asset_root=str(tmp_path), muted=True)
    with patch("skyline.core.runtime.main_loop.pygame.display.init",
               side_effect=pygame.error("no video device")):
        with pytest.raises(InitializationError):
            loop.run()
    keep_pygame.assert_called_once()


def test_frames_render_until_exit_clicked(tmp_path, keep_pygame):
    loop = MainLoop(asset_root=str(tmp_path), muted=True)
    exit_click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(650, 525), button=1)
    run_with_events(loop, [[], [], [exit_click]])

    assert loop.scene_manager.session.state == GameState.MAIN_MENU
    assert loop.scene_manager.running is False
    # Missing images are skipped rather than drawn
    assert loop.draw_manager.skipped >= 1
