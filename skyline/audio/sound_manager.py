"""
sound_manager.py
----------------
Background track playback: opened once, started on PLAY, paused on ESC.
"""

import os

import pygame

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.errors import InitializationError, AssetLoadError
from skyline.core.runtime.game_settings import Assets


class SoundManager:
    """Owns the mixer and the single music clip."""

    def __init__(self, asset_root=Assets.ROOT, track=Assets.MUSIC, enabled=True):
        """
        Open the audio device and load the track.

        Args:
            asset_root: Directory the track path is relative to
            track: Clip path
            enabled: False skips the audio device entirely (--mute)

        Raises:
            InitializationError: If the mixer cannot be opened
            AssetLoadError: If the track cannot be loaded
        """
        self.enabled = enabled
        self.sound = None
        self.channel = None

        if not enabled:
            DebugLogger.init_entry("SoundManager", "MUTED")
            return

        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise InitializationError(f"Failed to open audio device: {e}") from e

        path = os.path.join(asset_root, track)
        try:
            self.sound = pygame.mixer.Sound(path)
        except (FileNotFoundError, pygame.error) as e:
            pygame.mixer.quit()
            raise AssetLoadError(path, str(e)) from e

        DebugLogger.init_entry("SoundManager")
        DebugLogger.init_sub(f"Loaded {track}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ===========================================================
    # Playback
    # ===========================================================

    def play(self):
        """Start the track, or resume it if it was paused."""
        if self.sound is None:
            return
        if self.channel is None:
            self.channel = self.sound.play()
            DebugLogger.state("Music started", category="audio")
        else:
            self.channel.unpause()
            DebugLogger.state("Music resumed", category="audio")

    def pause(self):
        if self.channel is not None:
            self.channel.pause()
            DebugLogger.state("Music paused", category="audio")

    def close(self):
        """Stop playback and release the audio device."""
        if self.sound is None:
            return
        self.sound.stop()
        self.sound = None
        self.channel = None
        pygame.mixer.quit()
        DebugLogger.system("Audio device closed", category="audio")
