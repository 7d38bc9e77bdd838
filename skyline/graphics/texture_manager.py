"""
texture_manager.py
------------------
Image loading with caching and scoped release.

Responsibilities:
- Decode image files into (optionally scaled) surfaces
- Cache surfaces by path and size
- Return None for missing or corrupt files instead of raising
- Release every cached surface when the owning scope exits
"""

import os
from typing import Dict, Optional, Tuple

import pygame

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_settings import Assets


class TextureManager:
    """Loads textures relative to an asset root and owns their lifetime."""

    def __init__(self, asset_root: str = Assets.ROOT):
        self.asset_root = asset_root
        self._cache: Dict[Tuple[str, Optional[Tuple[int, int]]], Optional[pygame.Surface]] = {}
        DebugLogger.init_entry("TextureManager")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    # ===========================================================
    # Loading
    # ===========================================================

    def load(self, path: str, size: Optional[Tuple[int, int]] = None) -> Optional[pygame.Surface]:
        """
        Load an image, scaled to size when given.

        Args:
            path: Image path relative to the asset root
            size: Target (width, height) or None for native size

        Returns:
            pygame.Surface, or None if the image could not be loaded
        """
        key = (path, tuple(size) if size else None)
        if key in self._cache:
            return self._cache[key]

        full_path = os.path.join(self.asset_root, path)
        try:
            image = pygame.image.load(full_path)
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.fail(f"Unable to load image {full_path}: {e}", category="loading")
            image = None
        else:
            if pygame.display.get_surface() is not None:
                image = image.convert()
            if size:
                image = pygame.transform.scale(image, size)
            DebugLogger.action(f"Loaded texture '{path}'", category="loading")

        # Failed loads are cached too so a missing file is reported once
        self._cache[key] = image
        return image

    def release(self):
        """Drop every cached surface."""
        if self._cache:
            DebugLogger.system(f"Released {len(self._cache)} textures", category="loading")
        self._cache.clear()

    def __len__(self):
        return len(self._cache)
