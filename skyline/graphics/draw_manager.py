"""
draw_manager.py
---------------
Layered draw queue rendered once per frame.

Responsibilities:
- Maintain layered draw queue
- Skip null textures instead of failing
- Render queued surfaces and shapes in layer order
"""

import pygame

from skyline.core.debug.debug_logger import DebugLogger
from skyline.core.runtime.game_settings import Colors


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize draw manager with empty queues."""
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self.shape_layers = {}    # {layer: [shape_data, ...]}
        self.skipped = 0
        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        self.surface_layers.clear()
        self.shape_layers.clear()
        self.skipped = 0

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        A None surface is a texture that failed to load and is skipped.
        """
        if surface is None or rect is None:
            self.skipped += 1
            return
        self.surface_layers.setdefault(layer, []).append((surface, rect))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """Queue a primitive shape ("rect" only is drawn filled)."""
        self.shape_layers.setdefault(layer, []).append((shape_type, rect, color, kwargs))

    def queued_count(self) -> int:
        surfaces = sum(len(items) for items in self.surface_layers.values())
        shapes = sum(len(items) for items in self.shape_layers.values())
        return surfaces + shapes

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Main display surface
            debug: Log render stats if True
        """
        target_surface.fill(Colors.CLEAR)

        layers = sorted(set(self.surface_layers) | set(self.shape_layers))
        for layer in layers:
            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)
            items = self.surface_layers.get(layer)
            if items:
                target_surface.blits(items)

        if debug:
            DebugLogger.state(
                f"Rendered {self.queued_count()} items ({self.skipped} skipped)",
                category="render",
            )

    def _draw_shape(self, surface, shape_type, rect, color, **kwargs):
        width = kwargs.get("width", 0)
        if shape_type == "rect":
            pygame.draw.rect(surface, color, rect, width)
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="render")
