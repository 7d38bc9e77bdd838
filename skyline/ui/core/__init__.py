"""
UI core system exports.

Provides UI management, element loading, and anchor resolution.
"""

from skyline.ui.core.ui_manager import UIManager
from skyline.ui.core.ui_loader import UILoader
from skyline.ui.core.anchor_resolver import AnchorResolver

__all__ = [
    'UIManager',
    'UILoader',
    'AnchorResolver',
]
