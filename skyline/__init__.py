"""
Skyline Jump: a small 2D platformer with map and skin selection.
"""

__version__ = "1.0.0"
