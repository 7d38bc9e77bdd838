"""
carousel.py
-----------
Wrap-around selection over a fixed list of asset paths.
"""

from typing import Sequence


class Carousel:
    """Cycles an index over a fixed list in both directions."""

    def __init__(self, items: Sequence[str], index: int = 0):
        if not items:
            raise ValueError("Carousel needs at least one item")
        self.items = tuple(items)
        self.index = index % len(self.items)

    @property
    def current(self) -> str:
        return self.items[self.index]

    def next(self) -> str:
        self.index = (self.index + 1) % len(self.items)
        return self.current

    def previous(self) -> str:
        self.index = (self.index - 1) % len(self.items)
        return self.current

    def __len__(self):
        return len(self.items)
