from __future__ import annotations

from dataclasses import dataclass

# Extra room around every disk, in path units.
MARGIN = 1.0


@dataclass
class BoundingRect:
    """Screen-style rectangle (y grows downwards) around emitted geometry.

    A fresh or reset rectangle is all zeros.
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def reset(self) -> None:
        self.left = self.top = self.right = self.bottom = 0.0

    def set_around(self, x: float, y: float, radius: float) -> None:
        pad = radius + MARGIN
        self.left = x - pad
        self.top = y - pad
        self.right = x + pad
        self.bottom = y + pad

    def extend(self, x: float, y: float, radius: float) -> None:
        pad = radius + MARGIN
        self.left = min(self.left, x - pad)
        self.right = max(self.right, x + pad)
        self.top = min(self.top, y - pad)
        self.bottom = max(self.bottom, y + pad)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def as_viewbox(self) -> tuple[float, float, float, float]:
        """(minx, miny, width, height) as used by an SVG viewBox."""
        return (self.left, self.top, self.width, self.height)
