"""
Core value objects shared by layout, interpreter and renderers.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A canvas coordinate in SVG user units (y grows downwards)."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a new point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to *other*."""
        return math.hypot(other.x - self.x, other.y - self.y)
