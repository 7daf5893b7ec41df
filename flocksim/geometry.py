"""Plane vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_sqr(self, other: Vec2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return self * (1.0 / length)
        return Vec2()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains_point(self, point: Vec2) -> bool:
        """True when the point lies inside; left/top edges are inclusive."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def intersects_circle(self, center: Vec2, radius: float) -> bool:
        """True when a circle touches or overlaps the rectangle."""
        half_w = self.width / 2.0
        half_h = self.height / 2.0
        dx = abs(center.x - (self.x + half_w))
        dy = abs(center.y - (self.y + half_h))

        if dx > half_w + radius or dy > half_h + radius:
            return False
        if dx <= half_w or dy <= half_h:
            return True
        corner_sqr = (dx - half_w) ** 2 + (dy - half_h) ** 2
        return corner_sqr <= radius * radius