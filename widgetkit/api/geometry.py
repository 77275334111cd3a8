"""Geometry value types shared by widgets and hosts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """2D point in logical window coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle stored as origin plus size."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_edges(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Point:
        return Point(self.w, self.h)

    def translated(self, dx: float, dy: float) -> Rect:
        """Return the same rectangle moved by an offset."""
        return Rect(self.x + dx, self.y + dy, self.w, self.h)

    def contains(self, point: Point) -> bool:
        """Return whether a point is inside, using half-open bounds on both axes."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom


EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)

__all__ = ["EMPTY_RECT", "Point", "Rect"]
