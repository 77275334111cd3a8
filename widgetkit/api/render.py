"""Drawing surface contract and the value types it consumes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from widgetkit.api.geometry import Point


@dataclass(frozen=True, slots=True)
class Color:
    """Straight-alpha RGBA color with channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(r, g, b, a)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Mat2x2:
    """Row-major 2x2 linear transform."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0

    @classmethod
    def identity(cls) -> Mat2x2:
        return cls()

    @property
    def is_identity(self) -> bool:
        return self.a == 1.0 and self.b == 0.0 and self.c == 0.0 and self.d == 1.0

    def apply(self, point: Point) -> Point:
        return Point(self.a * point.x + self.b * point.y, self.c * point.x + self.d * point.y)


IDENTITY = Mat2x2.identity()


@dataclass(frozen=True, slots=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    x: float
    y: float


PathSegment = MoveTo | LineTo


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable vector path; every subpath is implicitly closed when filled."""

    segments: tuple[PathSegment, ...] = ()

    def subpaths(self) -> tuple[tuple[Point, ...], ...]:
        """Split the path into point lists, one per move_to."""
        out: list[tuple[Point, ...]] = []
        current: list[Point] = []
        for segment in self.segments:
            if isinstance(segment, MoveTo):
                if len(current) > 1:
                    out.append(tuple(current))
                current = [Point(segment.x, segment.y)]
            else:
                if not current:
                    current = [Point(0.0, 0.0)]
                current.append(Point(segment.x, segment.y))
        if len(current) > 1:
            out.append(tuple(current))
        return tuple(out)


class PathBuilder:
    """Fluent builder producing an immutable Path."""

    def __init__(self) -> None:
        self._segments: list[PathSegment] = []

    def move_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(MoveTo(float(x), float(y)))
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(LineTo(float(x), float(y)))
        return self

    def build(self) -> Path:
        return Path(tuple(self._segments))


@dataclass(frozen=True, slots=True, eq=False)
class Font:
    """Shared, read-only font resource referenced by text-drawing widgets.

    `face` is an opaque backend handle; it is None when no face could be loaded,
    in which case surfaces skip glyph output.
    """

    path: str
    face: object | None = None

    @property
    def loaded(self) -> bool:
        return self.face is not None


class DrawingSurface(Protocol):
    """Primitives widgets draw with; buffering and flushing belong to the surface."""

    def draw_rect(self, pos: Point, size: Point, transform: Mat2x2, color: Color) -> None:
        """Fill a rectangle whose size vector is mapped by transform."""

    def draw_path(self, path: Path, pos: Point, transform: Mat2x2, color: Color) -> None:
        """Fill a vector path offset by pos."""

    def draw_text(
        self,
        font: Font,
        size_px: float,
        text: str,
        pos: Point,
        transform: Mat2x2,
        color: Color,
    ) -> None:
        """Draw one single-line text run with its top-left at pos."""


class Frame(DrawingSurface, Protocol):
    """Drawing surface with a per-frame lifecycle driven by the host."""

    def clear(self, color: Color) -> None:
        """Fill the whole frame with one color."""

    def finish(self) -> None:
        """Flush buffered output for this frame."""


__all__ = [
    "Color",
    "DrawingSurface",
    "Font",
    "Frame",
    "IDENTITY",
    "LineTo",
    "Mat2x2",
    "MoveTo",
    "Path",
    "PathBuilder",
    "PathSegment",
    "WHITE",
]
