"""Software rasterizer drawing into numpy RGBA bitmaps."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import freetype
import numpy as np

from widgetkit.api.geometry import Point
from widgetkit.api.render import Color, Font, Mat2x2, Path
from widgetkit.api.window import BitmapPresenter
from widgetkit.runtime.errors import log_backend_failure

_LOG = logging.getLogger("widgetkit.rendering.bitmap")


@dataclass(frozen=True, slots=True)
class Glyph:
    """Rasterized glyph coverage with placement metrics in pixels."""

    left: int
    top: int
    advance: float
    coverage: np.ndarray


class GlyphCache:
    """Glyph rasters shared across frames, keyed by face, size and character.

    Entries hold the face itself, so a cached face stays alive as long as the cache.
    """

    def __init__(self) -> None:
        self._glyphs: dict[tuple[object, int, str], Glyph | None] = {}
        self._ascenders: dict[tuple[object, int], float] = {}

    def __len__(self) -> int:
        return len(self._glyphs)

    def ascender(self, face: object, size_px: int) -> float:
        key = (face, size_px)
        cached = self._ascenders.get(key)
        if cached is not None:
            return cached
        face.set_pixel_sizes(0, size_px)
        value = float(face.size.ascender) / 64.0
        self._ascenders[key] = value
        return value

    def glyph(self, face: object, size_px: int, character: str) -> Glyph | None:
        key = (face, size_px, character)
        if key not in self._glyphs:
            self._glyphs[key] = _rasterize_glyph(face, size_px, character)
        return self._glyphs[key]


def _rasterize_glyph(face: object, size_px: int, character: str) -> Glyph | None:
    face.set_pixel_sizes(0, size_px)
    try:
        face.load_char(character)
    except freetype.FT_Exception:
        log_backend_failure(_LOG, "glyph_load_failed", char=character, size=size_px)
        return None
    glyph = face.glyph
    bitmap = glyph.bitmap
    width = int(bitmap.width)
    rows = int(bitmap.rows)
    advance = float(glyph.advance.x) / 64.0
    if width <= 0 or rows <= 0:
        return Glyph(left=0, top=0, advance=max(advance, size_px * 0.3), coverage=np.zeros((0, 0)))
    pitch = abs(int(bitmap.pitch)) or width
    raw = np.frombuffer(bytes(bitmap.buffer), dtype=np.uint8)
    raster = raw[: rows * pitch].reshape(rows, pitch)[:, :width]
    if int(bitmap.pitch) < 0:
        raster = raster[::-1]
    return Glyph(
        left=int(glyph.bitmap_left),
        top=int(glyph.bitmap_top),
        advance=max(advance, float(width)),
        coverage=raster.astype(np.float32) / 255.0,
    )


class BitmapFrame:
    """Frame rasterizing rects, even-odd filled paths and glyph runs.

    Text transforms map the pen offsets of each glyph; glyph rasters are not
    resampled.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        cache: GlyphCache,
        presenter: BitmapPresenter | None = None,
    ) -> None:
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self._cache = cache
        self._presenter = presenter
        self._pixels = np.zeros((self.height, self.width, 3), dtype=np.float32)
        self._warned_faceless: set[str] = set()

    @property
    def pixels(self) -> np.ndarray:
        """Straight RGB channels in [0, 1], shape (height, width, 3)."""
        return self._pixels

    def clear(self, color: Color) -> None:
        self._pixels[:, :] = (color.r * color.a, color.g * color.a, color.b * color.a)

    def draw_rect(self, pos: Point, size: Point, transform: Mat2x2, color: Color) -> None:
        if transform.is_identity:
            x0, x1 = self._clip_span(pos.x, pos.x + size.x, self.width)
            y0, y1 = self._clip_span(pos.y, pos.y + size.y, self.height)
            if x0 < x1 and y0 < y1:
                self._blend((slice(y0, y1), slice(x0, x1)), None, color)
            return
        corners = tuple(
            _offset(pos, transform.apply(corner))
            for corner in (Point(0.0, 0.0), Point(size.x, 0.0), size, Point(0.0, size.y))
        )
        self._fill_polygons((corners,), color)

    def draw_path(self, path: Path, pos: Point, transform: Mat2x2, color: Color) -> None:
        polygons = tuple(
            tuple(_offset(pos, transform.apply(point)) for point in subpath)
            for subpath in path.subpaths()
        )
        if polygons:
            self._fill_polygons(polygons, color)

    def draw_text(
        self,
        font: Font,
        size_px: float,
        text: str,
        pos: Point,
        transform: Mat2x2,
        color: Color,
    ) -> None:
        if not text:
            return
        face = font.face
        if face is None:
            if font.path not in self._warned_faceless:
                self._warned_faceless.add(font.path)
                _LOG.debug("text_skipped reason=no_face font=%r", font.path)
            return
        pixel_size = max(1, int(round(size_px)))
        ascender = self._cache.ascender(face, pixel_size)
        pen = 0.0
        for character in text:
            glyph = self._cache.glyph(face, pixel_size, character)
            if glyph is None:
                continue
            if glyph.coverage.size:
                origin = _offset(pos, transform.apply(Point(pen + glyph.left, ascender - glyph.top)))
                self._blit(glyph.coverage, int(round(origin.x)), int(round(origin.y)), color)
            pen += glyph.advance

    def bitmap(self) -> np.ndarray:
        """Return the frame as an opaque (height, width, 4) uint8 array."""
        rgb = np.clip(self._pixels * 255.0 + 0.5, 0.0, 255.0).astype(np.uint8)
        alpha = np.full((self.height, self.width, 1), 255, dtype=np.uint8)
        return np.concatenate((rgb, alpha), axis=2)

    def finish(self) -> None:
        if self._presenter is not None:
            self._presenter.set_bitmap(self.bitmap())

    def _blit(self, coverage: np.ndarray, x: int, y: int, color: Color) -> None:
        rows, cols = coverage.shape
        x0, x1 = max(0, x), min(self.width, x + cols)
        y0, y1 = max(0, y), min(self.height, y + rows)
        if x0 >= x1 or y0 >= y1:
            return
        region = coverage[y0 - y : y1 - y, x0 - x : x1 - x]
        self._blend((slice(y0, y1), slice(x0, x1)), region, color)

    def _fill_polygons(self, polygons: tuple[tuple[Point, ...], ...], color: Color) -> None:
        xs = [point.x for polygon in polygons for point in polygon]
        ys = [point.y for polygon in polygons for point in polygon]
        x0, x1 = self._clip_span(min(xs), max(xs), self.width)
        y0, y1 = self._clip_span(min(ys), max(ys), self.height)
        if x0 >= x1 or y0 >= y1:
            return
        px, py = np.meshgrid(
            np.arange(x0, x1, dtype=np.float32) + 0.5,
            np.arange(y0, y1, dtype=np.float32) + 0.5,
        )
        inside = np.zeros(px.shape, dtype=bool)
        for polygon in polygons:
            count = len(polygon)
            for index in range(count):
                start = polygon[index]
                end = polygon[(index + 1) % count]
                if start.y == end.y:
                    continue
                crosses = (start.y > py) != (end.y > py)
                x_hit = start.x + (py - start.y) * (end.x - start.x) / (end.y - start.y)
                inside ^= crosses & (px < x_hit)
        if inside.any():
            self._blend((slice(y0, y1), slice(x0, x1)), inside.astype(np.float32), color)

    def _blend(
        self,
        region: tuple[slice, slice],
        coverage: np.ndarray | None,
        color: Color,
    ) -> None:
        rgb = np.array((color.r, color.g, color.b), dtype=np.float32)
        target = self._pixels[region]
        if coverage is None:
            alpha: np.ndarray | float = float(color.a)
        else:
            alpha = (coverage * float(color.a))[..., None]
        target[...] = target * (1.0 - alpha) + rgb * alpha

    @staticmethod
    def _clip_span(start: float, end: float, limit: int) -> tuple[int, int]:
        low = int(np.floor(min(start, end)))
        high = int(np.ceil(max(start, end)))
        return max(0, low), min(limit, high)


class BitmapRenderer:
    """Owns the glyph cache and opens one BitmapFrame per displayed frame."""

    def __init__(self, presenter: BitmapPresenter | None = None, cache: GlyphCache | None = None) -> None:
        self._presenter = presenter
        self._cache = cache if cache is not None else GlyphCache()

    @property
    def cache(self) -> GlyphCache:
        return self._cache

    def begin_frame(self, width: float, height: float) -> BitmapFrame:
        return BitmapFrame(
            int(round(width)),
            int(round(height)),
            cache=self._cache,
            presenter=self._presenter,
        )


def _offset(origin: Point, delta: Point) -> Point:
    return Point(origin.x + delta.x, origin.y + delta.y)


__all__ = ["BitmapFrame", "BitmapRenderer", "Glyph", "GlyphCache"]
