from __future__ import annotations

from types import SimpleNamespace

from widgetkit.api.geometry import Rect
from widgetkit.api.render import Path, PathBuilder
from widgetkit.ui_runtime.widgets import Button


def play_icon() -> Path:
    return PathBuilder().move_to(4.0, 3.0).line_to(4.0, 13.0).line_to(12.0, 8.0).build()


def placed_button(rect: Rect) -> Button:
    button = Button(play_icon())
    button.layout(rect)
    return button


class FakeBitmapContext:
    def __init__(self) -> None:
        self.bitmaps: list[object] = []

    def set_bitmap(self, bitmap: object) -> None:
        self.bitmaps.append(bitmap)


class FakeCanvas:
    def __init__(self, size: tuple[float, float] = (800.0, 600.0)) -> None:
        self.handlers: dict[str, list] = {}
        self.size = size
        self.titles: list[str] = []
        self.closed = 0
        self.draw_callbacks: list = []
        self.context_requests: list[str] = []
        self.bitmap_context = FakeBitmapContext()

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def get_logical_size(self) -> tuple[float, float]:
        return self.size

    def get_context(self, kind: str) -> FakeBitmapContext:
        self.context_requests.append(kind)
        return self.bitmap_context

    def request_draw(self, callback=None) -> None:
        if callback is not None:
            self.draw_callbacks.append(callback)

    def set_title(self, title: str) -> None:
        self.titles.append(title)

    def close(self) -> None:
        self.closed += 1

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in self.handlers.get(event_type, []):
            handler(event)


class FakeFace:
    """Freetype-like face whose glyphs are solid squares of `glyph_px` pixels."""

    def __init__(self, glyph_px: int = 2, advance_px: int = 3) -> None:
        self.glyph_px = glyph_px
        self.advance_px = advance_px
        self.loaded_chars: list[str] = []
        self.size = SimpleNamespace(ascender=glyph_px * 64)
        self.glyph = None

    def set_pixel_sizes(self, width: int, height: int) -> None:
        _ = (width, height)

    def load_char(self, character: str) -> None:
        self.loaded_chars.append(character)
        px = self.glyph_px
        if character == " ":
            bitmap = SimpleNamespace(width=0, rows=0, pitch=0, buffer=[])
        else:
            bitmap = SimpleNamespace(width=px, rows=px, pitch=px, buffer=[255] * (px * px))
        self.glyph = SimpleNamespace(
            bitmap=bitmap,
            bitmap_left=0,
            bitmap_top=px,
            advance=SimpleNamespace(x=self.advance_px * 64),
        )
