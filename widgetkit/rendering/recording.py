"""Drawing surface that records immutable draw commands."""

from __future__ import annotations

from dataclasses import dataclass

from widgetkit.api.geometry import Point
from widgetkit.api.render import IDENTITY, Color, Font, Mat2x2, Path


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """One recorded draw call."""

    kind: str
    pos: Point
    color: Color
    transform: Mat2x2 = IDENTITY
    data: tuple[tuple[str, object], ...] = ()

    def value(self, key: str, default: object | None = None) -> object | None:
        for name, item in self.data:
            if name == key:
                return item
        return default


class RecordingFrame:
    """Frame implementation used headless and in tests; keeps calls in order."""

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        self.width = float(width)
        self.height = float(height)
        self.clear_color: Color | None = None
        self.finished = False
        self._commands: list[DrawCommand] = []

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        return tuple(self._commands)

    def kinds(self) -> tuple[str, ...]:
        return tuple(command.kind for command in self._commands)

    def clear(self, color: Color) -> None:
        self.clear_color = color
        self._commands.clear()

    def draw_rect(self, pos: Point, size: Point, transform: Mat2x2, color: Color) -> None:
        self._commands.append(
            DrawCommand(kind="rect", pos=pos, color=color, transform=transform, data=(("size", size),))
        )

    def draw_path(self, path: Path, pos: Point, transform: Mat2x2, color: Color) -> None:
        self._commands.append(
            DrawCommand(kind="path", pos=pos, color=color, transform=transform, data=(("path", path),))
        )

    def draw_text(
        self,
        font: Font,
        size_px: float,
        text: str,
        pos: Point,
        transform: Mat2x2,
        color: Color,
    ) -> None:
        self._commands.append(
            DrawCommand(
                kind="text",
                pos=pos,
                color=color,
                transform=transform,
                data=(("font", font), ("size_px", float(size_px)), ("text", text)),
            )
        )

    def finish(self) -> None:
        self.finished = True


class RecordingRenderer:
    """Headless renderer keeping the most recent recorded frame."""

    def __init__(self) -> None:
        self.frames_begun = 0
        self.last_frame: RecordingFrame | None = None

    def begin_frame(self, width: float, height: float) -> RecordingFrame:
        self.frames_begun += 1
        self.last_frame = RecordingFrame(width, height)
        return self.last_frame


__all__ = ["DrawCommand", "RecordingFrame", "RecordingRenderer"]
