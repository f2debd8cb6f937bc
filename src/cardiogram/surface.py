from __future__ import annotations

from typing import Protocol

from .types import (
    DrawCommand,
    Fill,
    Font,
    LineCommand,
    Point,
    Rect,
    RectCommand,
    Stroke,
    TextCommand,
)


class Surface(Protocol):
    """Zeichenfläche, die bei jedem Repaint übergeben wird (Pixelkoordinaten, y nach unten)."""

    @property
    def clip(self) -> Rect: ...

    def draw_line(self, p1: Point, p2: Point, stroke: Stroke) -> None: ...

    def fill_rect(self, rect: Rect, fill: Fill) -> None: ...

    def measure_text(self, text: str, font: Font) -> tuple[float, float]: ...

    def draw_text(self, text: str, font: Font, fill: Fill, rect: Rect) -> None: ...


class RecordingSurface:
    """Zeichnet nicht, sondern merkt sich alle Befehle in Reihenfolge.

    Textmaße sind eine feste Näherung (Zeichenbreite/Zeilenhöhe relativ zur
    Schriftgröße), damit Ergebnisse ohne Font-Backend reproduzierbar sind.
    """

    CHAR_WIDTH = 0.6
    LINE_HEIGHT = 1.2

    def __init__(self, width: float, height: float, x: float = 0.0, y: float = 0.0) -> None:
        self._clip = Rect(x, y, width, height)
        self.commands: list[DrawCommand] = []

    @property
    def clip(self) -> Rect:
        return self._clip

    def resize(self, width: float, height: float) -> None:
        self._clip = Rect(self._clip.x, self._clip.y, width, height)

    def draw_line(self, p1: Point, p2: Point, stroke: Stroke) -> None:
        self.commands.append(LineCommand(p1, p2, stroke))

    def fill_rect(self, rect: Rect, fill: Fill) -> None:
        self.commands.append(RectCommand(rect, fill))

    def measure_text(self, text: str, font: Font) -> tuple[float, float]:
        return len(text) * font.size * self.CHAR_WIDTH, font.size * self.LINE_HEIGHT

    def draw_text(self, text: str, font: Font, fill: Fill, rect: Rect) -> None:
        self.commands.append(TextCommand(text, font, fill, rect))

    def clear(self) -> None:
        self.commands.clear()

    def lines(self, stroke: Stroke | None = None) -> list[LineCommand]:
        return [
            c
            for c in self.commands
            if isinstance(c, LineCommand) and (stroke is None or c.stroke == stroke)
        ]

    def texts(self) -> list[TextCommand]:
        return [c for c in self.commands if isinstance(c, TextCommand)]
