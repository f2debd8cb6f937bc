from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True, slots=True)
class Stroke:
    color: RGB
    width: float = 1.0


@dataclass(frozen=True, slots=True)
class Fill:
    color: RGB


@dataclass(frozen=True, slots=True)
class Font:
    family: str
    size: float  # Punkt


@dataclass(frozen=True, slots=True)
class LineCommand:
    start: Point
    end: Point
    stroke: Stroke


@dataclass(frozen=True, slots=True)
class RectCommand:
    rect: Rect
    fill: Fill


@dataclass(frozen=True, slots=True)
class TextCommand:
    text: str
    font: Font
    fill: Fill
    rect: Rect


DrawCommand = LineCommand | RectCommand | TextCommand
