from __future__ import annotations

from .style import MAJOR_EVERY, MM_PER_INCH, CardiogramStyle
from .surface import Surface
from .types import Point, Rect


def grid_gap(density: float) -> float:
    """Abstand zweier Rasterlinien in Pixeln (1 mm bei `density` Pixel/Zoll)."""
    return density / MM_PER_INCH


def grid_offsets(extent: float, gap: float) -> list[float]:
    """Linienpositionen 0, g, 2g, ... strikt kleiner als `extent`."""
    if extent <= 0 or gap <= 0:
        return []

    offsets: list[float] = []
    i = 0
    while i * gap < extent:
        offsets.append(i * gap)
        i += 1
    return offsets


def grid_lines(clip: Rect, density: float) -> list[tuple[Point, Point]]:
    """Alle Rasterlinien als (Start, Ende).

    Zuerst die horizontalen, dann die vertikalen. Jede 5. Linie (Index 0, 5,
    10, ...) bekommt eine zweite Linie 1 px daneben, das ergibt die dicken
    5-mm-Linien ohne eigene Strichstärke.
    """
    if clip.width <= 0 or clip.height <= 0:
        return []

    gap = grid_gap(density)
    lines: list[tuple[Point, Point]] = []

    for i, y in enumerate(grid_offsets(clip.height, gap)):
        lines.append((Point(0, y), Point(clip.right, y)))
        if i % MAJOR_EVERY == 0:
            lines.append((Point(0, y + 1), Point(clip.right, y + 1)))

    for i, x in enumerate(grid_offsets(clip.width, gap)):
        lines.append((Point(x, 0), Point(x, clip.bottom)))
        if i % MAJOR_EVERY == 0:
            lines.append((Point(x + 1, 0), Point(x + 1, clip.bottom)))

    return lines


def draw_grid(surface: Surface, style: CardiogramStyle) -> None:
    """Hintergrund füllen und Millimeterraster zeichnen."""
    clip = surface.clip
    surface.fill_rect(clip, style.background)
    for p1, p2 in grid_lines(clip, style.density):
        surface.draw_line(p1, p2, style.grid)
