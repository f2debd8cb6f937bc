"""Konstanten und Zeichenstil für das EKG-Raster.

Raster nach EKG-Papier: 1 Kästchen = 1 mm, jede 5. Linie betont.

    1 Zoll = 25.4 mm
    1 mm   = {DPI} / 25.4 Pixel

Die Pixeldichte ist fest (FIXED_DPI), nicht die vom Display gemeldete.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .types import Fill, Font, Point, Stroke

MM_PER_INCH = 25.4
FIXED_DPI = 300.0
MAJOR_EVERY = 5
TICK_INTERVAL_MS = 40

CAPTION = "Grid intervals: 0.2 sec, 0.5 mV (ECG)"
CAPTION_PAD = 10.0

# Ein Herzschlag zum Vorführen (Pixelkoordinaten, y nach unten)
DEMO_POINTS: tuple[Point, ...] = (
    Point(0, 46),
    Point(60, 46),
    Point(90, 90),
    Point(110, 5),
    Point(120, 50),
    Point(150, 50),
    Point(160, 55),
    Point(170, 60),
    Point(180, 70),
    Point(185, 69),
    Point(190, 70),
    Point(195, 40),
)


@dataclass(frozen=True, slots=True)
class CardiogramStyle:
    background: Fill = field(default_factory=lambda: Fill((246, 247, 233)))
    grid: Stroke = field(default_factory=lambda: Stroke((224, 206, 194)))
    trace: Stroke = field(default_factory=lambda: Stroke((39, 25, 24)))
    text: Fill = field(default_factory=lambda: Fill((39, 25, 24)))
    caption_font: Font = field(default_factory=lambda: Font("sans-serif", 9))
    caption: str = CAPTION
    caption_pad: float = CAPTION_PAD
    density: float = FIXED_DPI
    interval_ms: int = TICK_INTERVAL_MS

    def with_density(self, density: float) -> CardiogramStyle:
        return replace(self, density=density)
