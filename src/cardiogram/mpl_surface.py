from __future__ import annotations

from collections import defaultdict

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from .types import RGB, Fill, Font, Point, Rect, Stroke


def _rgb(color: RGB) -> tuple[float, float, float]:
    r, g, b = color
    return r / 255.0, g / 255.0, b / 255.0


class MatplotlibSurface:
    """Surface auf einer Figure: eine Achse über die ganze Figure, 1 Einheit = 1 Pixel.

    Linien werden pro Stift gesammelt und erst bei `flush()` bzw. vor dem
    nächsten Rechteck/Text als eine LineCollection eingefügt.
    """

    def __init__(self, fig: Figure) -> None:
        self.fig = fig
        self.ax: Axes = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self._pending: dict[Stroke, list[list[tuple[float, float]]]] = defaultdict(list)
        self._z = 0
        self.begin()

    @property
    def clip(self) -> Rect:
        bbox = self.fig.bbox
        return Rect(0.0, 0.0, float(bbox.width), float(bbox.height))

    def begin(self) -> None:
        """Alten Frame verwerfen und Achse auf die aktuelle Pixelgröße setzen."""
        clip = self.clip
        self._pending.clear()
        self._z = 0
        ax = self.ax
        ax.clear()
        ax.set_axis_off()
        ax.set_xlim(0, max(clip.width, 1.0))
        # y nach unten wie auf dem Bildschirm
        ax.set_ylim(max(clip.height, 1.0), 0)

    def flush(self) -> None:
        self._flush_lines()

    def _next_z(self) -> int:
        self._z += 1
        return self._z

    def _flush_lines(self) -> None:
        px = 72.0 / self.fig.dpi
        for stroke, segments in self._pending.items():
            self.ax.add_collection(
                LineCollection(
                    segments,
                    colors=[_rgb(stroke.color)],
                    linewidths=stroke.width * px,
                    antialiased=True,
                    zorder=self._next_z(),
                ),
                autolim=False,
            )
        self._pending.clear()

    def draw_line(self, p1: Point, p2: Point, stroke: Stroke) -> None:
        self._pending[stroke].append([(p1.x, p1.y), (p2.x, p2.y)])

    def fill_rect(self, rect: Rect, fill: Fill) -> None:
        # Reihenfolge erhalten: offene Linien vorher ausgeben
        self._flush_lines()
        self.ax.add_patch(
            Rectangle(
                (rect.x, rect.y),
                rect.width,
                rect.height,
                facecolor=_rgb(fill.color),
                edgecolor="none",
                linewidth=0,
                zorder=self._next_z(),
            )
        )

    def measure_text(self, text: str, font: Font) -> tuple[float, float]:
        t = self.fig.text(0, 0, text, family=font.family, fontsize=font.size)
        try:
            bbox = t.get_window_extent()
        finally:
            t.remove()
        return float(bbox.width), float(bbox.height)

    def draw_text(self, text: str, font: Font, fill: Fill, rect: Rect) -> None:
        self._flush_lines()
        self.ax.text(
            rect.x,
            rect.y,
            text,
            family=font.family,
            fontsize=font.size,
            color=_rgb(fill.color),
            ha="left",
            va="top",
            zorder=self._next_z(),
            clip_on=False,
        )
