from __future__ import annotations

import logging
from collections.abc import Iterable

from .style import CardiogramStyle
from .surface import Surface
from .types import Point, Rect

logger = logging.getLogger(__name__)


class WaveformAnimator:
    """Schiebt eine feste Punktfolge pro Tick um 1 px nach rechts.

    Sobald der erste Punkt (verschoben) rechts aus der Fläche läuft, springt
    der Zähler beim Repaint auf 0 zurück. Der Repaint, der den Rücksprung
    auslöst, zeichnet noch mit dem alten Versatz.
    """

    def __init__(
        self,
        points: Iterable[Point] = (),
        style: CardiogramStyle | None = None,
        enabled: bool = False,
    ) -> None:
        self.style = style or CardiogramStyle()
        self._points: tuple[Point, ...] = tuple(points)
        self._counter = 0
        self._enabled = enabled

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_sequence(self, points: Iterable[Point]) -> None:
        # nur als Ganzes ersetzen, nie einzeln ändern
        self._points = tuple(points)

    def set_enabled(self, enabled: bool) -> None:
        if enabled != self._enabled:
            logger.debug("Animation %s", "an" if enabled else "aus")
        self._enabled = enabled

    def tick(self) -> None:
        # Ticks im ausgeschalteten Zustand werden verworfen, nicht gesammelt.
        if self._enabled:
            self._counter += 1

    def render(self, surface: Surface) -> None:
        clip = surface.clip
        offset = self._counter
        pts = self._points

        for p1, p2 in zip(pts, pts[1:]):
            surface.draw_line(
                Point(p1.x + offset, p1.y),
                Point(p2.x + offset, p2.y),
                self.style.trace,
            )

        # Nur der erste Punkt entscheidet über den Rücksprung, auch wenn er
        # nicht der rechteste ist.
        if pts and pts[0].x + offset > clip.width:
            logger.debug("Wrap bei Versatz %d (Breite %g)", offset, clip.width)
            self._counter = 0

        self._draw_caption(surface, clip)

    def _draw_caption(self, surface: Surface, clip: Rect) -> None:
        st = self.style
        w, h = surface.measure_text(st.caption, st.caption_font)
        rect = Rect(
            clip.right - w - st.caption_pad,
            clip.bottom - h - st.caption_pad / 2,
            w,
            h,
        )
        surface.draw_text(st.caption, st.caption_font, st.text, rect)
