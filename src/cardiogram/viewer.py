from __future__ import annotations

import logging

import matplotlib.pyplot as plt

from .animator import WaveformAnimator
from .grid import draw_grid
from .mpl_surface import MatplotlibSurface

logger = logging.getLogger(__name__)


class Viewer:
    """Fenster mit EKG-Raster und laufender Kurve.

    Timer: pro Intervall ein Tick, danach Repaint. Klick, Leertaste oder "t"
    schaltet die Animation an/aus, "q"/Escape schließt das Fenster.
    """

    TOGGLE_KEYS = (" ", "space", "t")

    def __init__(
        self,
        animator: WaveformAnimator,
        width: int = 800,
        height: int = 300,
        dpi: float = 100.0,
        debug_keys: bool = False,
    ) -> None:
        self.animator = animator
        self.debug_keys = debug_keys

        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.surface = MatplotlibSurface(self.fig)

        self.timer = self.fig.canvas.new_timer(interval=animator.style.interval_ms)
        self.timer.add_callback(self.on_tick)

        self.fig.canvas.mpl_connect("key_press_event", self.on_key)
        self.fig.canvas.mpl_connect("button_press_event", self.on_click)
        self.fig.canvas.mpl_connect("resize_event", self.on_resize)
        self.fig.canvas.mpl_connect("close_event", self.on_close)

        self.paint()
        if animator.enabled:
            self.timer.start()

    @property
    def running(self) -> bool:
        return self.animator.enabled

    def set_running(self, running: bool) -> None:
        # Timer und Flag immer gemeinsam schalten
        self.animator.set_enabled(running)
        if running:
            self.timer.start()
        else:
            self.timer.stop()

    def toggle(self) -> None:
        self.set_running(not self.running)

    def on_tick(self) -> None:
        self.animator.tick()
        self.repaint()

    def on_key(self, event) -> None:
        k = (event.key or "").lower()
        if self.debug_keys:
            print("key:", repr(event.key))

        if k in self.TOGGLE_KEYS:
            self.toggle()
        elif k in ("q", "escape"):
            plt.close(self.fig)

    def on_click(self, event) -> None:
        if self.debug_keys:
            print("click:", event.button)
        self.toggle()

    def on_resize(self, event) -> None:
        logger.debug("Resize auf %gx%g", self.surface.clip.width, self.surface.clip.height)
        self.repaint()

    def on_close(self, event) -> None:
        self.timer.stop()

    def paint(self) -> None:
        """Einen Frame aufbauen: erst Raster, dann Kurve und Beschriftung."""
        s = self.surface
        s.begin()
        draw_grid(s, self.animator.style)
        self.animator.render(s)
        s.flush()

    def repaint(self) -> None:
        self.paint()
        self.fig.canvas.draw_idle()

    def advance(self, ticks: int) -> None:
        """`ticks` Timer-Zyklen synchron durchlaufen (ohne Event-Loop)."""
        for _ in range(ticks):
            self.animator.tick()
            self.paint()
