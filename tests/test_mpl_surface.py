from __future__ import annotations

import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from cardiogram.animator import WaveformAnimator
from cardiogram.grid import draw_grid
from cardiogram.mpl_surface import MatplotlibSurface
from cardiogram.style import DEMO_POINTS, CardiogramStyle
from cardiogram.types import Fill, Font, Point, Rect, Stroke


@pytest.fixture
def mpl_surface() -> MatplotlibSurface:
    fig = Figure(figsize=(4, 2), dpi=100)
    FigureCanvasAgg(fig)
    return MatplotlibSurface(fig)


def test_clip_is_figure_size_in_pixels(mpl_surface):
    assert mpl_surface.clip == Rect(0, 0, 400, 200)


def test_axes_in_pixel_space_y_down(mpl_surface):
    ax = mpl_surface.ax
    assert ax.get_xlim() == (0, 400)
    assert ax.get_ylim() == (200, 0)
    assert not ax.axison


def test_lines_batched_per_stroke(mpl_surface):
    a = Stroke((255, 0, 0))
    b = Stroke((0, 0, 255), 2.0)
    mpl_surface.draw_line(Point(0, 0), Point(10, 10), a)
    mpl_surface.draw_line(Point(0, 5), Point(10, 5), a)
    mpl_surface.draw_line(Point(1, 1), Point(2, 2), b)
    mpl_surface.flush()

    cols = [c for c in mpl_surface.ax.collections if isinstance(c, LineCollection)]
    assert sorted(len(c.get_segments()) for c in cols) == [1, 2]


def test_fill_and_text_keep_paint_order(mpl_surface):
    mpl_surface.draw_line(Point(0, 0), Point(10, 0), Stroke((0, 0, 0)))
    mpl_surface.fill_rect(Rect(0, 0, 50, 50), Fill((255, 255, 255)))
    mpl_surface.draw_text("x", Font("sans-serif", 9), Fill((0, 0, 0)), Rect(5, 5, 10, 10))

    (line,) = mpl_surface.ax.collections
    (patch,) = mpl_surface.ax.patches
    (text,) = mpl_surface.ax.texts
    assert line.get_zorder() < patch.get_zorder() < text.get_zorder()


def test_measure_text_positive_and_clean(mpl_surface):
    font = Font("sans-serif", 9)
    w, h = mpl_surface.measure_text("Grid intervals", font)
    w2, _ = mpl_surface.measure_text("Grid intervals: 0.2 sec", font)

    assert w > 0 and h > 0
    assert w2 > w
    assert mpl_surface.fig.texts == []


def test_begin_discards_previous_frame(mpl_surface):
    style = CardiogramStyle()
    draw_grid(mpl_surface, style)
    mpl_surface.flush()
    assert mpl_surface.ax.collections

    mpl_surface.begin()
    assert not mpl_surface.ax.collections
    assert not mpl_surface.ax.patches
    assert mpl_surface.ax.get_ylim() == (200, 0)


def test_full_frame_renders(mpl_surface):
    style = CardiogramStyle()
    animator = WaveformAnimator(DEMO_POINTS, style=style, enabled=True)
    animator.tick()

    draw_grid(mpl_surface, style)
    animator.render(mpl_surface)
    mpl_surface.flush()
    mpl_surface.fig.canvas.draw()

    ax = mpl_surface.ax
    assert len(ax.patches) == 1
    assert len(ax.collections) == 2  # Raster + Kurve
    assert len(ax.texts) == 1
    assert ax.texts[0].get_text() == style.caption
