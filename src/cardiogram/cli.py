from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .animator import WaveformAnimator
from .io import read_points
from .logging_config import setup_logging
from .style import DEMO_POINTS, FIXED_DPI, TICK_INTERVAL_MS, CardiogramStyle
from .viewer import Viewer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ekg-demo",
        description=(
            "Zeigt eine laufende EKG-Kurve auf Millimeterraster. "
            "Klick/Leertaste: Animation an/aus, q: Ende. Optional: Export als PNG."
        ),
    )

    p.add_argument(
        "--points",
        metavar="DATEI",
        help="CSV mit Spalten x,y (Pixel). Ohne Angabe: eingebauter Demo-Herzschlag.",
    )
    p.add_argument("--width", type=int, default=800, help="Fensterbreite in Pixel.")
    p.add_argument("--height", type=int, default=300, help="Fensterhöhe in Pixel.")
    p.add_argument(
        "--density",
        type=float,
        default=FIXED_DPI,
        help="Feste Pixeldichte des Rasters in Pixel/Zoll (1 Kästchen = 1 mm).",
    )
    p.add_argument("--interval", type=int, default=TICK_INTERVAL_MS, help="Timer-Intervall in ms.")
    p.add_argument("--paused", action="store_true", help="Animation angehalten starten.")
    p.add_argument(
        "--ticks",
        type=int,
        default=0,
        help="Vor dem PNG-Export so viele Ticks durchlaufen.",
    )
    p.add_argument(
        "--png",
        metavar="DATEI",
        help="Optional: aktuellen Frame als PNG speichern (z.B. out.png).",
    )
    p.add_argument(
        "--no-show",
        action="store_true",
        help="Kein Fenster öffnen (praktisch für automatisierte Runs).",
    )
    p.add_argument("--debug-keys", action="store_true", help="Gibt empfangene Key-Events aus")
    p.add_argument("--log-file", metavar="DATEI", help="Log zusätzlich in Datei schreiben.")
    p.add_argument("-v", "--verbose", action="store_true", help="Mehr Ausgaben (Debug).")

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    log = setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    for name in ("width", "height", "density", "interval"):
        if getattr(args, name) <= 0:
            print(f"ERROR: --{name} muss positiv sein.", file=sys.stderr)
            sys.exit(2)
    if args.ticks < 0:
        print("ERROR: --ticks darf nicht negativ sein.", file=sys.stderr)
        sys.exit(2)

    points = DEMO_POINTS
    if args.points:
        try:
            points = read_points(Path(args.points))
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            sys.exit(2)
        log.info("%d Punkte aus %s geladen", len(points), args.points)

    style = CardiogramStyle(density=args.density, interval_ms=args.interval)
    animator = WaveformAnimator(points, style=style, enabled=not args.paused)

    viewer = Viewer(
        animator,
        width=args.width,
        height=args.height,
        debug_keys=args.debug_keys,
    )
    # Wichtig: starke Referenz, sonst sammelt der GC Timer und Callbacks ein
    viewer.fig._viewer_ref = viewer  # type: ignore[attr-defined]

    import matplotlib.pyplot as plt

    if args.ticks:
        viewer.advance(args.ticks)

    if args.png:
        try:
            Path(args.png).parent.mkdir(parents=True, exist_ok=True)
            viewer.fig.savefig(args.png, dpi=viewer.fig.dpi)
            print(f"Wrote PNG: {args.png}")
        except Exception as e:
            print(f"ERROR: Konnte PNG nicht schreiben: {e}", file=sys.stderr)
            sys.exit(2)

    if args.no_show:
        plt.close(viewer.fig)
        return

    plt.show()
