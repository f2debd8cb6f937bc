from __future__ import annotations

import csv
from pathlib import Path

from .types import Point


def read_points(path: Path) -> tuple[Point, ...]:
    """Liest eine Punktfolge (Spalten x,y) aus einer CSV-Datei. Reihenfolge = Kurvenverlauf."""

    if not path.exists():
        raise FileNotFoundError(f"Punktdatei nicht gefunden: {path}")

    points: list[Point] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        r = csv.reader(f)
        header = next(r, None)
        if header is None:
            return ()
        if [h.strip().lower() for h in header] != ["x", "y"]:
            raise ValueError(f"{path}: Kopfzeile muss 'x,y' sein, gefunden: {','.join(header)!r}")

        for lineno, row in enumerate(r, start=2):
            if not row or all(not c.strip() for c in row):
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{lineno}: erwartet 2 Spalten, gefunden {len(row)}")
            try:
                points.append(Point(_number(row[0]), _number(row[1])))
            except ValueError:
                raise ValueError(f"{path}:{lineno}: keine Zahl in {row!r}") from None

    return tuple(points)


def _number(s: str) -> float:
    s = s.strip()
    try:
        return int(s)
    except ValueError:
        return float(s)
