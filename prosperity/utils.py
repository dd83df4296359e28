from typing import List, Sequence, Tuple

import numpy as np


def clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def format_number(v: float) -> str:
    """Whole numbers without a trailing '.0', everything else as %g."""
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return f"{v:g}"


def format_year(year: float) -> str:
    if year < 0:
        return f"{format_number(abs(year))} BCE"
    return f"{format_number(year)} CE"


def cardinal_spline(points: Sequence[Tuple[float, float]], tension: float = 0.0,
                    samples: int = 12) -> List[Tuple[float, float]]:
    """
    Smooth a polyline with a cardinal spline through every input point.

    Each segment p1 -> p2 becomes a cubic Bezier with control points
    p1 + k(p2 - p0) and p2 - k(p3 - p1), k = (1 - tension) / 6; the end
    points are duplicated so the curve starts and ends on the data.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) < 3:
        return [(float(x), float(y)) for x, y in pts]

    padded = np.vstack([pts[:1], pts, pts[-1:]])
    k = (1.0 - tension) / 6.0
    t = np.linspace(0.0, 1.0, samples + 1)[1:, None]

    out = [pts[0]]
    for i in range(1, len(padded) - 2):
        p0, p1, p2, p3 = padded[i - 1:i + 3]
        c1 = p1 + k * (p2 - p0)
        c2 = p2 - k * (p3 - p1)
        seg = (1 - t) ** 3 * p1 + 3 * (1 - t) ** 2 * t * c1 + 3 * (1 - t) * t ** 2 * c2 + t ** 3 * p2
        out.extend(seg)
    return [(float(x), float(y)) for x, y in out]
