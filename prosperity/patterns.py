"""
Calendar-type fill patterns.

Each pattern is an SVG path inside a 10x10 cell. Sun-like and moon-like
calendars get fixed motifs, every other calendar type cycles through the
seven geometric base motifs by its index.
"""
import math
import re
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True)
class Pattern:
    name: str
    path: str


SUN = Pattern("sun", (
    "M5,5 m-4,0 a4,4 0 1,1 8,0 a4,4 0 1,1 -8,0 "
    "M5,1 L5,2 M8,2 L9,1 M2,8 L1,9 M8,8 L9,9 M2,2 L1,1 "
    "M5,8 L5,9 M1,5 L2,5 M8,5 L9,5 "
    "M3.5,3.5 L6.5,6.5 M3.5,6.5 L6.5,3.5"
))

MOON = Pattern("moon", (
    "M5,2 a3,3 0 0,1 0,6 a3,3 0 0,0 0,-6 "
    "M3,4 L3,6 M7,4 L7,6 "
    "M4,3.5 L6,3.5 M4,6.5 L6,6.5"
))

BASE_PATTERNS: Tuple[Pattern, ...] = (
    Pattern("cross", "M0,0 L10,10 M10,0 L0,10 M5,0 L5,10 M0,5 L10,5"),
    Pattern("circle-cross", "M0,5 A5,5 0 1,1 10,5 A5,5 0 1,1 0,5 M5,0 L5,10 M0,5 L10,5"),
    Pattern("diamond", "M0,0 L10,10 M10,0 L0,10 M0,0 L10,0 L10,10 L0,10 Z"),
    Pattern("square-x", "M2,2 L8,2 L8,8 L2,8 Z M0,0 L10,10 M10,0 L0,10"),
    Pattern("triangle", "M5,0 L10,10 L0,10 Z M0,0 L10,0 M0,10 L10,10"),
    Pattern("eye", "M0,5 Q5,0 10,5 Q5,10 0,5 M0,0 L10,10 M10,0 L0,10"),
    Pattern("star", "M0,0 L3,5 L0,10 M10,0 L7,5 L10,10 M3,0 L7,10 M7,0 L3,10"),
)


def create_pattern(calendar_type: str, index: int) -> Pattern:
    kind = calendar_type.lower()
    if "solar" in kind:
        return SUN
    elif "lunar" in kind:
        return MOON
    else:
        return BASE_PATTERNS[index % len(BASE_PATTERNS)]


# ========== Path flattening ==========

_TOKEN = re.compile(r"[MmLlQqAaZz]|[-+]?(?:\d+\.?\d*|\.\d+)")
_ARITY = {"M": 2, "L": 2, "Q": 4, "A": 7, "Z": 0}


def _arc(x1, y1, rx, ry, rotation, large, sweep, x2, y2, segments):
    """Endpoint-parameterized elliptical arc to points (SVG implementation notes F.6.5)."""
    if rx == 0 or ry == 0 or (x1 == x2 and y1 == y2):
        return [(x2, y2)]
    phi = math.radians(rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    dx, dy = (x1 - x2) / 2, (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    rx, ry = abs(rx), abs(ry)
    lam = x1p ** 2 / rx ** 2 + y1p ** 2 / ry ** 2
    if lam > 1:
        rx, ry = rx * math.sqrt(lam), ry * math.sqrt(lam)

    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    coef = math.sqrt(max(0.0, num / den)) if den else 0.0
    if bool(large) == bool(sweep):
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    theta2 = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx)
    delta = theta2 - theta1
    if sweep and delta < 0:
        delta += 2 * math.pi
    elif not sweep and delta > 0:
        delta -= 2 * math.pi

    t = np.linspace(theta1, theta1 + delta, segments + 1)[1:]
    xs = cx + rx * np.cos(t) * cos_phi - ry * np.sin(t) * sin_phi
    ys = cy + rx * np.cos(t) * sin_phi + ry * np.sin(t) * cos_phi
    points = [(float(x), float(y)) for x, y in zip(xs, ys)]
    points[-1] = (x2, y2)
    return points


def _quad(x0, y0, cx, cy, x2, y2, segments):
    t = np.linspace(0.0, 1.0, segments + 1)[1:]
    xs = (1 - t) ** 2 * x0 + 2 * (1 - t) * t * cx + t ** 2 * x2
    ys = (1 - t) ** 2 * y0 + 2 * (1 - t) * t * cy + t ** 2 * y2
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def path_polylines(path: str, arc_segments: int = 16) -> List[List[Tuple[float, float]]]:
    """
    Flatten the path subset used by the motifs into polylines.

    Supports M/L/Q/A/Z in absolute and relative form, including implicit
    repeats (extra coordinates after M are line-tos).
    """
    tokens = _TOKEN.findall(path)
    polylines: List[List[Tuple[float, float]]] = []
    current: List[Tuple[float, float]] = []
    x = y = 0.0
    start = (0.0, 0.0)
    command = None
    i = 0

    def flush():
        if len(current) > 1:
            polylines.append(list(current))

    while i < len(tokens):
        token = tokens[i]
        if token.isalpha():
            command = token
            i += 1
            if command in "Zz":
                if current:
                    current.append(start)
                flush()
                current = []
                x, y = start
                continue
        elif command is None or command in "Zz":
            raise ValueError(f"Unexpected coordinate {token!r} in path: {path!r}")

        upper = command.upper()
        n = _ARITY[upper]
        args = [float(v) for v in tokens[i:i + n]]
        if len(args) < n:
            raise ValueError(f"Truncated '{command}' segment in path: {path!r}")
        i += n
        relative = command.islower()

        if upper == "M":
            nx, ny = args
            if relative:
                nx, ny = x + nx, y + ny
            flush()
            current = [(nx, ny)]
            x, y = nx, ny
            start = (x, y)
            # further coordinate pairs are implicit line-tos
            command = "l" if relative else "L"
        elif upper == "L":
            nx, ny = args
            if relative:
                nx, ny = x + nx, y + ny
            current.append((nx, ny))
            x, y = nx, ny
        elif upper == "Q":
            cx, cy, nx, ny = args
            if relative:
                cx, cy, nx, ny = x + cx, y + cy, x + nx, y + ny
            current.extend(_quad(x, y, cx, cy, nx, ny, arc_segments))
            x, y = nx, ny
        elif upper == "A":
            rx, ry, rotation, large, sweep, nx, ny = args
            if relative:
                nx, ny = x + nx, y + ny
            current.extend(_arc(x, y, rx, ry, rotation, large, sweep, nx, ny, arc_segments))
            x, y = nx, ny

    flush()
    return polylines
