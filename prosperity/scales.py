"""
Scales and layout.

Every scale is an immutable mapping from a data domain to a pixel (or
colour) range, computed once from a Dataset and a Layout. Changing either
means building a new ScaleSet, never patching the old one.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

import numpy as np
from matplotlib.colors import TABLEAU_COLORS, to_rgb

from .config import CFG
from .entities import Dataset
from .patterns import Pattern, create_pattern

RGB = Tuple[int, int, int]

# Same ten colours, same order as d3.schemeCategory10
PALETTE: Tuple[RGB, ...] = tuple(
    tuple(int(round(c * 255)) for c in to_rgb(hex_color))
    for hex_color in TABLEAU_COLORS.values()
)


@dataclass(frozen=True)
class Layout:
    width: int
    height: int
    plot_x: int
    plot_y: int
    plot_width: int
    plot_height: int
    panel_x: int
    panel_width: int

    @property
    def plot_rect(self) -> Tuple[int, int, int, int]:
        return (self.plot_x, self.plot_y, self.plot_width, self.plot_height)

    @property
    def panel_rect(self) -> Tuple[int, int, int, int]:
        return (self.panel_x, 0, self.panel_width, self.height)


def compute_layout(width: int, height: int, cfg: CFG) -> Layout:
    plot_width = width - cfg.MARGIN_LEFT - cfg.MARGIN_RIGHT - cfg.PANEL_WIDTH - cfg.PANEL_GAP
    plot_height = height - cfg.MARGIN_TOP - cfg.MARGIN_BOTTOM
    return Layout(
        width=width,
        height=height,
        plot_x=cfg.MARGIN_LEFT,
        plot_y=cfg.MARGIN_TOP,
        plot_width=max(0, plot_width),
        plot_height=max(0, plot_height),
        panel_x=max(0, width - cfg.PANEL_WIDTH),
        panel_width=cfg.PANEL_WIDTH,
    )


def _nice_step(lo: float, hi: float, count: int) -> float:
    step = (hi - lo) / max(count, 1)
    power = 10 ** math.floor(math.log10(step))
    error = step / power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * power


@dataclass(frozen=True)
class LinearScale:
    domain: Tuple[float, float]
    output: Tuple[float, float]
    clamp: bool = False

    def _transform(self, v):
        return v

    def __call__(self, value: Union[float, np.ndarray]):
        d0, d1 = (self._transform(np.float64(d)) for d in self.domain)
        r0, r1 = self.output
        v = self._transform(np.asarray(value, dtype=float))
        if d1 == d0:
            out = np.full_like(v, (r0 + r1) / 2)
        else:
            out = r0 + (v - d0) / (d1 - d0) * (r1 - r0)
        if self.clamp:
            out = np.clip(out, min(r0, r1), max(r0, r1))
        return float(out) if out.ndim == 0 else out

    def ticks(self, count: int = 10) -> List[float]:
        """Round-numbered ticks (1, 2 or 5 times a power of ten) inside the domain."""
        lo, hi = sorted(self.domain)
        if hi == lo:
            return [float(lo)]
        step = _nice_step(lo, hi, count)
        start = math.ceil(lo / step)
        stop = math.floor(hi / step)
        return [float(i * step) for i in range(start, stop + 1)]


@dataclass(frozen=True)
class SqrtScale(LinearScale):
    """Area-proportional sizing: sqrt applied to domain and input alike."""

    def _transform(self, v):
        return np.sign(v) * np.sqrt(np.abs(v))


@dataclass(frozen=True)
class OrdinalScale:
    domain: Tuple[str, ...]
    palette: Tuple[RGB, ...] = PALETTE

    def __call__(self, key: str) -> RGB:
        return self.palette[self.domain.index(key) % len(self.palette)]


@dataclass(frozen=True)
class ScaleSet:
    x: LinearScale
    y: LinearScale
    radius: SqrtScale
    color: OrdinalScale
    stroke: LinearScale
    patterns: Tuple[Tuple[str, Pattern], ...]
    lifespans: Tuple[Tuple[str, int], ...]

    def pattern(self, calendar_type: str) -> Pattern:
        return dict(self.patterns)[calendar_type]

    def line_width(self, entity: str) -> float:
        lifespans: Dict[str, int] = dict(self.lifespans)
        return self.stroke(lifespans.get(entity, 0))


def build_scales(dataset: Dataset, layout: Layout, cfg: CFG) -> ScaleSet:
    records = dataset.records
    if records:
        x_domain = (min(r.start_year for r in records), max(r.end_year for r in records))
        y_domain = (min(r.score for r in records), max(r.score for r in records))
        max_duration = max(r.duration for r in records)
    else:
        x_domain = y_domain = (0, 0)
        max_duration = 0

    lifespans = tuple((g.name, g.lifespan) for g in dataset.groups)
    max_lifespan = max((span for _, span in lifespans), default=0)

    return ScaleSet(
        x=LinearScale(x_domain, (0, layout.plot_width)),
        y=LinearScale(y_domain, (layout.plot_height, 0)),
        radius=SqrtScale((0, max_duration), cfg.RADIUS_RANGE, clamp=True),
        color=OrdinalScale(dataset.entities),
        stroke=LinearScale((0, max_lifespan), cfg.STROKE_RANGE, clamp=True),
        patterns=tuple((t, create_pattern(t, i)) for i, t in enumerate(dataset.calendar_types)),
        lifespans=lifespans,
    )
