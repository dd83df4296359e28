"""
Scene description of the chart.

build_scene() is a pure function of (dataset, scales, interaction state,
layout): it decides what is drawn, where, and how opaque. Drawing backends
only walk the result. All coordinates are relative to the plot origin.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import CFG
from .entities import Dataset, VisualRecord
from .interaction import InteractionState
from .patterns import Pattern
from .scales import RGB, Layout, ScaleSet
from .tooltips import Tooltip
from .utils import cardinal_spline, format_number, format_year

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]


def _in_rect(rect: Rect, x: float, y: float) -> bool:
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


@dataclass(frozen=True)
class TrendLine:
    entity: str
    points: Tuple[Point, ...]
    color: RGB
    width: float
    opacity: float


@dataclass(frozen=True)
class Marker:
    record: VisualRecord
    x: float
    y: float
    radius: float
    color: RGB
    pattern: Pattern
    opacity: float

    def contains(self, x: float, y: float) -> bool:
        return (x - self.x) ** 2 + (y - self.y) ** 2 <= self.radius ** 2


@dataclass(frozen=True)
class Tick:
    position: float
    label: str


@dataclass(frozen=True)
class Axis:
    label: str
    ticks: Tuple[Tick, ...]


@dataclass(frozen=True)
class ReferenceLine:
    y: float
    x0: float
    x1: float
    opacity: float


@dataclass(frozen=True)
class PatternLegendEntry:
    label: str
    pattern: Pattern
    rect: Rect


@dataclass(frozen=True)
class LineLegendEntry:
    entity: str
    color: RGB
    width: float
    rect: Rect


@dataclass(frozen=True)
class ChartScene:
    layout: Layout
    lines: Tuple[TrendLine, ...]
    markers: Tuple[Marker, ...]
    x_axis: Axis
    y_axis: Axis
    grid: Tuple[float, ...]
    reference: Optional[ReferenceLine]
    pattern_legend: Tuple[PatternLegendEntry, ...]
    line_legend: Tuple[LineLegendEntry, ...]
    tooltips: Tuple[Tooltip, ...]

    def marker_at(self, x: float, y: float) -> Optional[Marker]:
        # drawn in order, so the last hit is on top
        for marker in reversed(self.markers):
            if marker.contains(x, y):
                return marker
        return None

    def legend_entity_at(self, x: float, y: float) -> Optional[str]:
        for entry in self.line_legend:
            if _in_rect(entry.rect, x, y):
                return entry.entity
        return None

    def entity_at(self, x: float, y: float) -> Optional[str]:
        marker = self.marker_at(x, y)
        if marker is not None:
            return marker.record.civilization
        return self.legend_entity_at(x, y)


def _emphasis(entity: str, highlighted: Optional[str], cfg: CFG) -> float:
    if highlighted is None:
        return cfg.OPACITY_NORMAL
    return cfg.OPACITY_HIGHLIGHT if entity == highlighted else cfg.OPACITY_DIMMED


def _trend_lines(dataset, scales, state, cfg):
    lines = []
    for group in dataset.groups:
        if not state.is_visible(group.name):
            continue
        width = scales.line_width(group.name)
        if group.name == state.highlighted:
            width *= cfg.HIGHLIGHT_WIDTH_FACTOR
        points = [(scales.x(r.midpoint), scales.y(r.score)) for r in group.records]
        lines.append(TrendLine(
            entity=group.name,
            points=tuple(cardinal_spline(points, samples=cfg.SPLINE_SAMPLES)),
            color=scales.color(group.name),
            width=width,
            opacity=_emphasis(group.name, state.highlighted, cfg),
        ))
    return tuple(lines)


def _markers(dataset, scales, state, cfg):
    return tuple(
        Marker(
            record=r,
            x=scales.x(r.midpoint),
            y=scales.y(r.score),
            radius=scales.radius(r.duration),
            color=scales.color(r.civilization),
            pattern=scales.pattern(r.calendar_type),
            opacity=_emphasis(r.civilization, state.highlighted, cfg),
        )
        for r in dataset.records
        if state.is_visible(r.civilization)
    )


def _legends(dataset, scales, layout, cfg):
    x = layout.plot_width + 10
    row = cfg.LEGEND_ROW
    patterns = tuple(
        PatternLegendEntry(label, pattern, (x, i * row, cfg.LEGEND_ENTRY_WIDTH, row))
        for i, (label, pattern) in enumerate(scales.patterns)
    )
    top = (len(patterns) + 1) * row
    lines = tuple(
        LineLegendEntry(
            entity=name,
            color=scales.color(name),
            width=scales.line_width(name),
            rect=(x, top + i * row, cfg.LEGEND_ENTRY_WIDTH, row),
        )
        for i, name in enumerate(dataset.entities)
    )
    return patterns, lines


def build_scene(dataset: Dataset, scales: ScaleSet, state: InteractionState,
                layout: Layout, cfg: CFG) -> ChartScene:
    y_ticks = scales.y.ticks(cfg.Y_TICKS)
    x_axis = Axis("Year", tuple(Tick(scales.x(t), format_year(t)) for t in scales.x.ticks(cfg.X_TICKS)))
    y_axis = Axis("Prosperity Score", tuple(Tick(scales.y(t), format_number(t)) for t in y_ticks))

    reference = None
    lo, hi = sorted(scales.y.domain)
    if lo <= 0 <= hi:
        reference = ReferenceLine(scales.y(0), 0, layout.plot_width, cfg.REFERENCE_OPACITY)

    pattern_legend, line_legend = _legends(dataset, scales, layout, cfg)
    return ChartScene(
        layout=layout,
        lines=_trend_lines(dataset, scales, state, cfg),
        markers=_markers(dataset, scales, state, cfg),
        x_axis=x_axis,
        y_axis=y_axis,
        grid=tuple(scales.y(t) for t in y_ticks),
        reference=reference,
        pattern_legend=pattern_legend,
        line_legend=line_legend,
        tooltips=state.tooltips,
    )
