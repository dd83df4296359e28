from dataclasses import dataclass
from typing import Tuple

from .entities import Dataset, VisualRecord
from .scales import ScaleSet
from .utils import format_number, format_year


@dataclass(frozen=True)
class Tooltip:
    """Annotation anchored at a plot-relative point. Text is rendered verbatim."""
    x: float
    y: float
    text: str


def format_tooltip(record: VisualRecord) -> str:
    return "\n".join([
        record.civilization,
        f"Period: {record.period}",
        f"Years: {format_year(record.start_year)} - {format_year(record.end_year)}",
        f"Score: {format_number(record.score)}",
        f"Calendar Type: {record.calendar_type}",
        f"Events: {record.events}",
    ])


def build_tooltips(dataset: Dataset, scales: ScaleSet, entity: str) -> Tuple[Tooltip, ...]:
    return tuple(
        Tooltip(scales.x(r.midpoint), scales.y(r.score), format_tooltip(r))
        for r in dataset.records
        if r.civilization == entity
    )
