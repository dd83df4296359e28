import math
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple


def _parse_year(value: str, column: str) -> int:
    text = (value or "").strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"'{column}' is not a number: {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"'{column}' is not a number: {value!r}")
    if not number.is_integer():
        raise ValueError(f"'{column}' is not a whole year: {value!r}")
    return int(number)


def _parse_score(value: str, column: str) -> float:
    try:
        number = float((value or "").strip())
    except ValueError:
        raise ValueError(f"'{column}' is not a number: {value!r}") from None
    # float() accepts nan and inf
    if not math.isfinite(number):
        raise ValueError(f"'{column}' is not a number: {value!r}")
    return number


@dataclass(frozen=True)
class RawRecord:
    """One validated CSV row."""
    civilization: str
    calendar_system: str
    calendar_type: str
    start_date: int
    end_date: int
    period: str
    score: float
    key_events: str

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "RawRecord":
        return cls(
            civilization=row["Civilization"].strip(),
            calendar_system=row["Calendar System"].strip(),
            calendar_type=row["Calendar Type"].strip(),
            start_date=_parse_year(row["Start Date"], "Start Date"),
            end_date=_parse_year(row["End Date"], "End Date"),
            period=row["Historical Period"].strip(),
            score=_parse_score(row["Prosperity Score"], "Prosperity Score"),
            key_events=row["Key Events"].strip(),
        )


@dataclass(frozen=True)
class VisualRecord:
    civilization: str
    start_year: int
    end_year: int
    score: float
    period: str
    events: str
    duration: int
    calendar_type: str

    @property
    def midpoint(self) -> float:
        return (self.start_year + self.end_year) / 2


@dataclass(frozen=True)
class EntityGroup:
    name: str
    records: Tuple[VisualRecord, ...]

    @property
    def lifespan(self) -> int:
        # stroke weighting only, overlapping spans are counted twice
        return sum(r.duration for r in self.records)


@dataclass(frozen=True)
class Dataset:
    """Render-ready records of one load, with stable first-seen orderings."""
    records: Tuple[VisualRecord, ...]
    entities: Tuple[str, ...]
    calendar_types: Tuple[str, ...]
    groups: Tuple[EntityGroup, ...]

    def __len__(self) -> int:
        return len(self.records)

    def group(self, name: str) -> Optional[EntityGroup]:
        for g in self.groups:
            if g.name == name:
                return g
        return None


@dataclass
class LoadResult:
    rows: List[RawRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
