from typing import Dict, List, Sequence, Tuple

from .entities import Dataset, EntityGroup, RawRecord, VisualRecord


def _first_seen(values) -> Tuple[str, ...]:
    # dict preserves insertion order
    return tuple(dict.fromkeys(values))


def to_visual(row: RawRecord) -> VisualRecord:
    return VisualRecord(
        civilization=row.civilization,
        start_year=row.start_date,
        end_year=row.end_date,
        score=row.score,
        period=row.period,
        events=row.key_events,
        duration=row.end_date - row.start_date,
        calendar_type=row.calendar_type,
    )


def normalize(rows: Sequence[RawRecord]) -> Tuple[VisualRecord, ...]:
    """One VisualRecord per row, sorted by start year (stable)."""
    records = [to_visual(row) for row in rows]
    records.sort(key=lambda r: r.start_year)
    return tuple(records)


def group_by_entity(records: Sequence[VisualRecord]) -> Tuple[EntityGroup, ...]:
    members: Dict[str, List[VisualRecord]] = {}
    for r in records:
        members.setdefault(r.civilization, []).append(r)
    return tuple(
        EntityGroup(name, tuple(sorted(group, key=lambda r: r.start_year)))
        for name, group in members.items()
    )


def build_dataset(rows: Sequence[RawRecord]) -> Dataset:
    """Normalize a load and fix the entity and calendar orders for its lifetime."""
    records = normalize(rows)
    entities = _first_seen(row.civilization for row in rows)
    by_name = {g.name: g for g in group_by_entity(records)}
    return Dataset(
        records=records,
        entities=entities,
        calendar_types=_first_seen(row.calendar_type for row in rows),
        groups=tuple(by_name[name] for name in entities),
    )
