"""Tests for turning rows into render-ready records."""

from conftest import make_row
from prosperity.normalizer import build_dataset, group_by_entity, normalize


class TestNormalize:
    def test_duration_is_end_minus_start(self, sample_rows):
        for record in normalize(sample_rows):
            assert record.duration == record.end_year - record.start_year

    def test_rome_and_maya_durations(self, rome_maya_rows):
        durations = {r.civilization: r.duration for r in normalize(rome_maya_rows)}
        assert durations == {"Rome": 976, "Maya": 2900}

    def test_sorted_by_start_year(self, sample_rows):
        starts = [r.start_year for r in normalize(sample_rows)]
        assert starts == sorted(starts)

    def test_one_record_per_row_without_filtering(self):
        rows = [make_row("Odd", 100, 50, 10), make_row("Odd", 100, 50, 10)]
        records = normalize(rows)
        assert len(records) == 2
        assert records[0].duration == -50

    def test_fields_are_carried_over(self):
        row = make_row("Rome", -27, 180, 95.5, "Solar", "Pax Romana", "Augustus")
        record = normalize([row])[0]
        assert record.civilization == "Rome"
        assert record.period == "Pax Romana"
        assert record.events == "Augustus"
        assert record.score == 95.5
        assert record.calendar_type == "Solar"
        assert record.midpoint == 76.5

    def test_empty_input(self):
        assert normalize([]) == ()


class TestGroups:
    def test_groups_are_sorted_by_start_year(self, sample_rows):
        groups = {g.name: g for g in group_by_entity(normalize(sample_rows))}
        assert [r.start_year for r in groups["Rome"].records] == [-509, -27]

    def test_lifespan_is_sum_of_durations(self, dataset):
        assert dataset.group("Rome").lifespan == 482 + 207
        assert dataset.group("Aztec").lifespan == 196

    def test_unknown_group(self, dataset):
        assert dataset.group("Atlantis") is None


class TestDataset:
    def test_entities_in_first_seen_input_order(self, dataset):
        assert dataset.entities == ("Rome", "China", "Maya", "Aztec")
        assert [g.name for g in dataset.groups] == list(dataset.entities)

    def test_calendar_types_in_first_seen_input_order(self, dataset):
        assert dataset.calendar_types == ("Solar", "Lunisolar", "Lunar", "Ritual")

    def test_records_are_sorted(self, dataset):
        assert dataset.records[0].civilization == "Rome"
        assert dataset.records[0].start_year == -509
        assert len(dataset) == 6

    def test_empty_dataset(self):
        empty = build_dataset([])
        assert len(empty) == 0
        assert empty.entities == ()
        assert empty.groups == ()
