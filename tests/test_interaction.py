"""Tests for interaction state transitions and tooltip payloads."""

from conftest import make_row
from prosperity.interaction import (
    InteractionState,
    hide_all,
    hover,
    hover_leave,
    initial_state,
    show_all,
    toggle,
)
from prosperity.normalizer import build_dataset
from prosperity.tooltips import build_tooltips, format_tooltip


class TestVisibility:
    def test_everything_visible_initially(self, dataset):
        state = initial_state(dataset)
        assert state.visible == frozenset(dataset.entities)
        assert state.highlighted is None
        assert state.tooltips == ()

    def test_toggle_flips_membership(self, dataset):
        state = toggle(initial_state(dataset), "Rome")
        assert not state.is_visible("Rome")
        assert toggle(state, "Rome").is_visible("Rome")

    def test_toggle_twice_is_identity(self, dataset):
        start = initial_state(dataset)
        for name in dataset.entities:
            assert toggle(toggle(start, name), name) == start
        hidden = hide_all(start)
        assert toggle(toggle(hidden, "Maya"), "Maya") == hidden

    def test_hide_all_then_show_all_restores_full_set(self, dataset):
        state = initial_state(dataset)
        state = toggle(state, "Rome")
        state = hide_all(state)
        state = toggle(state, "China")
        state = show_all(state, dataset.entities)
        assert state.visible == frozenset(dataset.entities)

    def test_bulk_actions_are_idempotent(self, dataset):
        state = initial_state(dataset)
        assert hide_all(hide_all(state)) == hide_all(state)
        assert show_all(show_all(state, dataset.entities), dataset.entities) == state

    def test_handlers_do_not_mutate(self, dataset):
        state = initial_state(dataset)
        toggle(state, "Rome")
        hide_all(state)
        assert state.visible == frozenset(dataset.entities)


class TestHover:
    def test_hover_highlights_and_annotates_every_record(self, dataset, scales):
        state = hover(initial_state(dataset), "Rome", dataset, scales)
        assert state.highlighted == "Rome"
        assert len(state.tooltips) == 2
        assert all(t.text.startswith("Rome\n") for t in state.tooltips)

    def test_tooltips_anchor_at_markers(self, dataset, scales):
        tooltips = build_tooltips(dataset, scales, "Maya")
        record = dataset.group("Maya").records[0]
        assert len(tooltips) == 1
        assert tooltips[0].x == scales.x(record.midpoint)
        assert tooltips[0].y == scales.y(record.score)

    def test_leave_clears_highlight_and_tooltips(self, dataset, scales):
        state = hover_leave(hover(initial_state(dataset), "China", dataset, scales))
        assert state.highlighted is None
        assert state.tooltips == ()
        assert state.visible == frozenset(dataset.entities)

    def test_repeated_hover_is_idempotent(self, dataset, scales):
        once = hover(initial_state(dataset), "China", dataset, scales)
        assert hover(once, "China", dataset, scales) == once
        assert hover_leave(hover_leave(once)) == hover_leave(once)

    def test_default_state(self):
        assert InteractionState().visible == frozenset()


class TestTooltipText:
    def test_format(self, dataset):
        record = dataset.group("Rome").records[0]
        assert format_tooltip(record) == "\n".join([
            "Rome",
            "Period: Period",
            "Years: 509 BCE - 27 BCE",
            "Score: 70",
            "Calendar Type: Solar",
            "Events: Events",
        ])

    def test_text_is_not_escaped(self):
        data = build_dataset([make_row("Rome", 0, 10, 1, events="<b>bold</b> & co")])
        assert "Events: <b>bold</b> & co" in format_tooltip(data.records[0])
