"""Tests for the scene description built from records, scales and state."""

import pytest

from prosperity.interaction import hide_all, hover, initial_state, toggle
from prosperity.normalizer import build_dataset
from prosperity.scales import build_scales
from prosperity.scene import build_scene


@pytest.fixture
def scene_for(dataset, scales, layout, cfg):
    def _build(state):
        return build_scene(dataset, scales, state, layout, cfg)
    return _build


class TestMarkersAndLines:
    def test_one_marker_per_record_and_line_per_entity(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        assert len(scene.markers) == len(dataset.records)
        assert [line.entity for line in scene.lines] == list(dataset.entities)

    def test_marker_geometry(self, dataset, scales, scene_for):
        scene = scene_for(initial_state(dataset))
        marker = scene.markers[0]
        record = marker.record
        assert marker.x == scales.x(record.midpoint)
        assert marker.y == scales.y(record.score)
        assert marker.radius == scales.radius(record.duration)
        assert marker.color == scales.color(record.civilization)
        assert marker.pattern == scales.pattern(record.calendar_type)

    def test_normal_opacity(self, dataset, cfg, scene_for):
        scene = scene_for(initial_state(dataset))
        assert all(m.opacity == cfg.OPACITY_NORMAL for m in scene.markers)
        assert all(line.opacity == cfg.OPACITY_NORMAL for line in scene.lines)

    def test_line_ends_on_first_and_last_member(self, dataset, scales, scene_for):
        scene = scene_for(initial_state(dataset))
        rome = next(line for line in scene.lines if line.entity == "Rome")
        first, last = dataset.group("Rome").records[0], dataset.group("Rome").records[-1]
        assert rome.points[0] == pytest.approx((scales.x(first.midpoint), scales.y(first.score)))
        assert rome.points[-1] == pytest.approx((scales.x(last.midpoint), scales.y(last.score)))
        assert rome.width == scales.line_width("Rome")

    def test_single_record_entity_has_single_point_line(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        aztec = next(line for line in scene.lines if line.entity == "Aztec")
        assert len(aztec.points) == 1


class TestHighlight:
    def test_highlighted_entity_is_emphasized(self, dataset, scales, cfg, scene_for):
        scene = scene_for(hover(initial_state(dataset), "Rome", dataset, scales))
        for marker in scene.markers:
            expected = cfg.OPACITY_HIGHLIGHT if marker.record.civilization == "Rome" else cfg.OPACITY_DIMMED
            assert marker.opacity == expected
        for line in scene.lines:
            if line.entity == "Rome":
                assert line.opacity == cfg.OPACITY_HIGHLIGHT
                assert line.width == pytest.approx(2 * scales.line_width("Rome"))
            else:
                assert line.opacity == cfg.OPACITY_DIMMED
                assert line.width == pytest.approx(scales.line_width(line.entity))

    def test_tooltips_come_from_state(self, dataset, scales, scene_for):
        state = hover(initial_state(dataset), "China", dataset, scales)
        assert scene_for(state).tooltips == state.tooltips


class TestVisibility:
    def test_hidden_entities_are_suppressed(self, dataset, scene_for):
        scene = scene_for(toggle(initial_state(dataset), "China"))
        assert all(m.record.civilization != "China" for m in scene.markers)
        assert all(line.entity != "China" for line in scene.lines)
        # the legend still lists every entity
        assert "China" in [entry.entity for entry in scene.line_legend]

    def test_hide_all_leaves_empty_plot(self, dataset, scene_for):
        scene = scene_for(hide_all(initial_state(dataset)))
        assert scene.markers == ()
        assert scene.lines == ()


class TestAxesAndLegends:
    def test_axis_labels(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        assert scene.x_axis.label == "Year"
        assert scene.y_axis.label == "Prosperity Score"
        labels = [tick.label for tick in scene.x_axis.ticks]
        assert "400 BCE" in labels
        assert "0 CE" in labels
        assert "1200 CE" in labels

    def test_grid_follows_y_ticks(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        assert scene.grid == tuple(tick.position for tick in scene.y_axis.ticks)

    def test_reference_line_at_zero(self, dataset, scales, layout, scene_for):
        scene = scene_for(initial_state(dataset))
        assert scene.reference is not None
        assert scene.reference.y == scales.y(0)
        assert (scene.reference.x0, scene.reference.x1) == (0, layout.plot_width)
        assert scene.reference.opacity == 0.5

    def test_no_reference_line_when_zero_is_off_chart(self, rome_maya_rows, layout, cfg):
        data = build_dataset(rome_maya_rows)
        scales = build_scales(data, layout, cfg)
        scene = build_scene(data, scales, initial_state(data), layout, cfg)
        assert scene.reference is None

    def test_legends(self, dataset, scales, scene_for):
        scene = scene_for(initial_state(dataset))
        assert [e.label for e in scene.pattern_legend] == list(dataset.calendar_types)
        assert [e.pattern.name for e in scene.pattern_legend][:3] == ["sun", "sun", "moon"]
        assert [e.entity for e in scene.line_legend] == list(dataset.entities)
        for entry in scene.line_legend:
            assert entry.width == scales.line_width(entry.entity)
            assert entry.color == scales.color(entry.entity)

    def test_legend_sits_right_of_plot(self, dataset, layout, scene_for):
        scene = scene_for(initial_state(dataset))
        for entry in scene.pattern_legend + scene.line_legend:
            assert entry.rect[0] == layout.plot_width + 10
        last_pattern = scene.pattern_legend[-1].rect
        assert scene.line_legend[0].rect[1] > last_pattern[1] + last_pattern[3]


class TestHitTesting:
    def test_marker_at_center(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        target = scene.markers[2]
        hit = scene.marker_at(target.x, target.y)
        assert hit is not None
        assert scene.entity_at(target.x, target.y) == hit.record.civilization

    def test_topmost_marker_wins(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        last = scene.markers[-1]
        assert scene.marker_at(last.x, last.y) is last

    def test_nothing_far_away(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        assert scene.entity_at(-500, -500) is None

    def test_legend_entry_hover(self, dataset, scene_for):
        scene = scene_for(initial_state(dataset))
        x, y, w, h = scene.line_legend[1].rect
        assert scene.legend_entity_at(x + 5, y + h / 2) == dataset.entities[1]
        assert scene.entity_at(x + 5, y + h / 2) == dataset.entities[1]

    def test_hidden_markers_are_not_hit(self, dataset, scales, layout, cfg):
        visible = build_scene(dataset, scales, initial_state(dataset), layout, cfg)
        target = next(m for m in visible.markers if m.record.civilization == "Aztec")
        hidden = build_scene(dataset, scales, toggle(initial_state(dataset), "Aztec"), layout, cfg)
        hit = hidden.marker_at(target.x, target.y)
        assert hit is None or hit.record.civilization != "Aztec"
