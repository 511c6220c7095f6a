"""
Integration tests for MaccVisualization for the macc-viz library.

Pointer events are fed through the matplotlib canvas callback registry, the
same path a GUI backend uses.
"""

from __future__ import annotations

import io

import pytest
from matplotlib.backend_bases import LocationEvent, MouseButton, MouseEvent

from macc_viz.library.host.adapter import ContainerRegistry, MaccVisualization
from macc_viz.library.interaction.bridge import CallbackHost
from macc_viz.library.render.renderer import EMPTY_STATE_MESSAGE


def _display_point(viz, bar):
    """Display coordinates of the centre of a bar."""
    cx = bar.rect.x + bar.rect.width / 2
    cy = bar.rect.y + bar.rect.height / 2
    return viz.binding.axes.transData.transform((cx, cy))


def _move(viz, x, y):
    canvas = viz.figure.canvas
    canvas.callbacks.process(
        "motion_notify_event", MouseEvent("motion_notify_event", canvas, x, y)
    )


def _click(viz, x, y, button=MouseButton.LEFT):
    canvas = viz.figure.canvas
    canvas.callbacks.process(
        "button_press_event",
        MouseEvent("button_press_event", canvas, x, y, button=button),
    )


@pytest.fixture
def events():
    return []


@pytest.fixture
def viz(events):
    return MaccVisualization(host=CallbackHost(lambda f, v: events.append((f, v))))


class TestDraw:
    """Test redraw lifecycle."""

    def test_draw_returns_scene(self, viz, industry_rows, payload_factory):
        scene = viz.draw(payload_factory(industry_rows), width=800, height=500)

        assert len(scene.bars) == 5
        assert (scene.width, scene.height) == (800, 500)
        assert viz.scene is scene

    def test_container_created_once(self, viz, industry_rows, payload_factory):
        assert viz.figure is None

        viz.draw(payload_factory(industry_rows))
        figure = viz.figure
        tooltip = viz.tooltip
        viz.draw(payload_factory(industry_rows[:2]), width=300, height=200)

        assert viz.figure is figure
        assert viz.tooltip is tooltip
        assert tuple(figure.get_size_inches() * figure.dpi) == pytest.approx((300, 200))
        # Only the axes of the latest draw remain
        assert len(figure.axes) == 1

    def test_shared_registry(self, industry_rows, payload_factory):
        registry = ContainerRegistry()
        first = MaccVisualization(containers=registry, container_id="left")
        second = MaccVisualization(containers=registry, container_id="right")

        first.draw(payload_factory(industry_rows))
        second.draw(payload_factory(industry_rows))

        assert "left" in registry and "right" in registry
        assert first.figure is not second.figure

    def test_empty_payload_renders_message(self, viz):
        scene = viz.draw({})

        assert scene.is_empty
        texts = [t.get_text() for t in viz.binding.axes.texts]
        assert EMPTY_STATE_MESSAGE in texts

    def test_figure_can_be_saved(self, viz, industry_rows, payload_factory):
        viz.draw(payload_factory(industry_rows), width=640, height=360)
        buffer = io.BytesIO()

        viz.figure.savefig(buffer, format="png")

        assert buffer.getvalue().startswith(b"\x89PNG")

    def test_callable_adapter(self, viz, scenario_rows, payload_factory):
        scene = viz(payload_factory(scenario_rows))

        assert [bar.item.label for bar in scene.bars] == ["B", "A"]


class TestPointerEvents:
    """Test canvas events reaching the interaction layer."""

    def test_hover_shows_annotation(self, viz, scenario_rows, payload_factory):
        scene = viz.draw(payload_factory(scenario_rows))
        x, y = _display_point(viz, scene.bars[1])

        _move(viz, x, y)

        assert viz.tooltip.visible
        assert viz.tooltip.text.startswith("A\n")
        annotation = viz.binding.annotation
        assert annotation.get_visible()
        assert annotation.get_text() == viz.tooltip.text

    def test_moving_off_bars_hides_annotation(self, viz, scenario_rows, payload_factory):
        scene = viz.draw(payload_factory(scenario_rows))
        _move(viz, *_display_point(viz, scene.bars[0]))

        _move(viz, 2, 2)

        assert not viz.tooltip.visible
        assert not viz.binding.annotation.get_visible()

    def test_leaving_figure_hides_tooltip(self, viz, scenario_rows, payload_factory):
        scene = viz.draw(payload_factory(scenario_rows))
        _move(viz, *_display_point(viz, scene.bars[0]))
        canvas = viz.figure.canvas

        canvas.callbacks.process(
            "figure_leave_event", LocationEvent("figure_leave_event", canvas, 0, 0)
        )

        assert not viz.tooltip.visible

    def test_click_emits_filter(
        self, viz, events, scenario_rows, action_fields, payload_factory
    ):
        scene = viz.draw(payload_factory(scenario_rows, fields=action_fields))

        _click(viz, *_display_point(viz, scene.bars[0]))

        assert events == [("qt_action", "B")]

    def test_right_click_is_ignored(
        self, viz, events, scenario_rows, action_fields, payload_factory
    ):
        scene = viz.draw(payload_factory(scenario_rows, fields=action_fields))

        _click(viz, *_display_point(viz, scene.bars[0]), button=MouseButton.RIGHT)

        assert events == []

    def test_click_without_capability(self, scenario_rows, action_fields, payload_factory):
        events = []
        viz = MaccVisualization(
            host=CallbackHost(lambda f, v: events.append((f, v)), filter_enabled=False)
        )
        scene = viz.draw(payload_factory(scenario_rows, fields=action_fields))

        _click(viz, *_display_point(viz, scene.bars[0]))

        assert events == []

    def test_events_follow_latest_draw(
        self, viz, events, scenario_rows, action_fields, payload_factory
    ):
        """After a redraw, clicks resolve against the new bars only."""
        viz.draw(payload_factory(scenario_rows, fields=action_fields))
        scene = viz.draw(
            payload_factory(
                [{"actionDim": "Only", "abatementMetric": 4, "costMetric": 2}],
                fields=action_fields,
            )
        )

        _click(viz, *_display_point(viz, scene.bars[0]))

        assert events == [("qt_action", "Only")]

    def test_one_event_per_click(
        self, viz, events, industry_rows, action_fields, payload_factory
    ):
        scene = viz.draw(payload_factory(industry_rows, fields=action_fields))
        # Redrawing must not stack up canvas connections
        viz.draw(payload_factory(industry_rows, fields=action_fields))

        _click(viz, *_display_point(viz, scene.bars[2]))

        assert events == [("qt_action", scene.bars[2].item.label)]
