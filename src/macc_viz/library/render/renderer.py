"""
Scene construction for a Marginal Abatement Cost Curve.

:func:`render` is the single entry point of a draw pass. It is a pure function
of its input: rows are normalised, sorted and stacked by cost, scaled onto the
container and turned into a :class:`Scene`. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from attrs import define, field

from macc_viz.library.chart.formatting import format_cost_tick, format_quantity_tick
from macc_viz.library.chart.scales import PlotArea, Scales, build_scales
from macc_viz.library.config.models import FieldKeys, MaccStyle
from macc_viz.library.data.accumulate import accumulate
from macc_viz.library.data.items import AccumulatedItems
from macc_viz.library.data.normalize import normalize_rows
from macc_viz.library.render.scene import Bar, EmptyState, Line, Rect, Scene, Text

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = (
    "Add valid fields: Action (dimension), Abatement (> 0, metric) "
    "and Marginal cost (metric)."
)
QUANTITY_TICK_INTERVALS = 6
COST_TICK_INTERVALS = 5
GRID_COLOR = "rgba(0,0,0,.08)"
TICK_LENGTH = 5
MIN_BAR_SIZE = 1.0
LABEL_FONT_SIZE = 11
TICK_LABEL_OFFSET = 18
# Lowest baseline offset below zero that clears the abatement tick labels
NEGATIVE_LABEL_MIN_OFFSET = 32


@define(frozen=True)
class ChartInput:
    """
    Everything one draw pass depends on.

    Attributes
    ----------
    rows
        Host rows or a DataFrame, see
        :func:`macc_viz.library.data.normalize.rows_to_frame`
    style
        Resolved style options
    width, height
        Container size in pixels; ``None`` uses the 600x400 default
    field_keys
        Row field names for the chart dimensions and metrics
    """

    rows: Iterable[Mapping[str, Any]] | pd.DataFrame = field(factory=list)
    style: MaccStyle = field(factory=MaccStyle)
    width: float | None = None
    height: float | None = None
    field_keys: FieldKeys = field(factory=FieldKeys)


def render(chart_input: ChartInput) -> Scene:
    """
    Run the full pipeline for one draw pass.

    Parameters
    ----------
    chart_input
        Rows, style and container size

    Returns
    -------
    Scene
        The chart, or a scene holding only the empty-state message when no
        row survives normalisation
    """
    area = PlotArea.for_container(chart_input.width, chart_input.height)
    items = normalize_rows(chart_input.rows, chart_input.field_keys)
    if not items:
        logger.debug("No drawable rows, rendering empty state")
        return render_empty(area)

    accumulated = accumulate(items)
    scales = build_scales(accumulated, area)
    logger.debug(
        "Rendering %d bars, total abatement %s, cost domain [%s, %s]",
        len(accumulated),
        accumulated.total_quantity,
        accumulated.min_cost,
        accumulated.max_cost,
    )
    return build_scene(accumulated, scales, chart_input.style)


def render_empty(area: PlotArea) -> Scene:
    return Scene(
        width=area.width,
        height=area.height,
        empty_state=EmptyState(
            message=EMPTY_STATE_MESSAGE, x=area.width / 2, y=area.height / 2
        ),
    )


def build_scene(
    accumulated: AccumulatedItems, scales: Scales, style: MaccStyle
) -> Scene:
    """
    Draw accumulated items onto a new scene.

    Parameters
    ----------
    accumulated
        Items in curve order; an empty set yields the empty state
    scales
        Scales built for these items
    style
        Resolved style options

    Returns
    -------
    Scene
    """
    area = scales.area
    if accumulated.is_empty:
        return render_empty(area)

    scene = Scene(width=area.width, height=area.height)
    scene.axis.extend(_quantity_axis(scales, style))
    scene.grid.extend(_cost_grid(scales, style))
    scene.bars.extend(_bars(accumulated, scales, style))
    if style.show_labels:
        scene.labels.extend(_bar_labels(scene.bars, scales.zero_y, style))
    return scene


def _quantity_axis(scales: Scales, style: MaccStyle) -> list[Line | Text]:
    zero_y = scales.zero_y
    x_start, x_end = scales.x_range
    primitives: list[Line | Text] = [
        Line(x_start, zero_y, x_end, zero_y, stroke=style.axis_color)
    ]
    for value in scales.quantity_ticks(QUANTITY_TICK_INTERVALS):
        x = scales.quantity_to_x(value)
        primitives.append(Line(x, zero_y, x, zero_y + TICK_LENGTH, stroke=style.axis_color))
        primitives.append(
            Text(
                x,
                zero_y + TICK_LABEL_OFFSET,
                format_quantity_tick(value, style.unit_symbol),
                fill=style.axis_color,
                anchor="middle",
            )
        )
    return primitives


def _cost_grid(scales: Scales, style: MaccStyle) -> list[Line | Text]:
    x_start, x_end = scales.x_range
    primitives: list[Line | Text] = []
    for value in scales.cost_ticks(COST_TICK_INTERVALS):
        y = scales.cost_to_y(value)
        primitives.append(Line(x_start, y, x_end, y, stroke=GRID_COLOR))
        primitives.append(
            Text(
                x_start - 8,
                y + 4,
                format_cost_tick(value, style.currency_symbol, style.decimal_places),
                fill=style.axis_color,
                anchor="end",
            )
        )
    return primitives


def _bars(accumulated: AccumulatedItems, scales: Scales, style: MaccStyle) -> list[Bar]:
    zero_y = scales.zero_y
    bars = []
    for item in accumulated.items:
        x = scales.quantity_to_x(item.range_start)
        width = max(MIN_BAR_SIZE, scales.quantity_to_x(item.range_end) - x)
        cost_y = scales.cost_to_y(item.cost)
        # Positive bars grow up from the baseline, negative bars hang below it
        y = cost_y if item.cost >= 0 else zero_y
        height = max(MIN_BAR_SIZE, abs(cost_y - zero_y))
        fill = style.positive_color if item.cost >= 0 else style.negative_color
        bars.append(Bar(rect=Rect(x, y, width, height, fill=fill), item=item))
    return bars


def _bar_labels(bars: list[Bar], zero_y: float, style: MaccStyle) -> list[Text]:
    labels = []
    for bar in bars:
        rect = bar.rect
        x = rect.x + rect.width / 2
        if bar.item.cost >= 0:
            y = rect.y - 4
        else:
            y = max(rect.y + rect.height + 12, zero_y + NEGATIVE_LABEL_MIN_OFFSET)
        labels.append(
            Text(
                x,
                y,
                bar.item.label,
                fill=style.axis_color,
                anchor="middle",
                font_size=LABEL_FONT_SIZE,
            )
        )
    return labels
