"""
Vector scene graph produced by one draw pass.

A scene is plain data: outputs (SVG, matplotlib) only translate primitives,
and the interaction layer hit-tests against the bar rectangles.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal, Union

from attrs import define, field

from macc_viz.library.data.items import ChartItem

DEFAULT_FONT = "12px system-ui, -apple-system, Segoe UI, Roboto, sans-serif"

TextAnchor = Literal["start", "middle", "end"]


@define(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0


@define(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@define(frozen=True)
class Text:
    x: float
    y: float
    text: str
    fill: str
    anchor: TextAnchor = "start"
    font_size: float | None = None


Primitive = Union[Line, Rect, Text]


@define(frozen=True)
class Bar:
    """A drawn bar and the item it represents."""

    rect: Rect
    item: ChartItem

    def contains(self, x: float, y: float) -> bool:
        return self.rect.contains(x, y)


@define(frozen=True)
class EmptyState:
    """Centred instructional message shown instead of a chart."""

    message: str
    x: float
    y: float
    fill: str = "#666"
    font_size: float = 14


@define
class Scene:
    """
    Everything drawn in one pass, grouped by paint order.

    Attributes
    ----------
    width, height
        Container size in pixels
    axis
        Baseline, abatement tick marks and their labels
    grid
        Cost gridlines and their labels
    bars
        One bar per item, left to right in ascending cost
    labels
        Per-bar text labels (empty when labels are switched off)
    empty_state
        Set instead of all of the above when there is nothing to draw
    """

    width: float
    height: float
    font: str = DEFAULT_FONT
    axis: list[Primitive] = field(factory=list)
    grid: list[Primitive] = field(factory=list)
    bars: list[Bar] = field(factory=list)
    labels: list[Text] = field(factory=list)
    empty_state: EmptyState | None = None

    @property
    def is_empty(self) -> bool:
        return self.empty_state is not None

    def primitives(self) -> Iterator[Primitive]:
        """Yield every primitive in paint order (later ones on top)."""
        yield from self.axis
        yield from self.grid
        for bar in self.bars:
            yield bar.rect
        yield from self.labels

    def bar_at(self, x: float, y: float) -> Bar | None:
        """Return the topmost bar containing the pixel, if any."""
        for bar in reversed(self.bars):
            if bar.contains(x, y):
                return bar
        return None
