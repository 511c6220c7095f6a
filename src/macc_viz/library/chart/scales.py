"""
Linear scales from data domains to container pixels.

Pixel coordinates follow the SVG convention: the origin is the top-left
corner of the container and y grows downward.
"""

from __future__ import annotations

from attrs import define

from macc_viz.library.data.items import AccumulatedItems

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400


@define(frozen=True)
class PlotArea:
    """Container size and the plot rectangle inside its margins."""

    width: float
    height: float
    top: float = 28
    right: float = 20
    bottom: float = 38
    left: float = 60

    @property
    def plot_width(self) -> float:
        return max(100.0, self.width - self.left - self.right)

    @property
    def plot_height(self) -> float:
        return max(80.0, self.height - self.top - self.bottom)

    @classmethod
    def for_container(
        cls, width: float | None = None, height: float | None = None
    ) -> PlotArea:
        """Plot area for a container, using 600x400 for unknown dimensions."""
        return cls(width=width or DEFAULT_WIDTH, height=height or DEFAULT_HEIGHT)


@define(frozen=True)
class Scales:
    """
    Affine maps for one draw pass.

    Attributes
    ----------
    total_quantity
        Upper end of the abatement domain ``[0, total_quantity]``
    min_cost, max_cost
        Cost domain, containing zero
    area
        Plot area the domains map onto
    """

    total_quantity: float
    min_cost: float
    max_cost: float
    area: PlotArea

    @property
    def cost_span(self) -> float:
        # A zero-width cost domain maps every cost onto the baseline
        return (self.max_cost - self.min_cost) or 1.0

    def quantity_to_x(self, value: float) -> float:
        return self.area.left + (value / self.total_quantity) * self.area.plot_width

    def cost_to_y(self, value: float) -> float:
        height = self.area.plot_height
        return self.area.top + (height - (value - self.min_cost) / self.cost_span * height)

    @property
    def zero_y(self) -> float:
        """Pixel row of the zero-cost baseline."""
        return self.cost_to_y(0.0)

    @property
    def x_range(self) -> tuple[float, float]:
        return (self.area.left, self.area.left + self.area.plot_width)

    def quantity_ticks(self, n_intervals: int = 6) -> list[float]:
        """Evenly spaced abatement values from 0 to the total, inclusive."""
        step = self.total_quantity / n_intervals
        return [step * i for i in range(n_intervals + 1)]

    def cost_ticks(self, n_intervals: int = 5) -> list[float]:
        """Evenly spaced cost values across the cost domain, inclusive."""
        span = self.max_cost - self.min_cost
        return [self.min_cost + (i / n_intervals) * span for i in range(n_intervals + 1)]


def build_scales(accumulated: AccumulatedItems, area: PlotArea) -> Scales:
    """
    Build the scales for a set of accumulated items.

    Parameters
    ----------
    accumulated
        Non-empty accumulated items
    area
        Target plot area

    Returns
    -------
    Scales
    """
    return Scales(
        total_quantity=accumulated.total_quantity,
        min_cost=accumulated.min_cost,
        max_cost=accumulated.max_cost,
        area=area,
    )
