"""
Chart geometry: scales and number formatting.

"""

from macc_viz.library.chart.formatting import (
    format_cost_tick,
    format_number,
    format_quantity_tick,
)
from macc_viz.library.chart.scales import PlotArea, Scales, build_scales

__all__ = [
    "PlotArea",
    "Scales",
    "build_scales",
    "format_cost_tick",
    "format_number",
    "format_quantity_tick",
]
