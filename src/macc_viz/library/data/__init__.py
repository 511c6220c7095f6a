"""
Data preparation for the curve: row normalisation and cost-ordered stacking.

"""

from macc_viz.library.data.accumulate import accumulate, sort_by_cost
from macc_viz.library.data.items import PLACEHOLDER_LABEL, AccumulatedItems, ChartItem
from macc_viz.library.data.normalize import first_value, normalize_rows, rows_to_frame

__all__ = [
    "PLACEHOLDER_LABEL",
    "AccumulatedItems",
    "ChartItem",
    "accumulate",
    "first_value",
    "normalize_rows",
    "rows_to_frame",
    "sort_by_cost",
]
