"""
Ordering and stacking of chart items along the abatement axis.

Sorting by ascending cost puts the cheapest abatement options leftmost, so the
cumulative width up to any point reads as the total abatement available at or
below that cost.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from macc_viz.library.data.items import AccumulatedItems, ChartItem

logger = logging.getLogger(__name__)


def sort_by_cost(items: Sequence[ChartItem]) -> list[ChartItem]:
    """Sort items by ascending cost, keeping input order for equal costs."""
    # sorted() is stable
    return sorted(items, key=lambda item: item.cost)


def accumulate(items: Sequence[ChartItem]) -> AccumulatedItems:
    """
    Sort items by cost and assign their cumulative abatement ranges.

    Parameters
    ----------
    items
        Normalised items, all with finite, strictly positive quantity

    Returns
    -------
    AccumulatedItems
        New items with ``range_start``/``range_end`` set, the total quantity
        and the cost domain widened to include zero. The input items are not
        modified.

    Notes
    -----
    If the running sum overflows to infinity, the item that overflows it and
    every more expensive item are dropped, so the total stays finite.
    """
    placed = []
    running = 0.0
    ordered = sort_by_cost(items)
    for item in ordered:
        end = running + item.quantity
        if not math.isfinite(end):
            logger.warning(
                "Cumulative abatement overflows after %d of %d items, "
                "dropping the remaining %d",
                len(placed),
                len(ordered),
                len(ordered) - len(placed),
            )
            break
        placed.append(item.with_range(running, end))
        running = end

    costs = [item.cost for item in placed]
    return AccumulatedItems(
        items=tuple(placed),
        total_quantity=running,
        min_cost=min([0.0, *costs]),
        max_cost=max([0.0, *costs]),
    )
