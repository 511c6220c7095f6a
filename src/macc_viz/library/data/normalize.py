"""
Normalisation of host rows into chart items.

Rows that cannot be drawn are dropped rather than reported: an abatement of
zero or less has no width on the curve, and non-finite numbers have no place
on either axis. A dataset that loses every row renders the empty state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import pandas as pd

from macc_viz.library.config.models import FieldKeys
from macc_viz.library.data.items import PLACEHOLDER_LABEL, ChartItem

logger = logging.getLogger(__name__)


def first_value(cell: Any) -> Any:
    """
    Unwrap a host cell value.

    Hosts using an object transform deliver each field as a list of values,
    of which only the first is meaningful here. Plain values pass through.
    """
    if isinstance(cell, (list, tuple)):
        return cell[0] if len(cell) else None
    return cell


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def rows_to_frame(
    rows: Iterable[Mapping[str, Any]] | pd.DataFrame,
    field_keys: FieldKeys | None = None,
) -> pd.DataFrame:
    """
    Collect the chart fields of each row into a DataFrame.

    Parameters
    ----------
    rows
        Host rows (mappings of field key to value or list of values) or a
        DataFrame whose columns are the field keys
    field_keys
        Field names to read, defaults to :class:`FieldKeys`

    Returns
    -------
    pd.DataFrame
        Columns ``label``, ``quantity``, ``cost`` and ``group`` in input order,
        with raw (unparsed) values
    """
    field_keys = field_keys or FieldKeys()
    columns = {
        "label": field_keys.action,
        "quantity": field_keys.abatement,
        "cost": field_keys.cost,
        "group": field_keys.category,
    }

    if isinstance(rows, pd.DataFrame):
        frame = pd.DataFrame(index=rows.index)
        for name, key in columns.items():
            if key in rows.columns:
                frame[name] = rows[key].map(first_value).astype(object)
            else:
                frame[name] = pd.Series([None] * len(rows), index=rows.index, dtype=object)
        return frame.reset_index(drop=True)

    records = []
    for row in rows:
        if not isinstance(row, Mapping):
            row = {}
        records.append({name: first_value(row.get(key)) for name, key in columns.items()})
    return pd.DataFrame.from_records(records, columns=list(columns))


def normalize_rows(
    rows: Iterable[Mapping[str, Any]] | pd.DataFrame,
    field_keys: FieldKeys | None = None,
) -> list[ChartItem]:
    """
    Convert host rows into chart items, discarding rows that cannot be drawn.

    Parameters
    ----------
    rows
        Host rows or a DataFrame, see :func:`rows_to_frame`
    field_keys
        Field names to read, defaults to :class:`FieldKeys`

    Returns
    -------
    list[ChartItem]
        Items in input order, without cumulative ranges

    Notes
    -----
    Missing or non-numeric abatement and cost values are coerced to 0 before
    filtering, so a row without an abatement is dropped while a row without a
    cost is drawn at zero cost.
    """
    frame = rows_to_frame(rows, field_keys)

    quantity = pd.to_numeric(frame["quantity"], errors="coerce").fillna(0.0)
    cost = pd.to_numeric(frame["cost"], errors="coerce").fillna(0.0)
    quantity = quantity.astype(float)
    cost = cost.astype(float)

    keep = np.isfinite(quantity) & (quantity > 0) & np.isfinite(cost)
    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.debug(
            "Dropped %d of %d rows with non-positive or non-finite values",
            n_dropped,
            len(frame),
        )

    items = []
    for label, q, c, group in zip(
        frame["label"][keep], quantity[keep], cost[keep], frame["group"][keep]
    ):
        items.append(
            ChartItem(
                label=PLACEHOLDER_LABEL if _is_missing(label) else str(label),
                quantity=float(q),
                cost=float(c),
                group=None if _is_missing(group) else str(group),
            )
        )
    return items
