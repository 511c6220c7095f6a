"""
Parsing of host render messages.

A host message looks like::

    {
        "tables": {"DEFAULT": [{"actionDim": ["LED lighting"], ...}, ...]},
        "style": {"posColor": {"value": {"color": "#4C78A8"}}, ...},
        "fields": {"actionDim": [{"id": "qt_action", "name": "Action"}], ...},
        "width": 800,
        "height": 500,
    }

Every part is optional. Parts that are missing or of the wrong shape are
treated as absent, so a malformed message renders the empty state instead of
failing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from attrs import define

from macc_viz.library.config.models import FieldKeys, MaccStyle
from macc_viz.library.render.renderer import ChartInput

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "DEFAULT"


@define(frozen=True)
class RenderRequest:
    """A parsed host message: chart input plus the filter target field."""

    chart_input: ChartInput
    filter_field_id: str | None = None


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _rows(payload: Mapping, table: str) -> list:
    rows = _mapping(payload.get("tables")).get(table)
    if rows is None:
        return []
    if isinstance(rows, (str, bytes, Mapping)):
        logger.warning("Ignoring table %r of type %s", table, type(rows).__name__)
        return []
    try:
        return list(rows)
    except TypeError:
        logger.warning("Ignoring table %r of type %s", table, type(rows).__name__)
        return []


def _first_field_id(fields: Mapping, key: str) -> str | None:
    entries = fields.get(key)
    if not isinstance(entries, (list, tuple)) or not entries:
        return None
    first = entries[0]
    if not isinstance(first, Mapping):
        return None
    field_id = first.get("id")
    return str(field_id) if field_id is not None else None


def _dimension(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_payload(
    payload: Any,
    width: float | None = None,
    height: float | None = None,
    field_keys: FieldKeys | None = None,
) -> RenderRequest:
    """
    Turn a host message into a :class:`RenderRequest`.

    Parameters
    ----------
    payload
        Host message, see module docstring
    width, height
        Container size reported by the host; overrides ``width``/``height``
        in the message
    field_keys
        Row field names, defaults to :class:`FieldKeys`

    Returns
    -------
    RenderRequest
    """
    field_keys = field_keys or FieldKeys()
    if not isinstance(payload, Mapping):
        if payload is not None:
            logger.warning(
                "Ignoring host message of type %s", type(payload).__name__
            )
        payload = {}

    chart_input = ChartInput(
        rows=_rows(payload, DEFAULT_TABLE),
        style=MaccStyle.from_style_bag(payload.get("style")),
        width=_dimension(width) or _dimension(payload.get("width")),
        height=_dimension(height) or _dimension(payload.get("height")),
        field_keys=field_keys,
    )
    return RenderRequest(
        chart_input=chart_input,
        filter_field_id=_first_field_id(_mapping(payload.get("fields")), field_keys.action),
    )
