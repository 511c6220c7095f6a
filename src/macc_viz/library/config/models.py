"""Pydantic models for chart style and field configuration.

Host style bags are loosely typed: entries may be missing, wrapped in
``{"value": ...}``/``{"defaultValue": ...}`` envelopes, or hold values of the
wrong type. All of that is resolved once, in :meth:`MaccStyle.from_style_bag`,
so rendering code only ever sees a fully populated :class:`MaccStyle`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_POSITIVE_COLOR = "#4C78A8"
DEFAULT_NEGATIVE_COLOR = "#72B7B2"
DEFAULT_AXIS_COLOR = "#333333"
DEFAULT_DECIMAL_PLACES = 2

# Style option name -> key used in the host style bag
STYLE_BAG_KEYS: dict[str, str] = {
    "positive_color": "posColor",
    "negative_color": "negColor",
    "axis_color": "axisColor",
    "show_labels": "showLabels",
    "currency_symbol": "currency",
    "unit_symbol": "unit",
    "decimal_places": "decimals",
}

COLOR_OPTIONS = ("positive_color", "negative_color", "axis_color")


class MaccStyle(BaseModel):
    """Resolved style options for one draw pass."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    positive_color: str = Field(
        DEFAULT_POSITIVE_COLOR, description="Fill for bars with cost >= 0"
    )
    negative_color: str = Field(
        DEFAULT_NEGATIVE_COLOR, description="Fill for bars with cost < 0"
    )
    axis_color: str = Field(
        DEFAULT_AXIS_COLOR, description="Stroke and text colour for axes"
    )
    show_labels: bool = Field(True, description="Render a text label per bar")
    currency_symbol: str = Field("R$", description="Prefix for cost tick labels")
    unit_symbol: str = Field("tCO2e", description="Suffix for abatement tick labels")
    decimal_places: int = Field(
        DEFAULT_DECIMAL_PLACES,
        ge=0,
        le=20,
        description="Number of decimal places for cost labels",
    )

    @field_validator(*COLOR_OPTIONS)
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Colours are passed through to the output as-is but may not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("colour must be a non-empty string")
        return v

    @classmethod
    def from_style_bag(cls, bag: Any) -> MaccStyle:
        """
        Build a style from a host style bag, falling back per option.

        Parameters
        ----------
        bag
            Mapping of host style keys (``posColor``, ``decimals``...) to
            entries. Anything that is not a mapping yields the defaults.

        Returns
        -------
        MaccStyle
            Style with every unusable entry replaced by its default
        """
        if not isinstance(bag, Mapping):
            if bag is not None:
                logger.warning(
                    "Ignoring style bag of type %s, using default style",
                    type(bag).__name__,
                )
            return cls()

        values: dict[str, Any] = {}
        for option, key in STYLE_BAG_KEYS.items():
            raw = _style_bag_value(bag, key)
            if option in COLOR_OPTIONS and isinstance(raw, Mapping):
                raw = raw.get("color")
            if raw is None or raw == "":
                continue
            try:
                cls.model_validate({option: raw})
            except ValidationError:
                logger.warning(
                    "Style option %r has unusable value %r, using default", key, raw
                )
                continue
            values[option] = raw
        return cls(**values)


def _style_bag_value(bag: Mapping, key: str) -> Any:
    """Unwrap a host style entry, preferring ``value`` over ``defaultValue``."""
    try:
        entry = bag.get(key)
    except Exception:  # noqa: BLE001 - arbitrary host mapping implementations
        logger.warning("Style lookup for %r failed, using default", key)
        return None
    if entry is None or entry == "":
        return None
    if isinstance(entry, Mapping) and not entry:
        return None
    if isinstance(entry, Mapping) and ("value" in entry or "defaultValue" in entry):
        value = entry.get("value")
        return value if value is not None else entry.get("defaultValue")
    return entry


class FieldKeys(BaseModel):
    """Names of the row fields carrying each chart dimension or metric."""

    model_config = ConfigDict(frozen=True)

    action: str = Field("actionDim", description="Action/label dimension")
    abatement: str = Field("abatementMetric", description="Abatement metric")
    cost: str = Field("costMetric", description="Marginal cost metric")
    category: str = Field("categoryDim", description="Optional category dimension")
