"""Number and label formatting shared by axes, bar labels and tooltips."""

from __future__ import annotations

import locale
import math
from typing import Any


def format_number(value: Any, decimals: int) -> str:
    """
    Format a number with digit grouping and a fixed number of decimals.

    Grouping and decimal separators come from the active ``LC_NUMERIC``
    locale. Locales without a grouping separator (such as the default "C"
    locale) use ``,`` and ``.``.

    Parameters
    ----------
    value
        Number to format. ``None``, NaN and values that are not numbers
        format to an empty string.
    decimals
        Number of decimal places

    Returns
    -------
    str
        Formatted number
    """
    if value is None:
        return ""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ""
    if math.isnan(number):
        return ""
    if math.isinf(number):
        return "∞" if number > 0 else "-∞"
    if round(number, decimals) == 0:
        # no "-0.00"
        number = 0.0

    conventions = locale.localeconv()
    thousands_sep = conventions.get("thousands_sep") or ","
    decimal_point = conventions.get("decimal_point") or "."
    text = f"{number:,.{decimals}f}"
    return text.translate(str.maketrans({",": thousands_sep, ".": decimal_point}))


def format_quantity_tick(value: float, unit_symbol: str) -> str:
    return f"{format_number(value, 0)} {unit_symbol}"


def format_cost_tick(value: float, currency_symbol: str, decimals: int) -> str:
    return f"{currency_symbol} {format_number(value, decimals)}/t"
