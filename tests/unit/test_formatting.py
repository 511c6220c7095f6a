"""Tests for number and tick label formatting."""

from __future__ import annotations

import locale

import numpy as np
import pytest

from macc_viz.library.chart.formatting import (
    format_cost_tick,
    format_number,
    format_quantity_tick,
)


@pytest.fixture(autouse=True)
def c_locale():
    """Run every test under the C numeric locale."""
    previous = locale.setlocale(locale.LC_NUMERIC)
    locale.setlocale(locale.LC_NUMERIC, "C")
    yield
    locale.setlocale(locale.LC_NUMERIC, previous)


class TestFormatNumber:
    """Test grouping, decimals and missing values."""

    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (1234.5, 2, "1,234.50"),
            (1234567.891, 0, "1,234,568"),
            (-9876.5, 1, "-9,876.5"),
            (0, 2, "0.00"),
            (42, 0, "42"),
            ("17.25", 1, "17.2"),
        ],
    )
    def test_grouping_and_decimals(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    @pytest.mark.parametrize("value", [None, float("nan"), np.nan, "abc", object()])
    def test_missing_values_format_empty(self, value):
        assert format_number(value, 2) == ""

    def test_no_negative_zero(self):
        assert format_number(-1e-12, 2) == "0.00"

    def test_infinity(self):
        assert format_number(float("inf"), 2) == "∞"

    def test_locale_separators(self, monkeypatch):
        """Separators come from the active locale conventions."""
        conventions = dict(locale.localeconv())
        conventions.update(thousands_sep=".", decimal_point=",")
        monkeypatch.setattr(locale, "localeconv", lambda: conventions)

        assert format_number(1234.5, 2) == "1.234,50"


class TestTickLabels:
    def test_quantity_tick(self):
        assert format_quantity_tick(12500.4, "tCO2e") == "12,500 tCO2e"

    def test_cost_tick(self):
        assert format_cost_tick(-3.0, "R$", 2) == "R$ -3.00/t"

    def test_cost_tick_zero_decimals(self):
        assert format_cost_tick(1499.6, "€", 0) == "€ 1,500/t"
