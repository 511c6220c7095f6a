"""
Tests for error message formatting and typo detection.

These tests ensure that:
1. Error message templates format correctly with parameters
2. The suggest_similar function properly detects typos
"""

from __future__ import annotations

from macc_viz.library.error_messages import (
    ERROR_MESSAGES,
    format_error,
    suggest_similar,
)


class TestErrorMessageFormatting:
    """Test error message template formatting."""

    def test_format_error_config_file_missing(self):
        msg = format_error("config_file_missing", path="conf/style.yaml")

        assert "conf/style.yaml" in msg
        assert "WHAT HAPPENED:" in msg
        assert "HOW TO FIX:" in msg

    def test_format_error_unknown_style_option(self):
        suggestion = suggest_similar("posColor", ["positive_color", "negative_color"])
        msg = format_error(
            "unknown_style_option", option="posColor", suggestion=suggestion
        )

        assert "Style option 'posColor' not recognized" in msg
        assert "LIKELY CAUSE:" in msg
        assert "'decimal_places'" in msg

    def test_format_error_unknown_key(self):
        assert format_error("no_such_message") == "Unknown error: no_such_message"

    def test_all_messages_explain_what_happened(self):
        for key, template in ERROR_MESSAGES.items():
            assert "WHAT HAPPENED:" in template, key


class TestSuggestSimilar:
    """Test typo detection."""

    def test_close_match(self):
        result = suggest_similar("unit_symbl", ["unit_symbol", "currency_symbol"])

        assert result.startswith("Did you mean: unit_symbol")

    def test_no_match_lists_options(self):
        result = suggest_similar("zzz", ["show_labels", "axis_color"])

        assert result == "Valid options: show_labels, axis_color"
