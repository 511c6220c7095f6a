"""
Exceptions that are used throughout the macc-viz library.

Rendering itself never raises for bad row data or degenerate domains; these
exceptions cover the explicit configuration surface and host payloads that
cannot be interpreted at all.
"""

from __future__ import annotations


class MaccVizError(Exception):
    """Base exception for macc-viz library."""

    pass


class ConfigurationError(MaccVizError):
    """Raised when a style configuration is invalid."""

    pass


class DataError(MaccVizError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when configuration or data files cannot be loaded."""

    pass
