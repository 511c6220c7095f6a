"""The interface through which the chart talks back to its host."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class HostBridge(Protocol):
    """Capabilities a host environment offers to the chart."""

    def can_filter(self) -> bool:
        """Whether click-to-filter is enabled in the current context."""
        ...

    def emit_filter(self, field_id: str, value: str) -> None:
        """Apply a filter selecting ``value`` on field ``field_id``."""
        ...


class NullHost:
    """Host without interaction support: clicks never emit anything."""

    def can_filter(self) -> bool:
        return False

    def emit_filter(self, field_id: str, value: str) -> None:
        pass


class CallbackHost:
    """
    Host built from plain callables.

    Parameters
    ----------
    on_filter
        Called with ``(field_id, value)`` for every filter selection
    filter_enabled
        Either a fixed flag or a zero-argument callable queried on every
        click, for hosts where the capability can change between draws
    """

    def __init__(
        self,
        on_filter: Callable[[str, str], None],
        filter_enabled: bool | Callable[[], bool] = True,
    ) -> None:
        self._on_filter = on_filter
        self._filter_enabled = filter_enabled

    def can_filter(self) -> bool:
        if callable(self._filter_enabled):
            return bool(self._filter_enabled())
        return bool(self._filter_enabled)

    def emit_filter(self, field_id: str, value: str) -> None:
        self._on_filter(field_id, value)
