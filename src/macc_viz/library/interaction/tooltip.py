"""
The shared floating tooltip.

One tooltip serves every bar: hovering replaces its content and position
instead of creating a new element, so at most one tooltip is ever visible.
"""

from __future__ import annotations

from collections.abc import Callable

from attrs import define, field

from macc_viz.library.chart.formatting import format_number
from macc_viz.library.config.models import MaccStyle
from macc_viz.library.data.items import ChartItem

TOOLTIP_OFFSET = 12


@define
class Tooltip:
    """
    Mutable tooltip state, created once by its owner and reused.

    Attributes
    ----------
    text
        Current content
    x, y
        Top-left corner in container pixels (pointer position plus offset)
    visible
        Whether the tooltip is shown
    listeners
        Callables notified with the tooltip after every change, used by
        outputs that mirror the tooltip onto a real widget
    """

    text: str = ""
    x: float = 0.0
    y: float = 0.0
    visible: bool = False
    offset: float = TOOLTIP_OFFSET
    listeners: list[Callable[[Tooltip], None]] = field(factory=list, repr=False)

    def show(self, text: str, x: float, y: float) -> None:
        """Show ``text`` next to the pointer at ``(x, y)``."""
        self.text = text
        self.x = x + self.offset
        self.y = y + self.offset
        self.visible = True
        self._notify()

    def hide(self) -> None:
        if not self.visible:
            return
        self.visible = False
        self._notify()

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self)


def format_tooltip(item: ChartItem, style: MaccStyle) -> str:
    """Tooltip text for a bar, formatted like the axis labels."""
    quantity = format_number(item.quantity, style.decimal_places)
    cost = format_number(item.cost, style.decimal_places)
    return "\n".join(
        [
            item.label,
            f"Abatement: {quantity} {style.unit_symbol}",
            f"Cost: {style.currency_symbol} {cost}/t",
        ]
    )
