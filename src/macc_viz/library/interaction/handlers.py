"""
Pointer handling for rendered bars.

Handlers receive pointer positions in container pixels and resolve them
against the bars of the most recently attached scene. Event delivery is the
host's business; see :mod:`macc_viz.library.interaction.mpl_binding` for the
matplotlib wiring.
"""

from __future__ import annotations

import logging
from typing import Any

from attrs import NOTHING, define, field

from macc_viz.library.config.models import MaccStyle
from macc_viz.library.interaction.bridge import HostBridge, NullHost
from macc_viz.library.interaction.tooltip import Tooltip, format_tooltip
from macc_viz.library.render.scene import Bar, Scene

logger = logging.getLogger(__name__)


@define
class InteractionLayer:
    """
    Tooltip and click-to-filter behaviour for the bars of a scene.

    Attributes
    ----------
    tooltip
        Shared tooltip, owned by whoever created the layer
    host
        Capability query and filter emission target
    style
        Style used to format tooltip numbers
    field_id
        Host field ID of the action dimension; without it clicks do nothing
    """

    tooltip: Tooltip = field(factory=Tooltip)
    host: HostBridge = field(factory=NullHost)
    style: MaccStyle = field(factory=MaccStyle)
    field_id: str | None = None
    scene: Scene | None = field(default=None, init=False)

    def attach(
        self,
        scene: Scene,
        style: MaccStyle | None = None,
        field_id: Any = NOTHING,
    ) -> None:
        """
        Replace the handled bars with those of ``scene``.

        ``style`` and ``field_id`` are only replaced when given; pass
        ``field_id=None`` to switch filtering off.
        """
        self.scene = scene
        if style is not None:
            self.style = style
        if field_id is not NOTHING:
            self.field_id = field_id
        self.tooltip.hide()

    def bar_at(self, x: float, y: float) -> Bar | None:
        if self.scene is None:
            return None
        return self.scene.bar_at(x, y)

    def on_pointer_move(self, x: float, y: float) -> Bar | None:
        """Show the tooltip for the bar under the pointer, or hide it."""
        bar = self.bar_at(x, y)
        if bar is None:
            self.tooltip.hide()
            return None
        self.tooltip.show(format_tooltip(bar.item, self.style), x, y)
        return bar

    def on_pointer_leave(self) -> None:
        self.tooltip.hide()

    def on_click(self, x: float, y: float) -> bool:
        """
        Emit a filter selection for the clicked bar.

        Returns
        -------
        bool
            True if a filter event was emitted
        """
        bar = self.bar_at(x, y)
        if bar is None or self.field_id is None:
            return False
        if not self.host.can_filter():
            return False
        logger.info("Filtering %s on %r", self.field_id, bar.item.label)
        self.host.emit_filter(self.field_id, bar.item.label)
        return True
