"""
Pointer interaction: hover tooltip and click-to-filter.

"""

from macc_viz.library.interaction.bridge import CallbackHost, HostBridge, NullHost
from macc_viz.library.interaction.handlers import InteractionLayer
from macc_viz.library.interaction.tooltip import Tooltip, format_tooltip

__all__ = [
    "CallbackHost",
    "HostBridge",
    "InteractionLayer",
    "NullHost",
    "Tooltip",
    "format_tooltip",
]
