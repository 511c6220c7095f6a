"""
Host integration: render-message parsing and the redraw adapter.

"""

from macc_viz.library.host.adapter import (
    DEFAULT_CONTAINER_ID,
    ContainerRegistry,
    MaccVisualization,
)
from macc_viz.library.host.payload import RenderRequest, parse_payload

__all__ = [
    "DEFAULT_CONTAINER_ID",
    "ContainerRegistry",
    "MaccVisualization",
    "RenderRequest",
    "parse_payload",
]
