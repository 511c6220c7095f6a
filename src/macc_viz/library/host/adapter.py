"""
Host adapter: the object a host registry calls on every redraw.

The adapter owns the two long-lived resources of the chart. The container
(a matplotlib figure) is created on the first draw and cleared and reused on
every later one. The tooltip is created with the adapter and only ever
mutated. Everything else is rebuilt from the host message by
:func:`macc_viz.library.render.renderer.render`.
"""

from __future__ import annotations

import logging
from typing import Any

from matplotlib.figure import Figure

from macc_viz.library.config.models import FieldKeys
from macc_viz.library.host.payload import parse_payload
from macc_viz.library.interaction.bridge import HostBridge, NullHost
from macc_viz.library.interaction.handlers import InteractionLayer
from macc_viz.library.interaction.mpl_binding import MatplotlibBinding
from macc_viz.library.interaction.tooltip import Tooltip
from macc_viz.library.render.mpl import (
    DEFAULT_DPI,
    create_figure,
    draw_scene,
    pixel_axes,
    resize_figure,
)
from macc_viz.library.render.renderer import render
from macc_viz.library.render.scene import Scene

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER_ID = "macc-root"


class ContainerRegistry:
    """Figures by container ID, created on first request and reused after."""

    def __init__(self, dpi: int = DEFAULT_DPI) -> None:
        self.dpi = dpi
        self._containers: dict[str, Figure] = {}

    def __contains__(self, container_id: str) -> bool:
        return container_id in self._containers

    def get(self, container_id: str) -> Figure | None:
        return self._containers.get(container_id)

    def get_or_create(self, container_id: str, width: float, height: float) -> Figure:
        figure = self._containers.get(container_id)
        if figure is None:
            logger.debug("Creating container %r (%sx%s)", container_id, width, height)
            figure = create_figure(width, height, dpi=self.dpi)
            self._containers[container_id] = figure
        else:
            resize_figure(figure, width, height)
        return figure


class MaccVisualization:
    """
    Render a MACC for a host and route pointer events back to it.

    Parameters
    ----------
    host
        Capability query and filter emission target; defaults to a host
        without filtering
    container_id
        ID of the container to draw into
    containers
        Registry the container is looked up in; a private one by default
    field_keys
        Row field names for the chart dimensions and metrics

    Examples
    --------
    >>> events = []
    >>> viz = MaccVisualization(host=CallbackHost(lambda f, v: events.append((f, v))))
    >>> scene = viz.draw(message, width=800, height=500)
    >>> viz.layer.on_click(scene.bars[0].rect.x + 1, scene.bars[0].rect.y + 1)
    True
    """

    def __init__(
        self,
        host: HostBridge | None = None,
        container_id: str = DEFAULT_CONTAINER_ID,
        containers: ContainerRegistry | None = None,
        field_keys: FieldKeys | None = None,
    ) -> None:
        self.host = host or NullHost()
        self.container_id = container_id
        self.containers = containers or ContainerRegistry()
        self.field_keys = field_keys or FieldKeys()
        self.tooltip = Tooltip()
        self.layer = InteractionLayer(tooltip=self.tooltip, host=self.host)
        self.binding = MatplotlibBinding(self.layer)
        self.scene: Scene | None = None

    @property
    def figure(self) -> Figure | None:
        """The container figure, or None before the first draw."""
        return self.containers.get(self.container_id)

    def draw(
        self,
        payload: Any,
        width: float | None = None,
        height: float | None = None,
    ) -> Scene:
        """
        Redraw the chart for a host message.

        Parameters
        ----------
        payload
            Host message, see :mod:`macc_viz.library.host.payload`
        width, height
            Current container size in pixels, if the host reports it

        Returns
        -------
        Scene
            The scene that was drawn
        """
        request = parse_payload(payload, width, height, self.field_keys)
        scene = render(request.chart_input)

        figure = self.containers.get_or_create(
            self.container_id, scene.width, scene.height
        )
        figure.clear()
        axes = pixel_axes(figure, scene.width, scene.height)
        draw_scene(scene, axes)

        self.layer.attach(
            scene,
            style=request.chart_input.style,
            field_id=request.filter_field_id,
        )
        self.binding.connect(figure.canvas)
        self.binding.bind_axes(axes)
        figure.canvas.draw_idle()

        self.scene = scene
        return scene

    __call__ = draw
