"""Wiring of matplotlib canvas events to an interaction layer."""

from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.backend_bases import FigureCanvasBase, MouseButton

from macc_viz.library.interaction.handlers import InteractionLayer
from macc_viz.library.interaction.tooltip import Tooltip


class MatplotlibBinding:
    """
    Deliver canvas pointer events to an :class:`InteractionLayer`.

    The canvas connections are made once; every redraw creates new pixel
    axes, so :meth:`bind_axes` moves the tooltip annotation onto them.
    """

    def __init__(self, layer: InteractionLayer) -> None:
        self.layer = layer
        self.axes: Axes | None = None
        self._annotation = None
        self._canvas: FigureCanvasBase | None = None
        self._connection_ids: list[int] = []
        layer.tooltip.listeners.append(self._sync_annotation)

    def connect(self, canvas: FigureCanvasBase) -> None:
        if canvas is self._canvas:
            return
        self.disconnect()
        self._canvas = canvas
        self._connection_ids = [
            canvas.mpl_connect("motion_notify_event", self._on_motion),
            canvas.mpl_connect("axes_leave_event", self._on_leave),
            canvas.mpl_connect("figure_leave_event", self._on_leave),
            canvas.mpl_connect("button_press_event", self._on_button_press),
        ]

    def disconnect(self) -> None:
        if self._canvas is not None:
            for cid in self._connection_ids:
                self._canvas.mpl_disconnect(cid)
        self._canvas = None
        self._connection_ids = []

    def bind_axes(self, axes: Axes) -> None:
        self.axes = axes
        self._annotation = self._create_annotation(axes)

    def _create_annotation(self, axes: Axes):
        annotation = axes.annotate(
            "",
            xy=(0, 0),
            xycoords="data",
            ha="left",
            va="top",
            color="white",
            fontsize=9,
            bbox={"boxstyle": "round", "fc": (0, 0, 0, 0.8), "ec": "none"},
            annotation_clip=False,
        )
        # Above every scene primitive
        annotation.set_zorder(1000)
        annotation.set_visible(False)
        return annotation

    def _in_axes(self, event) -> bool:
        return (
            self.axes is not None
            and event.inaxes is self.axes
            and event.xdata is not None
            and event.ydata is not None
        )

    def _on_motion(self, event) -> None:
        if not self._in_axes(event):
            self.layer.on_pointer_leave()
            return
        self.layer.on_pointer_move(event.xdata, event.ydata)

    def _on_leave(self, event) -> None:
        self.layer.on_pointer_leave()

    def _on_button_press(self, event) -> None:
        if event.button != MouseButton.LEFT or not self._in_axes(event):
            return
        self.layer.on_click(event.xdata, event.ydata)

    def _sync_annotation(self, tooltip: Tooltip) -> None:
        if self._annotation is None:
            return
        self._annotation.set_text(tooltip.text)
        self._annotation.xy = (tooltip.x, tooltip.y)
        self._annotation.set_visible(tooltip.visible)
        if self._canvas is not None:
            self._canvas.draw_idle()

    @property
    def annotation(self):
        return self._annotation
