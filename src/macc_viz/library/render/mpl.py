"""
Drawing scenes onto matplotlib figures.

The axes are set up so that data coordinates are container pixels with the
origin at the top-left, the same space the scene and the interaction layer
use. Mouse events on the canvas therefore report ``xdata``/``ydata`` that can
be hit-tested against scene bars directly.
"""

from __future__ import annotations

import logging
import re

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Rectangle

from macc_viz.library.render.scene import Line, Rect, Scene, Text

logger = logging.getLogger(__name__)

DEFAULT_DPI = 100
FALLBACK_COLOR = "#000000"

_CSS_RGB = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)
_ANCHOR_TO_HA = {"start": "left", "middle": "center", "end": "right"}


def to_mpl_color(color: str) -> tuple[float, float, float, float]:
    """
    Convert a CSS colour to a matplotlib RGBA tuple.

    Handles ``rgb()``/``rgba()`` notation on top of everything matplotlib
    understands (hex, named colours). Unparseable colours are drawn black.
    """
    match = _CSS_RGB.match(color.strip())
    if match:
        r, g, b, a = match.groups()
        return (float(r) / 255, float(g) / 255, float(b) / 255, float(a or 1.0))
    try:
        return to_rgba(color)
    except ValueError:
        logger.warning("Unrecognised colour %r, drawing in black", color)
        return to_rgba(FALLBACK_COLOR)


def create_figure(width: float, height: float, dpi: int = DEFAULT_DPI) -> Figure:
    """Create a figure of ``width`` x ``height`` pixels with an Agg canvas."""
    figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasAgg(figure)
    return figure


def resize_figure(figure: Figure, width: float, height: float) -> None:
    figure.set_size_inches(width / figure.dpi, height / figure.dpi)


def pixel_axes(figure: Figure, width: float, height: float) -> Axes:
    """Add full-bleed axes whose data coordinates are container pixels."""
    ax = figure.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    return ax


def _points(figure: Figure, pixels: float) -> float:
    return pixels * 72 / figure.dpi


def draw_scene(scene: Scene, ax: Axes, base_font_px: float = 12) -> None:
    """
    Draw every primitive of a scene onto pixel axes.

    Parameters
    ----------
    scene
        Scene to draw
    ax
        Axes created with :func:`pixel_axes`
    base_font_px
        Font size for text without an explicit size
    """
    figure = ax.figure

    if scene.empty_state is not None:
        empty = scene.empty_state
        ax.text(
            empty.x,
            empty.y,
            empty.message,
            ha="center",
            va="center",
            wrap=True,
            color=to_mpl_color(empty.fill),
            fontsize=_points(figure, empty.font_size),
        )
        return

    for zorder, primitive in enumerate(scene.primitives(), start=1):
        if isinstance(primitive, Line):
            ax.add_line(
                Line2D(
                    [primitive.x1, primitive.x2],
                    [primitive.y1, primitive.y2],
                    color=to_mpl_color(primitive.stroke),
                    linewidth=_points(figure, primitive.stroke_width),
                    zorder=zorder,
                )
            )
        elif isinstance(primitive, Rect):
            ax.add_patch(
                Rectangle(
                    (primitive.x, primitive.y),
                    primitive.width,
                    primitive.height,
                    facecolor=to_mpl_color(primitive.fill),
                    edgecolor="none",
                    zorder=zorder,
                )
            )
        elif isinstance(primitive, Text):
            ax.text(
                primitive.x,
                primitive.y,
                primitive.text,
                ha=_ANCHOR_TO_HA[primitive.anchor],
                va="baseline",
                color=to_mpl_color(primitive.fill),
                fontsize=_points(figure, primitive.font_size or base_font_px),
                zorder=zorder,
            )
