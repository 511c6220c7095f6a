"""
Scene construction and vector outputs.

"""

from macc_viz.library.render.renderer import (
    EMPTY_STATE_MESSAGE,
    ChartInput,
    build_scene,
    render,
)
from macc_viz.library.render.scene import Bar, EmptyState, Line, Rect, Scene, Text
from macc_viz.library.render.svg import scene_to_svg, write_svg

__all__ = [
    "EMPTY_STATE_MESSAGE",
    "Bar",
    "ChartInput",
    "EmptyState",
    "Line",
    "Rect",
    "Scene",
    "Text",
    "build_scene",
    "render",
    "scene_to_svg",
    "write_svg",
]
