"""SVG serialisation of scenes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from macc_viz.library.render.scene import Line, Primitive, Rect, Scene, Text

SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _element(primitive: Primitive) -> ET.Element:
    if isinstance(primitive, Line):
        return ET.Element(
            "line",
            {
                "x1": _num(primitive.x1),
                "y1": _num(primitive.y1),
                "x2": _num(primitive.x2),
                "y2": _num(primitive.y2),
                "stroke": primitive.stroke,
                "stroke-width": _num(primitive.stroke_width),
            },
        )
    if isinstance(primitive, Rect):
        return ET.Element(
            "rect",
            {
                "x": _num(primitive.x),
                "y": _num(primitive.y),
                "width": _num(primitive.width),
                "height": _num(primitive.height),
                "fill": primitive.fill,
            },
        )
    if isinstance(primitive, Text):
        attrs = {
            "x": _num(primitive.x),
            "y": _num(primitive.y),
            "text-anchor": primitive.anchor,
            "fill": primitive.fill,
        }
        if primitive.font_size is not None:
            attrs["font-size"] = _num(primitive.font_size)
        element = ET.Element("text", attrs)
        element.text = primitive.text
        return element
    raise TypeError(f"Cannot serialise {type(primitive).__name__} to SVG")


def scene_to_element(scene: Scene) -> ET.Element:
    """Build the ``<svg>`` element tree for a scene."""
    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _num(scene.width),
            "height": _num(scene.height),
            "style": f"font: {scene.font}",
        },
    )

    if scene.empty_state is not None:
        empty = scene.empty_state
        message = ET.SubElement(
            svg,
            "text",
            {
                "x": _num(empty.x),
                "y": _num(empty.y),
                "text-anchor": "middle",
                "dominant-baseline": "middle",
                "fill": empty.fill,
                "font-size": _num(empty.font_size),
                "class": "empty-state",
            },
        )
        message.text = empty.message
        return svg

    for group_name, primitives in (("axis", scene.axis), ("grid", scene.grid)):
        group = ET.SubElement(svg, "g", {"class": group_name})
        group.extend(_element(p) for p in primitives)

    bars = ET.SubElement(svg, "g", {"class": "bars"})
    for bar in scene.bars:
        rect = _element(bar.rect)
        rect.set("data-label", bar.item.label)
        title = ET.SubElement(rect, "title")
        title.text = bar.item.label
        bars.append(rect)

    if scene.labels:
        labels = ET.SubElement(svg, "g", {"class": "labels"})
        labels.extend(_element(t) for t in scene.labels)
    return svg


def scene_to_svg(scene: Scene) -> str:
    """
    Serialise a scene to an SVG document.

    Parameters
    ----------
    scene
        Scene to serialise

    Returns
    -------
    str
        SVG markup
    """
    return ET.tostring(scene_to_element(scene), encoding="unicode")


def write_svg(scene: Scene, output_path: Path | str) -> Path:
    """Write a scene to an SVG file and return its path."""
    output_path = Path(output_path)
    output_path.write_text(scene_to_svg(scene), encoding="utf-8")
    return output_path
