"""Tests for drawing scenes onto matplotlib figures."""

from __future__ import annotations

import pytest
from matplotlib.patches import Rectangle

from macc_viz.library.render.mpl import (
    create_figure,
    draw_scene,
    pixel_axes,
    resize_figure,
    to_mpl_color,
)
from macc_viz.library.render.renderer import EMPTY_STATE_MESSAGE, ChartInput, render
from macc_viz.library.render.scene import Line


class TestColors:
    """Test CSS colour conversion."""

    def test_css_rgba(self):
        assert to_mpl_color("rgba(0,0,0,.08)") == pytest.approx((0, 0, 0, 0.08))

    def test_css_rgb(self):
        assert to_mpl_color("rgb(255, 0, 51)") == pytest.approx((1, 0, 0.2, 1))

    def test_hex(self):
        assert to_mpl_color("#4C78A8") == pytest.approx((0x4C / 255, 0x78 / 255, 0xA8 / 255, 1))

    def test_unknown_color_is_black(self):
        assert to_mpl_color("not-a-colour") == (0.0, 0.0, 0.0, 1.0)


class TestFigure:
    def test_figure_size_in_pixels(self):
        figure = create_figure(800, 500, dpi=100)

        assert tuple(figure.get_size_inches() * figure.dpi) == pytest.approx((800, 500))

    def test_resize(self):
        figure = create_figure(800, 500)
        resize_figure(figure, 300, 200)

        assert tuple(figure.get_size_inches() * figure.dpi) == pytest.approx((300, 200))

    def test_pixel_axes_origin_top_left(self):
        figure = create_figure(600, 400)
        ax = pixel_axes(figure, 600, 400)

        assert ax.get_xlim() == (0, 600)
        assert ax.get_ylim() == (400, 0)


class TestDrawScene:
    """Test translation of scene primitives."""

    def test_one_patch_per_bar(self, industry_rows):
        scene = render(ChartInput(rows=industry_rows))
        figure = create_figure(scene.width, scene.height)
        ax = pixel_axes(figure, scene.width, scene.height)

        draw_scene(scene, ax)

        rectangles = [p for p in ax.patches if isinstance(p, Rectangle)]
        assert len(rectangles) == len(scene.bars)
        first = rectangles[0]
        assert first.get_x() == pytest.approx(scene.bars[0].rect.x)
        assert first.get_width() == pytest.approx(scene.bars[0].rect.width)
        assert len(ax.lines) == len(
            [p for p in [*scene.axis, *scene.grid] if isinstance(p, Line)]
        )
        figure.canvas.draw()

    def test_empty_state_text(self):
        scene = render(ChartInput(rows=[]))
        figure = create_figure(scene.width, scene.height)
        ax = pixel_axes(figure, scene.width, scene.height)

        draw_scene(scene, ax)

        assert len(ax.patches) == 0
        assert [t.get_text() for t in ax.texts] == [EMPTY_STATE_MESSAGE]
