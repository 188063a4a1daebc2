"""Unit tests for the Pillow preview renderer."""

import numpy as np
import pytest

from glyph_lib.domain.primitives import EllipsePrimitive, RectPrimitive
from glyph_lib.utils.rendering import render_primitives, unit_to_pixel

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
RED = (255, 0, 0, 255)


class TestUnitToPixel:
    """Tests for unit_to_pixel."""

    @pytest.mark.parametrize('unit,pixel', [
        ((-1.0, 1.0), (0.0, 0.0)),
        ((1.0, -1.0), (64.0, 32.0)),
        ((0.0, 0.0), (32.0, 16.0)),
    ])
    def test_corners_and_center(self, unit, pixel):
        assert unit_to_pixel(*unit, 64, 32) == pixel


class TestRenderPrimitives:
    """Tests for render_primitives."""

    def test_blank_image(self):
        img = render_primitives(64, 32)
        assert img.size == (64, 32)
        assert img.mode == 'RGBA'
        assert img.getpixel((10, 10)) == BLACK

    def test_rect_drawn_in_place(self):
        rect = RectPrimitive((0.5, 0.5), (0.0, 0.0), (1.0, 1.0, 1.0, 1.0))
        img = render_primitives(64, 32, shapes=[rect])
        assert img.getpixel((32, 16)) == WHITE
        assert img.getpixel((2, 2)) == BLACK

    def test_rect_follows_y_up(self):
        """A rect in the upper half of unit space lands in the top pixel rows."""
        rect = RectPrimitive((1.0, 0.25), (0.0, 0.5), (1.0, 0.0, 0.0, 1.0))
        img = render_primitives(64, 32, shapes=[rect])
        assert img.getpixel((32, 8)) == RED
        assert img.getpixel((32, 24)) == BLACK

    def test_ellipse(self):
        ellipse = EllipsePrimitive((0.5, 0.5), (0.0, 0.0), (1.0, 1.0, 1.0, 1.0))
        img = render_primitives(64, 64, ellipses=[ellipse])
        assert img.getpixel((32, 32)) == WHITE
        # bounding-box corner stays outside the ellipse
        assert img.getpixel((17, 17)) == BLACK

    def test_lines_drawn_over_shapes(self):
        rect = RectPrimitive((1.0, 1.0), (0.0, 0.0), (1.0, 0.0, 0.0, 1.0))
        lines = np.array([[-0.5, 0.0, 0.5, 0.0]])
        img = render_primitives(64, 32, lines=lines, shapes=[rect])
        assert img.getpixel((32, 16)) == WHITE
        assert img.getpixel((32, 4)) == RED
