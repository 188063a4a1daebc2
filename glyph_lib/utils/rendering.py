"""Debug preview rendering.

Draws fitted primitives onto a Pillow image so layouts can be inspected
without the GPU renderers. Unit space spans [-1, 1] on both axes with y
pointing up; pixel space has its origin at the top-left with y down.

Example usage:
    Preview block text::

        from glyph_lib.domain import SizeAndCenter
        from glyph_lib.templates import fill_block_text
        from glyph_lib.utils.rendering import render_primitives

        rects = fill_block_text('12:30', SizeAndCenter(1, 1, 0, 0), 640, 360)
        img = render_primitives(640, 360, shapes=rects)
        img.save('preview.png')
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..domain.primitives import Color, EllipsePrimitive, RectPrimitive


def unit_to_pixel(x: float, y: float, resx: int, resy: int) -> Tuple[float, float]:
    """Map a unit-space point to pixel coordinates."""
    return ((x + 1.0) * 0.5 * resx, (1.0 - y) * 0.5 * resy)


def _rgba(color: Color) -> Tuple[int, int, int, int]:
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color)


def _pixel_box(primitive: RectPrimitive, resx: int, resy: int) -> Tuple[float, float, float, float]:
    sx, sy = primitive.scale
    cx, cy = primitive.translation
    left, top = unit_to_pixel(cx - sx, cy + sy, resx, resy)
    right, bottom = unit_to_pixel(cx + sx, cy - sy, resx, resy)
    return (left, top, right, bottom)


def render_primitives(resx: int, resy: int,
                      lines: Optional[np.ndarray] = None,
                      shapes: Iterable[RectPrimitive] = (),
                      ellipses: Iterable[EllipsePrimitive] = (),
                      background='black',
                      line_color: Color = (1.0, 1.0, 1.0, 1.0)) -> Image.Image:
    """Render primitives to an RGBA image of ``resx`` x ``resy`` pixels.

    Shapes are drawn first, then ellipses, then lines, matching the order
    the demo scenes are layered in.

    Args:
        resx: Image width in pixels.
        resy: Image height in pixels.
        lines: Optional (N, 4) array of unit-space segments.
        shapes: Rectangles to fill.
        ellipses: Ellipses to fill.
        background: Pillow color of the cleared image.
        line_color: RGBA color of the segments.

    Returns:
        The rendered PIL image.
    """
    img = Image.new('RGBA', (int(resx), int(resy)), background)
    draw = ImageDraw.Draw(img)

    for shape in shapes:
        draw.rectangle(_pixel_box(shape, resx, resy), fill=_rgba(shape.color))

    for ellipse in ellipses:
        draw.ellipse(_pixel_box(ellipse, resx, resy), fill=_rgba(ellipse.color))

    if lines is not None and len(lines):
        fill = _rgba(line_color)
        for p1x, p1y, p2x, p2y in np.asarray(lines, dtype=np.float64):
            draw.line(
                [unit_to_pixel(p1x, p1y, resx, resy), unit_to_pixel(p2x, p2y, resx, resy)],
                fill=fill,
                width=1,
            )

    return img
