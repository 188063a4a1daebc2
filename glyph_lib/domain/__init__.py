"""Domain objects for placement and glyph geometry.

This module provides the value objects shared by every other part of the
package: boxes in the unit coordinate space, glyph outline pieces and the
primitive records handed to renderers.

The module exports the following classes:

Geometry classes:
    SizeAndCenter: Box as half extents and center.
    Points: Box as top-left and bottom-right corners.
    FillAspect: Request for an aspect-preserving fit inside a box.

Glyph classes:
    Line: Straight outline segment.
    QuadCurve: Quadratic Bezier outline segment.
    CubicCurve: Cubic Bezier outline segment.
    Glyph: Outline of one character with its tight bounds.

Primitive classes:
    RectPrimitive, EllipsePrimitive, CapsulePrimitive: renderer records.
    ShapeDescriptor: Placed box plus color.

Example usage:
    Placing a 2:1 rectangle on a 640x360 surface::

        from glyph_lib.domain import FillAspect, Points, ShapeDescriptor

        screen = Points(-1.0, 1.0, 1.0, -1.0).to_size_and_center()
        sizing = FillAspect(screen, 0.0, 0.0, 640, 360, 2.0).resolve()
        rect = ShapeDescriptor(sizing, r=1.0, g=0.0, b=0.0).to_rect()
"""

from .geometry import (
    FillAspect,
    Points,
    SizeAndCenter,
    box_from_fill_aspect,
    box_from_points,
    points_from_box,
)
from .glyph import CubicCurve, Glyph, Line, QuadCurve
from .primitives import CapsulePrimitive, EllipsePrimitive, RectPrimitive, ShapeDescriptor

__all__ = [
    'SizeAndCenter', 'Points', 'FillAspect',
    'box_from_fill_aspect', 'box_from_points', 'points_from_box',
    'Line', 'QuadCurve', 'CubicCurve', 'Glyph',
    'RectPrimitive', 'EllipsePrimitive', 'CapsulePrimitive', 'ShapeDescriptor',
]
