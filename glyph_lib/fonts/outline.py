"""Outline event accumulation.

A font face reports a glyph outline as a stream of drawing events (move,
line, quadratic, cubic, close). ``GlyphOutlineBuilder`` consumes those
events and sorts them into the containers a ``Glyph`` is assembled from.

Straight segments are split into "on" and "off" lines by ``is_on_line``.
The stenciled text renderer draws the two classes differently, so the
split is kept exactly as defined there:

    on  <=>  start.x > end.x  or  start.y < end.y

A segment running right-to-left or upward is "on"; rightward/downward and
degenerate (zero-length) segments are "off".

``OutlinePen`` adapts the fontTools pen protocol to the builder. fontTools'
``BasePen`` already splits TrueType quadratic splines with implied on-curve
points (and multi-segment cubic runs) into single curve segments.
"""

from __future__ import annotations

import logging
from typing import List

from fontTools.pens.basePen import BasePen

from ..domain.glyph import CubicCurve, Line, QuadCurve

logger = logging.getLogger(__name__)


def is_on_line(x0: float, y0: float, x1: float, y1: float) -> bool:
    """Classify the straight segment (x0, y0) -> (x1, y1) as on (True) or off."""
    return x0 > x1 or y0 < y1


class GlyphOutlineBuilder:
    """Accumulates outline events for one glyph.

    Attributes:
        open_x, open_y: Opening point of the current contour.
        x, y: Current point.
        on_lines: Straight segments classified as on.
        off_lines: Straight segments classified as off.
        quad_curves: Quadratic curves in event order.
        cube_curves: Cubic curves in event order.
    """

    def __init__(self):
        self.open_x = 0.0
        self.open_y = 0.0
        self.x = 0.0
        self.y = 0.0
        self.on_lines: List[Line] = []
        self.off_lines: List[Line] = []
        self.quad_curves: List[QuadCurve] = []
        self.cube_curves: List[CubicCurve] = []

    def move_to(self, x: float, y: float) -> None:
        logger.debug("move_to { x: %s, y: %s }", x, y)
        self.open_x = x
        self.open_y = y
        self.x = x
        self.y = y

    def line_to(self, x: float, y: float) -> None:
        logger.debug("line_to { x: %s, y: %s }", x, y)
        line = Line(self.x, self.y, x, y)
        if is_on_line(self.x, self.y, x, y):
            self.on_lines.append(line)
        else:
            self.off_lines.append(line)
        self.x = x
        self.y = y

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        logger.debug("quad_to { x1: %s, y1: %s, x: %s, y: %s }", x1, y1, x, y)
        self.quad_curves.append(QuadCurve(self.x, self.y, x1, y1, x, y))
        self.x = x
        self.y = y

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        logger.debug("curve_to { x1: %s, y1: %s, x2: %s, y2: %s, x: %s, y: %s }",
                     x1, y1, x2, y2, x, y)
        self.cube_curves.append(CubicCurve(self.x, self.y, x1, y1, x2, y2, x, y))
        self.x = x
        self.y = y

    def close(self) -> None:
        logger.debug("close")
        if self.x != self.open_x or self.y != self.open_y:
            logger.debug("Creating closing line")
            self.line_to(self.open_x, self.open_y)


class OutlinePen(BasePen):
    """fontTools pen forwarding segments to a ``GlyphOutlineBuilder``."""

    def __init__(self, glyph_set, builder: GlyphOutlineBuilder):
        super().__init__(glyph_set)
        self.builder = builder

    def _moveTo(self, pt):
        self.builder.move_to(float(pt[0]), float(pt[1]))

    def _lineTo(self, pt):
        self.builder.line_to(float(pt[0]), float(pt[1]))

    def _qCurveToOne(self, pt1, pt2):
        self.builder.quad_to(float(pt1[0]), float(pt1[1]), float(pt2[0]), float(pt2[1]))

    def _curveToOne(self, pt1, pt2, pt3):
        self.builder.curve_to(
            float(pt1[0]), float(pt1[1]),
            float(pt2[0]), float(pt2[1]),
            float(pt3[0]), float(pt3[1]),
        )

    def _closePath(self):
        self.builder.close()

    def _endPath(self):
        # Open contour: no closing segment
        pass
