"""Glyph outline value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..utils.curves import flatten_cubic, flatten_quad
from .geometry import Points


@dataclass(frozen=True)
class Line:
    """Straight segment from (p1x, p1y) to (p2x, p2y)."""
    p1x: float
    p1y: float
    p2x: float
    p2y: float

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.p1x, self.p1y, self.p2x, self.p2y)


@dataclass(frozen=True)
class QuadCurve:
    """Quadratic Bezier from p1 to p2 bent toward control point c1."""
    p1x: float
    p1y: float
    c1x: float
    c1y: float
    p2x: float
    p2y: float

    def split_as_lines(self, parts: int) -> np.ndarray:
        """Flatten into ``parts`` segments, shape (parts, 4)."""
        return flatten_quad(
            (self.p1x, self.p1y), (self.c1x, self.c1y), (self.p2x, self.p2y), parts
        )


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bezier from p1 to p2 with control points c1 and c2."""
    p1x: float
    p1y: float
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    p2x: float
    p2y: float

    def split_as_lines(self, parts: int) -> np.ndarray:
        """Flatten into ``parts`` segments, shape (parts, 4)."""
        return flatten_cubic(
            (self.p1x, self.p1y), (self.c1x, self.c1y),
            (self.c2x, self.c2y), (self.p2x, self.p2y), parts
        )


@dataclass(frozen=True)
class Glyph:
    """Outline of one character in font design units.

    Attributes:
        tight_bounding_box: Tight bounds of the outline (p1 top-left).
        on_lines: Straight segments classified "on" by the outline builder.
        off_lines: The remaining straight segments.
        quad_curves: Quadratic curves in outline order.
        cube_curves: Cubic curves in outline order.
    """
    tight_bounding_box: Points
    on_lines: Tuple[Line, ...] = ()
    off_lines: Tuple[Line, ...] = ()
    quad_curves: Tuple[QuadCurve, ...] = ()
    cube_curves: Tuple[CubicCurve, ...] = ()

    def straight_lines(self) -> np.ndarray:
        """On-lines followed by off-lines as an (N, 4) array."""
        rows = [line.to_tuple() for line in self.on_lines + self.off_lines]
        return np.array(rows, dtype=np.float64).reshape(-1, 4)
