"""Renderer-facing primitive records.

These mirror the per-instance vertex records the external renderers read:
rectangles and ellipses share one layout (scale, translation, color), and
capsules add a radius between their two endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .geometry import SizeAndCenter

Color = Tuple[float, float, float, float]


@dataclass(frozen=True)
class RectPrimitive:
    """Axis-aligned filled rectangle.

    Attributes:
        scale: Half extents (sx, sy) in unit space.
        translation: Center (cx, cy) in unit space.
        color: RGBA components in [0, 1].
    """
    scale: Tuple[float, float]
    translation: Tuple[float, float]
    color: Color

    @property
    def sizing(self) -> SizeAndCenter:
        return SizeAndCenter(self.scale[0], self.scale[1], self.translation[0], self.translation[1])

    def to_list(self) -> List[float]:
        return [*self.scale, *self.translation, *self.color]


@dataclass(frozen=True)
class EllipsePrimitive(RectPrimitive):
    """Ellipse inscribed in the rectangle described by scale and translation."""


@dataclass(frozen=True)
class CapsulePrimitive:
    """Segment from p1 to p2 swept by a disc of ``radius``."""
    p1: Tuple[float, float]
    p2: Tuple[float, float]
    radius: float
    color: Color

    def to_list(self) -> List[float]:
        return [*self.p1, *self.p2, self.radius, *self.color]


@dataclass(frozen=True)
class ShapeDescriptor:
    """A placed box plus a color, before choosing how it is drawn."""
    sizing: SizeAndCenter
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @property
    def color(self) -> Color:
        return (self.r, self.g, self.b, self.a)

    def to_rect(self) -> RectPrimitive:
        return RectPrimitive(
            scale=(self.sizing.sx, self.sizing.sy),
            translation=(self.sizing.cx, self.sizing.cy),
            color=self.color,
        )

    def to_ellipse(self) -> EllipsePrimitive:
        return EllipsePrimitive(
            scale=(self.sizing.sx, self.sizing.sy),
            translation=(self.sizing.cx, self.sizing.cy),
            color=self.color,
        )
