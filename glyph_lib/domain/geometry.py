"""Placement value objects and the fill-aspect fit.

Every shape and text block in the toolkit is placed through this module. A
box is either a ``SizeAndCenter`` (half extents plus center) or a
``Points`` (two opposite corners); both live in the same unit coordinate
space, y pointing up, where the full surface spans [-1, 1] on each axis.

Because the unit space is stretched to the surface, a box that is square in
unit space is only square on screen when the surface is square. The
fill-aspect fit compensates for that using the surface resolution.

Arithmetic runs through numpy scalars under ``np.errstate`` so degenerate
inputs (zero-area placement areas, zero aspect) come out as 0, inf or nan
instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SizeAndCenter:
    """Box as half-width ``sx``, half-height ``sy`` and center ``(cx, cy)``."""
    sx: float
    sy: float
    cx: float
    cy: float

    @property
    def width(self) -> float:
        return self.sx * 2

    @property
    def height(self) -> float:
        return self.sy * 2

    @classmethod
    def from_points(cls, points: Points) -> SizeAndCenter:
        return box_from_points(points)

    @classmethod
    def from_fill_aspect(cls, fill_aspect: FillAspect) -> SizeAndCenter:
        return fill_aspect.resolve()

    def to_points(self) -> Points:
        return points_from_box(self)

    def contains(self, x: float, y: float) -> bool:
        return self.to_points().contains(x, y)

    def left_contains(self, x: float, y: float) -> bool:
        return self.to_points().left_contains(x, y)

    def right_contains(self, x: float, y: float) -> bool:
        return self.to_points().right_contains(x, y)

    def get_relative(self, other: SizeAndCenter) -> SizeAndCenter:
        """Express ``other`` in this box's local frame.

        ``other`` is read as a box inside the unit square [-1, 1]: its center
        is a fraction of this box's half extents measured from this box's
        center, and its half extents are fractions of this box's half
        extents. Relative to the unit box ``SizeAndCenter(1, 1, 0, 0)`` the
        result is this box itself.

        Example:
            >>> outer = SizeAndCenter(0.5, 0.5, 0.0, 0.0)
            >>> outer.get_relative(SizeAndCenter(0.5, 0.5, 1.0, 0.0))
            SizeAndCenter(sx=0.25, sy=0.25, cx=0.5, cy=0.0)
        """
        return SizeAndCenter(
            sx=self.sx * other.sx,
            sy=self.sy * other.sy,
            cx=self.cx + other.cx * self.sx,
            cy=self.cy + other.cy * self.sy,
        )


@dataclass(frozen=True)
class Points:
    """Box as two corners: p1 is top-left, p2 is bottom-right (y up).

    For a well-formed box ``p1x <= p2x`` and ``p1y >= p2y``.
    """
    p1x: float
    p1y: float
    p2x: float
    p2y: float

    @property
    def width(self) -> float:
        return self.p2x - self.p1x

    @property
    def height(self) -> float:
        return self.p1y - self.p2y

    @classmethod
    def from_size_and_center(cls, box: SizeAndCenter) -> Points:
        return points_from_box(box)

    def to_size_and_center(self) -> SizeAndCenter:
        return box_from_points(self)

    def contains(self, x: float, y: float) -> bool:
        """Inclusive point-in-box test."""
        return self.p1x <= x <= self.p2x and self.p2y <= y <= self.p1y

    def left_contains(self, x: float, y: float) -> bool:
        """Point-in-box test against the left half (midpoint included)."""
        mid_x = (self.p1x + self.p2x) / 2
        return self.p1x <= x <= mid_x and self.p2y <= y <= self.p1y

    def right_contains(self, x: float, y: float) -> bool:
        """Point-in-box test against the right half (midpoint included)."""
        mid_x = (self.p1x + self.p2x) / 2
        return mid_x <= x <= self.p2x and self.p2y <= y <= self.p1y

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.p1x, self.p1y, self.p2x, self.p2y)


@dataclass(frozen=True)
class FillAspect:
    """Request for the largest box of a given aspect inside a placement area.

    Attributes:
        placement_area: Box the result must fit inside.
        centerx: Horizontal anchor in [-1, 1]. 0 centers the result, -1 and
            1 push it flush against the left or right edge.
        centery: Vertical anchor in [-1, 1], same convention.
        resx: Surface width in pixels.
        resy: Surface height in pixels.
        aspect: On-screen width/height ratio the result must have.
    """
    placement_area: SizeAndCenter
    centerx: float
    centery: float
    resx: float
    resy: float
    aspect: float

    def resolve(self) -> SizeAndCenter:
        return box_from_fill_aspect(
            self.placement_area, self.centerx, self.centery,
            self.resx, self.resy, self.aspect,
        )


def box_from_fill_aspect(placement_area: SizeAndCenter, anchor_x: float, anchor_y: float,
                         resx: float, resy: float, aspect: float) -> SizeAndCenter:
    """Fit a box of on-screen aspect ``aspect`` into ``placement_area``.

    The usable half extents shrink as the anchor moves toward an edge:
    ``cax = sx * (1 - |anchor_x|)`` and ``cay = sy * (1 - |anchor_y|)``.
    The usable area's on-screen aspect decides the limiting dimension:

        area_aspect = (cax * resx) / (cay * resy)

    If the area is wider than requested the result is height-limited
    (``sy = cay``); otherwise it is width-limited (``sx = cax``). The other
    half extent follows from ``aspect`` corrected by the surface aspect
    ``resx / resy``. The center sits at ``area.center + area.half * anchor``.

    Args:
        placement_area: Box to fit into.
        anchor_x: Horizontal anchor in [-1, 1].
        anchor_y: Vertical anchor in [-1, 1].
        resx: Surface width in pixels.
        resy: Surface height in pixels.
        aspect: Width/height of the content being fit, in pixels.

    Returns:
        The fitted box. Never raises: zero extents or zero aspect yield
        0, inf or nan components.

    Example:
        >>> area = SizeAndCenter(1.0, 1.0, 0.0, 0.0)
        >>> box_from_fill_aspect(area, 0.0, 0.0, 640, 360, 1.0)
        SizeAndCenter(sx=0.5625, sy=1.0, cx=0.0, cy=0.0)
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        resx = np.float64(resx)
        resy = np.float64(resy)
        aspect = np.float64(aspect)

        surface_aspect = resx / resy

        caxdist = placement_area.sx * (1.0 - abs(anchor_x))
        caydist = placement_area.sy * (1.0 - abs(anchor_y))

        area_aspect = (caxdist * resx) / (caydist * resy)

        if area_aspect > aspect:
            sy = np.float64(caydist)
            sx = sy * aspect / surface_aspect
        else:
            sx = np.float64(caxdist)
            sy = sx / aspect * surface_aspect

    cx = placement_area.cx + placement_area.sx * anchor_x
    cy = placement_area.cy + placement_area.sy * anchor_y

    return SizeAndCenter(float(sx), float(sy), float(cx), float(cy))


def box_from_points(points: Points) -> SizeAndCenter:
    """Corner form to center form, without clamping."""
    return SizeAndCenter(
        sx=(points.p2x - points.p1x) / 2,
        sy=(points.p1y - points.p2y) / 2,
        cx=(points.p1x + points.p2x) / 2,
        cy=(points.p1y + points.p2y) / 2,
    )


def points_from_box(box: SizeAndCenter) -> Points:
    """Center form to corner form, without clamping."""
    return Points(
        p1x=box.cx - box.sx,
        p1y=box.cy + box.sy,
        p2x=box.cx + box.sx,
        p2y=box.cy - box.sy,
    )
