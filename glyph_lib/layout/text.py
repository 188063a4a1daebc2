"""Glyph-sequence layout.

Text is laid out in two phases:

    1. ``compute_unfit_chars`` packs the glyphs of a string left to right in
       font design units ("unscaled space"), translating their outline
       segments and flattening their curves into one line array.
    2. ``compute_square_transform`` derives a single scale + offset that
       fits the whole unscaled block into a placement area with the
       fill-aspect fit; ``transform_lines`` / ``transform_points`` apply it.

Because the fit is computed once for the block, relative glyph sizes never
depend on the target resolution, and the fit costs the same for one glyph
or a hundred.

Layout rules in unscaled space:
    - Glyphs are packed by their own tight bounds: each glyph's left edge
      lands ``GLYPH_SPACING`` units after the previous glyph's right edge.
    - A space the font cannot draw becomes a ``SPACE_ADVANCE``-wide,
      zero-height box with no outline.
    - Any other character the font cannot draw is skipped without
      advancing the cursor.
    - Vertical bounds come from the glyph boxes as-is; only x advances.

Example:
    Fit a string into the top half of the surface::

        from glyph_lib.domain import SizeAndCenter
        from glyph_lib.layout import fill_text_as_lines

        area = SizeAndCenter(1.0, 0.5, 0.0, 0.5)
        fit = fill_text_as_lines(cached_face, "It's 12:30", area, 640, 360)
        line_bytes = pack_lines(fit.lines)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

import numpy as np

from ..config import DEFAULT_CURVE_LINE_COUNT, GLYPH_SPACING, SPACE_ADVANCE
from ..domain.geometry import Points, SizeAndCenter, box_from_fill_aspect
from ..domain.glyph import Glyph
from ..fonts.cache import CachedFace

logger = logging.getLogger(__name__)


class UnfitText(NamedTuple):
    """Result of laying out a string in unscaled space.

    Attributes:
        lines: (N, 4) array of [x1, y1, x2, y2] segments in font units.
        bounds: Bounding box of the whole string.
        char_bounds: Per drawn character, translated x extent and untranslated
            y extent of its glyph box.
    """
    lines: np.ndarray
    bounds: Points
    char_bounds: List[Points]


@dataclass(frozen=True)
class PointTransform:
    """Per-axis scale followed by an offset: ``x' = x * sx + offsetx``."""
    sx: float
    sy: float
    offsetx: float
    offsety: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.sx + self.offsetx, y * self.sy + self.offsety)


class FitText(NamedTuple):
    """Result of fitting a laid-out string into a placement area."""
    lines: np.ndarray
    bounds: Points
    char_bounds: List[Points]
    transform: Optional[PointTransform]


def _empty_lines() -> np.ndarray:
    return np.zeros((0, 4), dtype=np.float64)


def _space_glyph(advance: float) -> Glyph:
    return Glyph(tight_bounding_box=Points(0.0, 0.0, advance, 0.0))


def _translated(lines: np.ndarray, offsetx: float) -> np.ndarray:
    lines[:, 0::2] += offsetx
    return lines


def compute_unfit_chars(face: CachedFace, text: str,
                        curve_line_count: int = DEFAULT_CURVE_LINE_COUNT,
                        spacing: float = GLYPH_SPACING,
                        space_advance: float = SPACE_ADVANCE) -> UnfitText:
    """Lay out ``text`` left to right in font design units.

    Args:
        face: Glyph cache to resolve characters through.
        text: String to lay out.
        curve_line_count: Segments per flattened curve.
        spacing: Gap between consecutive glyph boxes.
        space_advance: Width of the box substituted for an undrawable space.

    Returns:
        UnfitText with the segment array (straight lines of each glyph, then
        its flattened quadratic curves, then its flattened cubic curves), the
        overall bounds and the per-character bounds. A string producing no
        glyphs yields an empty array, ``Points(0, 0, 0, 0)`` and no
        character bounds.
    """
    chunks: List[np.ndarray] = []
    char_bounds: List[Points] = []

    unscaled_xmin: Optional[float] = None
    unscaled_xmax: Optional[float] = None
    unscaled_ymin: Optional[float] = None
    unscaled_ymax: Optional[float] = None

    for char in text:
        glyph = face.get_glyph(char)
        if glyph is None:
            if char != ' ':
                logger.debug("Skipping %r: no glyph", char)
                continue
            glyph = _space_glyph(space_advance)

        bbox = glyph.tight_bounding_box
        previous_xmax = unscaled_xmax if unscaled_xmax is not None else 0.0
        offsetx = previous_xmax - bbox.p1x + spacing

        chunks.append(_translated(glyph.straight_lines(), offsetx))
        for quad_curve in glyph.quad_curves:
            chunks.append(_translated(quad_curve.split_as_lines(curve_line_count), offsetx))
        for cube_curve in glyph.cube_curves:
            chunks.append(_translated(cube_curve.split_as_lines(curve_line_count), offsetx))

        # p1 is top-left, p2 is bottom-right
        char_xmin = offsetx + bbox.p1x
        char_xmax = offsetx + bbox.p2x
        char_ymin = bbox.p2y
        char_ymax = bbox.p1y

        if unscaled_xmin is None or char_xmin < unscaled_xmin:
            unscaled_xmin = char_xmin
        if unscaled_xmax is None or char_xmax > unscaled_xmax:
            unscaled_xmax = char_xmax
        if unscaled_ymin is None or char_ymin < unscaled_ymin:
            unscaled_ymin = char_ymin
        if unscaled_ymax is None or char_ymax > unscaled_ymax:
            unscaled_ymax = char_ymax

        char_bounds.append(Points(char_xmin, char_ymax, char_xmax, char_ymin))

    if unscaled_xmax is None:
        return UnfitText(_empty_lines(), Points(0.0, 0.0, 0.0, 0.0), [])

    return UnfitText(
        np.vstack(chunks),
        Points(unscaled_xmin, unscaled_ymax, unscaled_xmax, unscaled_ymin),
        char_bounds,
    )


def compute_square_transform(bounds: Points, placement_area: SizeAndCenter,
                             resx: float, resy: float) -> PointTransform:
    """Transform mapping ``bounds`` onto its fill-aspect fit in ``placement_area``.

    The block is fit centered (anchor 0, 0) with aspect ``width / height``
    so it keeps its proportions on screen. Zero-width or zero-height bounds
    give inf/nan components rather than raising.
    """
    width = bounds.p2x - bounds.p1x
    height = bounds.p1y - bounds.p2y

    with np.errstate(divide='ignore', invalid='ignore'):
        aspect = np.float64(width) / height
        target = box_from_fill_aspect(placement_area, 0.0, 0.0, resx, resy, aspect)

        sx = np.float64(target.sx) / width * 2.0
        sy = np.float64(target.sy) / height * 2.0
        offsetx = -(bounds.p1x + width / 2.0) * sx + target.cx
        offsety = -(bounds.p2y + height / 2.0) * sy + target.cy

    return PointTransform(float(sx), float(sy), float(offsetx), float(offsety))


def transform_lines(lines: np.ndarray, transform: PointTransform) -> None:
    """Apply ``transform`` to an (N, 4) line array in place."""
    lines[:, 0::2] *= transform.sx
    lines[:, 0::2] += transform.offsetx
    lines[:, 1::2] *= transform.sy
    lines[:, 1::2] += transform.offsety


def transform_points(points: Points, transform: PointTransform) -> Points:
    """Return ``points`` with both corners transformed."""
    p1x, p1y = transform.apply(points.p1x, points.p1y)
    p2x, p2y = transform.apply(points.p2x, points.p2y)
    return Points(p1x, p1y, p2x, p2y)


def transform_points_vec(points: List[Points], transform: PointTransform) -> None:
    """Transform every box of ``points``, replacing the list items in place."""
    for i, box in enumerate(points):
        points[i] = transform_points(box, transform)


def fill_text_as_lines(face: CachedFace, text: str, placement_area: SizeAndCenter,
                       resx: float, resy: float,
                       curve_line_count: int = DEFAULT_CURVE_LINE_COUNT) -> FitText:
    """Lay out ``text`` and fit it into ``placement_area``.

    Returns:
        FitText whose lines, bounds and character bounds are in the unit
        coordinate space of ``placement_area``. When no glyph was produced
        the result is empty and ``transform`` is None.
    """
    lines, bounds, char_bounds = compute_unfit_chars(face, text, curve_line_count)
    if not char_bounds:
        return FitText(lines, bounds, char_bounds, None)

    transform = compute_square_transform(bounds, placement_area, resx, resy)
    transform_lines(lines, transform)
    transform_points_vec(char_bounds, transform)
    logger.debug("Fit %d lines for %r with %s", len(lines), text, transform)
    return FitText(lines, transform_points(bounds, transform), char_bounds, transform)
