"""Text and line-drawing layout.

The module exports:
    compute_unfit_chars: Pack glyphs left to right in font design units.
    compute_square_transform: Fit transform for an unscaled text block.
    transform_lines: Apply a PointTransform to a line array in place.
    transform_points: Apply a PointTransform to one box.
    transform_points_vec: Apply a PointTransform to a list of boxes in place.
    fill_text_as_lines: Lay out and fit a string in one call.
    PointTransform, UnfitText, FitText: Result types.
    UnfitLines: Fitting of arbitrary unscaled line drawings.

Example usage:
    Fit a line drawing given in its own units::

        from glyph_lib.domain import SizeAndCenter
        from glyph_lib.layout import UnfitLines

        drawing = UnfitLines.from_lines([[0, 0, 10, 5], [10, 5, 20, 0]])
        fit = drawing.fit_raw(SizeAndCenter(1, 1, 0, 0), 640, 360)
"""

from .lines import UnfitLines
from .text import (
    FitText,
    PointTransform,
    UnfitText,
    compute_square_transform,
    compute_unfit_chars,
    fill_text_as_lines,
    transform_lines,
    transform_points,
    transform_points_vec,
)

__all__ = [
    'compute_unfit_chars', 'compute_square_transform',
    'transform_lines', 'transform_points', 'transform_points_vec',
    'fill_text_as_lines', 'PointTransform', 'UnfitText', 'FitText',
    'UnfitLines',
]
