"""Fitting of arbitrary line drawings given in their own units."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..domain.geometry import SizeAndCenter, box_from_fill_aspect


@dataclass
class UnfitLines:
    """Line drawing in unscaled units plus its bounds.

    Attributes:
        lines: (N, 4) array of [p1x, p1y, p2x, p2y] segments.
        min_x, max_x, min_y, max_y: Extent the drawing is fit by. It need
            not be the tight extent of ``lines``; a drawing may reserve
            margin around its strokes.
    """
    lines: np.ndarray
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_lines(cls, lines) -> UnfitLines:
        """Build from segments, taking the bounds from their endpoints."""
        lines = np.asarray(lines, dtype=np.float64).reshape(-1, 4)
        if len(lines) == 0:
            return cls(lines, 0.0, 0.0, 0.0, 0.0)
        xs = lines[:, 0::2]
        ys = lines[:, 1::2]
        return cls(lines, float(xs.min()), float(xs.max()), float(ys.min()), float(ys.max()))

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def fit_raw(self, placement_area: SizeAndCenter, resx: float, resy: float) -> np.ndarray:
        """Fit the drawing centered in ``placement_area``, keeping its aspect."""
        width = self.width()
        height = self.height()
        with np.errstate(divide='ignore', invalid='ignore'):
            aspect = np.float64(width) / height
            target = box_from_fill_aspect(placement_area, 0.0, 0.0, resx, resy, aspect)
        return self.fill_raw_given_width_and_height(target, width, height)

    def fill_raw_given_width_and_height(self, target: SizeAndCenter,
                                        width: float, height: float) -> np.ndarray:
        """Map a ``width`` x ``height`` region of the drawing onto ``target``.

        Returns a new array; ``self.lines`` is left untouched.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            sx = np.float64(target.sx) / width * 2.0
            sy = np.float64(target.sy) / height * 2.0
            offsetx = -(self.min_x + width / 2.0) * sx + target.cx
            offsety = -(self.min_y + height / 2.0) * sy + target.cy

            fit = np.empty_like(self.lines, dtype=np.float64)
            fit[:, 0::2] = self.lines[:, 0::2] * sx + offsetx
            fit[:, 1::2] = self.lines[:, 1::2] * sy + offsety
        return fit
