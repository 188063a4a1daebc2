"""Service layer for text layout.

This module wraps the font cache, the glyph-sequence layout and the block
font behind one object holding a ``LayoutConfig``. Callers that only want
"this text, in this area, at this resolution" do not need to know about
unscaled font units, curve flattening or fit transforms.

Example usage:
    Lay out text with a font file::

        from glyph_lib.api import TextLayoutService
        from glyph_lib.domain import SizeAndCenter

        service = TextLayoutService.from_font_path('/fonts/DejaVuSans.ttf')
        fit = service.fit_text('Hello', SizeAndCenter(1.0, 0.5, 0.0, 0.0))
        info = service.describe_text('Hello', SizeAndCenter(1.0, 0.5, 0.0, 0.0))
        print(info['line_count'], info['bounds'])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..config import LayoutConfig
from ..domain.geometry import Points, SizeAndCenter
from ..domain.primitives import RectPrimitive
from ..fonts.cache import CachedFace
from ..fonts.face import FontLoadError, TTFontFace
from ..layout.text import FitText, fill_text_as_lines
from ..templates.blockfont import fill_block_text

_logger = logging.getLogger(__name__)


def _points_to_dict(points: Points) -> Dict[str, float]:
    return {'p1x': points.p1x, 'p1y': points.p1y, 'p2x': points.p2x, 'p2y': points.p2y}


class TextLayoutService:
    """High-level text layout over one cached font face.

    Attributes:
        face: Glyph cache shared by every call on this service.
        config: Resolution, curve flattening and block font settings.
    """

    def __init__(self, face: Optional[CachedFace] = None, config: Optional[LayoutConfig] = None):
        self.face = face
        self.config = config if config is not None else LayoutConfig()

    @classmethod
    def from_font_path(cls, font_path: str, config: Optional[LayoutConfig] = None,
                       font_number: int = 0) -> TextLayoutService:
        """Create a service for the font file at ``font_path``.

        Raises:
            FontLoadError: If the font cannot be loaded. The failure is
                logged before being re-raised.
        """
        try:
            face = TTFontFace.from_path(font_path, font_number=font_number)
        except FontLoadError as e:
            _logger.exception("Font load failed for %s: %s", font_path, e)
            raise
        _logger.info("Loaded %s (%d units per em)", font_path, face.units_per_em)
        return cls(CachedFace(face), config)

    def _require_face(self) -> CachedFace:
        if self.face is None:
            raise RuntimeError("TextLayoutService has no font face; use fit_block_text or pass a face")
        return self.face

    def fit_text(self, text: str, placement_area: SizeAndCenter) -> FitText:
        """Lay out ``text`` with the font and fit it into ``placement_area``."""
        return fill_text_as_lines(
            self._require_face(), text, placement_area,
            self.config.resx, self.config.resy, self.config.curve_line_count,
        )

    def fit_block_text(self, text: str, placement_area: SizeAndCenter) -> List[RectPrimitive]:
        """Lay out ``text`` with the block font; no font face is needed."""
        return fill_block_text(
            text, placement_area, self.config.resx, self.config.resy,
            thick=self.config.block_thick,
            spacing=self.config.block_spacing,
            color=self.config.block_color,
        )

    def describe_text(self, text: str, placement_area: SizeAndCenter) -> Dict[str, Any]:
        """Summarize a text fit as plain data.

        Returns:
            Dictionary containing:
                - 'text' (str): The input text
                - 'line_count' (int): Number of segments produced
                - 'bounds' (dict): Fitted bounds of the whole string
                - 'char_bounds' (list): Fitted bounds per drawn character
                - 'cache' (dict): Glyph cache size, hits and misses
        """
        fit = self.fit_text(text, placement_area)
        face = self._require_face()
        return {
            'text': text,
            'line_count': int(len(fit.lines)),
            'bounds': _points_to_dict(fit.bounds),
            'char_bounds': [_points_to_dict(b) for b in fit.char_bounds],
            'cache': {'size': len(face), 'hits': face.hits, 'misses': face.misses},
        }
