"""Font face capability and its fontTools implementation.

The layout code never reads font files. It talks to a ``FontFace``, which
answers two questions: which glyph (if any) draws a character, and what
that glyph's outline is. ``TTFontFace`` answers them from a TrueType or
OpenType font loaded with fontTools.

Example:
    Load a font and inspect one glyph::

        from glyph_lib.fonts import GlyphOutlineBuilder, TTFontFace

        face = TTFontFace.from_path('/fonts/NotoSans-Regular.ttf')
        glyph_id = face.glyph_index('A')
        builder = GlyphOutlineBuilder()
        bbox = face.outline_glyph(glyph_id, builder)
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont

from ..domain.geometry import Points
from .outline import GlyphOutlineBuilder, OutlinePen

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """Raised when font data cannot be decoded into a face."""


class FontFace(ABC):
    """Abstract font-face capability consumed by the glyph cache."""

    @abstractmethod
    def glyph_index(self, char: str) -> Optional[int]:
        """Return the glyph id drawing ``char``, or None if the font lacks it."""

    @abstractmethod
    def outline_glyph(self, glyph_id: int, builder: GlyphOutlineBuilder) -> Optional[Points]:
        """Replay the glyph outline into ``builder``.

        Returns:
            Tight bounding box in font design units (p1 top-left), or None
            when the glyph has no outline (e.g. a space).
        """


class TTFontFace(FontFace):
    """``FontFace`` backed by a fontTools ``TTFont``.

    Attributes:
        font: The loaded TTFont.
        units_per_em: Design units per em from the head table.
    """

    def __init__(self, font: TTFont):
        self.font = font
        self.units_per_em = int(font['head'].unitsPerEm)
        self._glyph_set = font.getGlyphSet()
        self._glyph_order = font.getGlyphOrder()
        self._cmap = self._load_cmap(font)

    @classmethod
    def from_path(cls, path: str | Path, font_number: int = 0) -> TTFontFace:
        """Load a face from a .ttf/.otf/.ttc file.

        Raises:
            FontLoadError: If the file cannot be read or parsed.
        """
        try:
            font = TTFont(str(path), fontNumber=font_number, lazy=False)
        except Exception as exc:
            raise FontLoadError(f"Could not load font {path}: {exc}") from exc
        return cls(font)

    @classmethod
    def from_bytes(cls, data: bytes, font_number: int = 0) -> TTFontFace:
        """Load a face from font file contents held in memory.

        Raises:
            FontLoadError: If the bytes are not a parseable font.
        """
        try:
            font = TTFont(io.BytesIO(data), fontNumber=font_number, lazy=False)
        except Exception as exc:
            raise FontLoadError(f"Could not parse font data: {exc}") from exc
        return cls(font)

    @staticmethod
    def _load_cmap(font: TTFont) -> Dict[int, str]:
        mapping: Dict[int, str] = {}
        if 'cmap' in font:
            cmap = font.getBestCmap()
            if cmap:
                return dict(cmap)
            # fallback: merge all subtables
            for subtable in font['cmap'].tables:
                if getattr(subtable, 'cmap', None):
                    mapping.update(subtable.cmap)
        if not mapping:
            logger.warning("Font has no usable cmap; every character will be missing")
        return mapping

    def glyph_index(self, char: str) -> Optional[int]:
        name = self._cmap.get(ord(char))
        if name is None:
            return None
        return self.font.getGlyphID(name)

    def outline_glyph(self, glyph_id: int, builder: GlyphOutlineBuilder) -> Optional[Points]:
        name = self._glyph_order[glyph_id]
        glyph = self._glyph_set[name]

        bounds_pen = BoundsPen(self._glyph_set)
        glyph.draw(bounds_pen)
        if bounds_pen.bounds is None:
            return None

        glyph.draw(OutlinePen(self._glyph_set, builder))

        x_min, y_min, x_max, y_max = bounds_pen.bounds
        return Points(float(x_min), float(y_max), float(x_max), float(y_min))
