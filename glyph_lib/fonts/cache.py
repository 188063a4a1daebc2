"""Per-character glyph memoization.

``CachedFace`` owns a ``FontFace`` and resolves each character to outline
geometry at most once. Hits and misses are both remembered: a character
the font cannot draw costs one lookup, then stays ``None`` forever.

The table is never evicted. It grows with the set of distinct characters
queried, not with string length or frame count.

A ``CachedFace`` is not thread-safe; use one per thread or guard it
externally.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..domain.glyph import Glyph
from .face import FontFace
from .outline import GlyphOutlineBuilder

logger = logging.getLogger(__name__)


class CachedFace:
    """Font face plus its character -> glyph memo table.

    Attributes:
        face: The wrapped font-face capability.
        hits: Number of lookups answered from the table.
        misses: Number of lookups that consulted the face.

    Example:
        Repeated lookups reuse the first result::

            cached = CachedFace(TTFontFace.from_path('/fonts/arial.ttf'))
            glyph = cached.get_glyph('A')
            assert cached.get_glyph('A') is glyph
    """

    def __init__(self, face: FontFace):
        self.face = face
        self._cached_glyphs: Dict[str, Optional[Glyph]] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._cached_glyphs)

    def __contains__(self, char: str) -> bool:
        return char in self._cached_glyphs

    def get_glyph(self, char: str) -> Optional[Glyph]:
        """Resolve ``char`` to its outline, or None if the face cannot draw it.

        Glyphs are immutable, so the cached instance is returned as is.
        """
        if char in self._cached_glyphs:
            self.hits += 1
            return self._cached_glyphs[char]

        self.misses += 1
        glyph = self._build_glyph(char)
        self._cached_glyphs[char] = glyph
        return glyph

    def _build_glyph(self, char: str) -> Optional[Glyph]:
        logger.debug("Getting glyph id for %r", char)
        glyph_id = self.face.glyph_index(char)
        if glyph_id is None:
            return None

        builder = GlyphOutlineBuilder()

        logger.debug("Generating outline for %r", char)
        tight_bounding_box = self.face.outline_glyph(glyph_id, builder)
        if tight_bounding_box is None:
            return None

        return Glyph(
            tight_bounding_box=tight_bounding_box,
            on_lines=tuple(builder.on_lines),
            off_lines=tuple(builder.off_lines),
            quad_curves=tuple(builder.quad_curves),
            cube_curves=tuple(builder.cube_curves),
        )
