"""Font faces, outline extraction and glyph caching.

The module exports:
    FontFace: Abstract capability resolving characters and outlines.
    TTFontFace: FontFace implementation backed by fontTools.
    FontLoadError: Raised when font bytes cannot be decoded.
    GlyphOutlineBuilder: Accumulator for outline drawing events.
    OutlinePen: fontTools pen feeding a GlyphOutlineBuilder.
    is_on_line: On/off classification of straight outline segments.
    CachedFace: Memoizing wrapper resolving characters to Glyphs.

Example usage:
    Resolve glyphs through a cache::

        from glyph_lib.fonts import CachedFace, TTFontFace

        cached = CachedFace(TTFontFace.from_path('/fonts/arial.ttf'))
        glyph = cached.get_glyph('g')
        if glyph is not None:
            print(len(glyph.quad_curves), "quadratic curves")
"""

from .cache import CachedFace
from .face import FontFace, FontLoadError, TTFontFace
from .outline import GlyphOutlineBuilder, OutlinePen, is_on_line

__all__ = [
    'FontFace', 'TTFontFace', 'FontLoadError',
    'GlyphOutlineBuilder', 'OutlinePen', 'is_on_line',
    'CachedFace',
]
