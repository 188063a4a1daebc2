"""Resolution-independent placement and glyph-outline layout.

This package turns declarative placement requests ("fill this area,
keeping this aspect ratio, on a surface of this resolution") and text into
flat numeric primitives for an external rasterizer: rectangles, ellipses,
capsules and line segments in unit space ([-1, 1] on both axes, y up).

The package is organized into the following modules:
    domain: Value objects: SizeAndCenter, Points, FillAspect, glyph
        outlines and renderer primitives.
    fonts: Font-face capability (fontTools-backed), outline extraction and
        the per-character glyph cache.
    layout: Glyph-sequence layout in font units plus a single fit, and
        fitting of arbitrary unscaled line drawings.
    templates: The procedural block font.
    utils: Curve flattening, renderer buffer packing and Pillow preview.
    api: TextLayoutService bundling the above behind a LayoutConfig.

Example usage:
    Fit a square, then text inside it::

        from glyph_lib import FillAspect, Points, TextLayoutService

        surface = Points(-1.0, 1.0, 1.0, -1.0).to_size_and_center()
        square = FillAspect(surface, 0.0, 0.0, 640, 360, 1.0).resolve()

        service = TextLayoutService.from_font_path('/fonts/DejaVuSans.ttf')
        fit = service.fit_text('Hello', square)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import TextLayoutService
from .config import LayoutConfig
from .domain import (
    CapsulePrimitive,
    CubicCurve,
    EllipsePrimitive,
    FillAspect,
    Glyph,
    Line,
    Points,
    QuadCurve,
    RectPrimitive,
    ShapeDescriptor,
    SizeAndCenter,
)
from .fonts import CachedFace, FontFace, FontLoadError, TTFontFace
from .layout import UnfitLines, fill_text_as_lines
from .templates import BlockFont, fill_block_text

__all__ = [
    # Domain objects
    'SizeAndCenter', 'Points', 'FillAspect',
    'Line', 'QuadCurve', 'CubicCurve', 'Glyph',
    'RectPrimitive', 'EllipsePrimitive', 'CapsulePrimitive', 'ShapeDescriptor',
    # Fonts
    'FontFace', 'TTFontFace', 'FontLoadError', 'CachedFace',
    # Layout
    'fill_text_as_lines', 'UnfitLines', 'BlockFont', 'fill_block_text',
    # Services
    'TextLayoutService', 'LayoutConfig',
]

__version__ = '0.3.0'
