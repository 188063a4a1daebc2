"""Shared configuration for layout and preview.

This module centralizes the constants used by:
    - layout.text (glyph packing in font units)
    - templates.blockfont (procedural stroke font)
    - api.services and cli (default resolution, curve flattening)

Having these values in one place keeps the text layout and the block font
consistent with each other and makes it easy to tune them globally.
"""

from dataclasses import dataclass, field
from typing import Tuple


# --- Glyph-sequence layout (font design units) ---
SPACE_ADVANCE = 200.0    # Width of the synthetic box used for a missing ' '
GLYPH_SPACING = 50.0     # Gap inserted between neighbouring glyph bounds

# Segments per Bezier curve when flattening outlines
DEFAULT_CURVE_LINE_COUNT = 10

# --- Procedural block font (unscaled 2x2 cell units) ---
BLOCK_THICK = 0.25
BLOCK_SPACING = 0.25
BLOCK_COLOR: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

# --- Surface defaults (pixels) ---
DEFAULT_RESX = 640
DEFAULT_RESY = 360


@dataclass
class LayoutConfig:
    """Tunable layout settings.

    Attributes:
        curve_line_count: Number of straight segments each quadratic or
            cubic outline curve is flattened into.
        resx: Surface width in pixels.
        resy: Surface height in pixels.
        block_thick: Stroke thickness of the block font, in cell units.
        block_spacing: Gap between block font cells, in cell units.
        block_color: RGBA color given to block font rectangles.
    """
    curve_line_count: int = DEFAULT_CURVE_LINE_COUNT
    resx: float = DEFAULT_RESX
    resy: float = DEFAULT_RESY
    block_thick: float = BLOCK_THICK
    block_spacing: float = BLOCK_SPACING
    block_color: Tuple[float, float, float, float] = field(default=BLOCK_COLOR)
