"""Procedural fonts built from primitives.

The module exports:
    BlockFont: Thickness, spacing and color bundled for repeated use.
    block_strokes: Unscaled stroke rectangles of one character.
    fill_block_text: Lay out and fit a string as RectPrimitives.
    supported_characters: Characters with a dedicated drawing.
    THICK, SPACING: Default stroke thickness and cell gap.
"""

from .blockfont import SPACING, THICK, BlockFont, block_strokes, fill_block_text, supported_characters

__all__ = ['BlockFont', 'block_strokes', 'fill_block_text', 'supported_characters', 'THICK', 'SPACING']
