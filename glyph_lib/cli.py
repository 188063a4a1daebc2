#!/usr/bin/env python3
"""Command-line preview of text layouts.

Renders the demo scene to a PNG: a white square filling the surface, a red
2:1 rectangle fit inside the square, and the text fit inside the
rectangle. Text is drawn from a font file as flattened outline segments, or
with the procedural block font when ``--block`` is given (or no font is).

Usage:
    glyph-preview --font path/to/font.ttf --text "It's 12:30" --output preview.png
    glyph-preview --block --text "12:30" --width 1280 --height 720
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .api.services import TextLayoutService
from .config import DEFAULT_CURVE_LINE_COUNT, DEFAULT_RESX, DEFAULT_RESY, LayoutConfig
from .domain.geometry import FillAspect, Points, SizeAndCenter
from .domain.primitives import ShapeDescriptor
from .fonts.face import FontLoadError
from .logging_config import configure_logging
from .utils.rendering import render_primitives

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='Render a text layout preview to a PNG'
    )
    parser.add_argument('--font', '-f', type=str, default=None,
                        help='Path to TTF/OTF font file')
    parser.add_argument('--text', '-t', type=str, default="It's 12:30",
                        help="Text to lay out (default: It's 12:30)")
    parser.add_argument('--block', action='store_true',
                        help='Use the procedural block font instead of a font file')
    parser.add_argument('--width', type=int, default=DEFAULT_RESX,
                        help=f'Surface width in pixels (default: {DEFAULT_RESX})')
    parser.add_argument('--height', type=int, default=DEFAULT_RESY,
                        help=f'Surface height in pixels (default: {DEFAULT_RESY})')
    parser.add_argument('--curve-lines', type=int, default=DEFAULT_CURVE_LINE_COUNT,
                        help=f'Segments per outline curve (default: {DEFAULT_CURVE_LINE_COUNT})')
    parser.add_argument('--output', '-o', type=str, default='preview.png',
                        help='Output PNG path (default: preview.png)')
    parser.add_argument('--json', action='store_true',
                        help='Print a JSON summary of the text layout')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    return parser


def build_scene(resx: float, resy: float):
    """Return the white square and the red 2:1 rectangle of the demo scene."""
    surface = Points(-1.0, 1.0, 1.0, -1.0).to_size_and_center()
    square = ShapeDescriptor(
        FillAspect(surface, 0.0, 0.0, resx, resy, 1.0).resolve(),
        r=1.0, g=1.0, b=1.0,
    )
    rectangle = ShapeDescriptor(
        FillAspect(square.sizing, 0.0, 0.0, resx, resy, 2.0).resolve(),
        r=1.0, g=0.0, b=0.0,
    )
    return square, rectangle


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point for ``glyph-preview``.

    Returns:
        Process exit code.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.curve_lines < 1:
        parser.error('--curve-lines must be at least 1')

    config = LayoutConfig(curve_line_count=args.curve_lines, resx=args.width, resy=args.height)
    use_block = args.block or args.font is None

    if use_block:
        service = TextLayoutService(config=config)
    else:
        try:
            service = TextLayoutService.from_font_path(args.font, config)
        except FontLoadError:
            return 1

    square, rectangle = build_scene(args.width, args.height)
    area: SizeAndCenter = rectangle.sizing

    shapes = [square.to_rect(), rectangle.to_rect()]
    lines = None
    if use_block:
        shapes.extend(service.fit_block_text(args.text, area))
        logger.info("Block text %r: %d rectangles", args.text, len(shapes) - 2)
    else:
        fit = service.fit_text(args.text, area)
        lines = fit.lines
        logger.info("Text %r: %d lines", args.text, len(lines))
        if args.json:
            json.dump(service.describe_text(args.text, area), sys.stdout, indent=2)
            sys.stdout.write('\n')

    img = render_primitives(args.width, args.height, lines=lines, shapes=shapes)
    img.save(args.output)
    logger.info("Saved preview to %s", args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
