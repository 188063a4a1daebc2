"""Procedural block font.

Every character is drawn in a 2 x 2 cell centered on the origin
(x and y in [-1, 1], y up) as a set of axis-aligned filled rectangles of
stroke thickness ``thick``. Diagonals are approximated by staircases of
small squares generated in loops.

Cell layout:
    (-1, 1) +-------+ (1, 1)
            |   .   |        origin at the cell center
    (-1,-1) +-------+ (1,-1)

Supported characters are space, ``: + - . /``, the digits and the
uppercase letters except ``M``, ``W`` and ``Z``. Anything else is drawn as a
small centered square so that unsupported input stays visible.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Tuple

from ..config import BLOCK_COLOR, BLOCK_SPACING, BLOCK_THICK
from ..domain.geometry import Points, SizeAndCenter, box_from_fill_aspect, box_from_points
from ..domain.primitives import Color, RectPrimitive

logger = logging.getLogger(__name__)

THICK = BLOCK_THICK
SPACING = BLOCK_SPACING

# Unscaled cell extent
CELL_WIDTH = 2.0
CELL_HEIGHT = 2.0

StrokeTable = Dict[str, Tuple[Points, ...]]


def _placeholder(t: float) -> Tuple[Points, ...]:
    return (Points(-t / 2, t / 2, t / 2, -t / 2),)


def _slash(t: float) -> List[Points]:
    rects = [Points(-t / 2, t / 2, t / 2, -t / 2)]
    i = 1.0
    while True:
        # going up and right
        maxes = t / 2 + t * i
        if maxes > 1.0:
            break
        rects.append(Points(maxes - t, maxes, maxes, maxes - t))
        rects.append(Points(-maxes, -maxes + t, -maxes + t, -maxes))
        i += 1.0
    return rects


def _k(t: float) -> List[Points]:
    rects = [Points(-1.0, 1.0, -1.0 + t, -1.0)]
    i = 1.0
    while True:
        maxy = t * i
        if maxy > 1.0:
            break
        maxx = -1.0 + t * (i + 1.0)
        if maxx > 1.0:
            break
        rects.append(Points(maxx - t, maxy, maxx, maxy - t))
        rects.append(Points(maxx - t, -maxy + t, maxx, -maxy))
        i += 1.0
    return rects


def _n(t: float) -> List[Points]:
    rects = [
        Points(-1.0, 1.0, -1.0 + t, -1.0),
        Points(1.0 - t, 1.0, 1.0, -1.0),
        Points(-t / 2, t / 2, t / 2, -t / 2),
    ]
    i = 1.0
    while True:
        # going up and left
        maxes = t / 2 + t * i
        if maxes > 1.0:
            break
        rects.append(Points(-maxes, maxes, -maxes + t, maxes - t))
        rects.append(Points(maxes - t, -maxes + t, maxes, -maxes))
        i += 1.0
    return rects


def _r(t: float) -> List[Points]:
    rects = [
        Points(-1.0, 1.0, -1.0 + t, -1.0),
        Points(-1.0 + t, 1.0, 1.0 - t, 1.0 - t),
        Points(-1.0 + t, t / 2, 1.0 - t, -t / 2),
        Points(1.0 - t, 1.0, 1.0, -t / 2),
    ]
    parts = math.floor(1.0 / t - 0.5)
    # thick strokes leave no room for the leg
    part_width = (2.0 - t * 2) / parts if parts else math.inf
    i = 1.0
    while True:
        maxx = -1.0 + t * 2 + i * part_width
        if maxx > 1.0:
            break
        miny = -t * (0.5 + i)
        if miny < -1.0:
            break
        rects.append(Points(maxx - part_width, miny + t, maxx, miny))
        i += 1.0
    return rects


def _v(t: float) -> List[Points]:
    rects = [Points(-t / 2, -1.0 + t, t / 2, -1.0)]
    part_height = t * 2.25
    i = 1.0
    while True:
        maxy = -1.0 + t + i * part_height
        if maxy > 1.0:
            break
        maxx = t * (0.5 + i)
        if maxx > 1.0:
            break
        rects.append(Points(maxx - t, maxy, maxx, maxy - part_height))
        rects.append(Points(-maxx, maxy, -maxx + t, maxy - part_height))
        i += 1.0
    return rects


def _x(t: float) -> List[Points]:
    rects = [Points(-t / 2, t / 2, t / 2, -t / 2)]
    i = 1.0
    while True:
        maxes = t / 2 + t * i
        if maxes > 1.0:
            break
        rects.append(Points(maxes - t, maxes, maxes, maxes - t))
        rects.append(Points(-maxes, maxes, -maxes + t, maxes - t))
        rects.append(Points(maxes - t, -maxes + t, maxes, -maxes))
        rects.append(Points(-maxes, -maxes + t, -maxes + t, -maxes))
        i += 1.0
    return rects


@lru_cache(maxsize=None)
def stroke_table(thick: float = THICK) -> StrokeTable:
    """Strokes of every supported character for one stroke thickness.

    Built once per thickness and shared afterwards; the returned mapping
    must not be modified.
    """
    t = thick
    h = thick / 2

    left_bar = (-1.0, 1.0, -1.0 + t, -1.0)
    right_bar = (1.0 - t, 1.0, 1.0, -1.0)
    top_inner = (-1.0 + t, 1.0, 1.0 - t, 1.0 - t)
    top_full = (-1.0 + t, 1.0, 1.0, 1.0 - t)
    mid_inner = (-1.0 + t, h, 1.0 - t, -h)
    bottom_inner = (-1.0 + t, -1.0 + t, 1.0 - t, -1.0)
    upper_left = (-1.0, 1.0, -1.0 + t, -h)

    raw: Dict[str, List[Tuple[float, float, float, float]]] = {
        ' ': [],
        ':': [(-h, 0.5 + h, h, 0.5 - h), (-h, -0.5 + h, h, -0.5 - h)],
        '+': [(-1.0, h, 1.0, -h), (-h, 1.0, h, h), (-h, -h, h, -1.0)],
        '-': [(-1.0, h, 1.0, -h)],
        '.': [(-h, -1.0 + t, h, -1.0)],
        '0': [left_bar, top_inner, bottom_inner, right_bar],
        '1': [(-h, 1.0, h, -1.0)],
        '2': [
            (-1.0, 1.0 - t, -1.0 + t, 1.0 - t * 2),
            top_inner,
            (1.0 - t, 1.0 - t, 1.0, -1.0 + t * 3),
            (0.0, -1.0 + t * 3, 1.0 - t, -1.0 + t * 2),
            (-1.0 + t, -1.0 + t * 2, 0.0, -1.0 + t),
            (-1.0, -1.0 + t, 1.0, -1.0),
        ],
        '3': [
            (-1.0, 1.0, 1.0 - t, 1.0 - t),
            (-1.0, h, 1.0 - t, -h),
            (-1.0, -1.0 + t, 1.0 - t, -1.0),
            right_bar,
        ],
        '4': [
            upper_left,
            (-1.0 + t, h, 1.0, -h),
            (1.0 - t * 2, 1.0, 1.0 - t, h),
            (1.0 - t * 2, -h, 1.0 - t, -1.0),
        ],
        '5': [
            upper_left,
            top_full,
            mid_inner,
            (-1.0, -1.0 + t, 1.0 - t, -1.0),
            (1.0 - t, h, 1.0, -1.0),
        ],
        '6': [left_bar, top_full, mid_inner, bottom_inner, (1.0 - t, h, 1.0, -1.0)],
        '7': [(-1.0, 1.0, 1.0 - t, 1.0 - t), right_bar],
        '8': [left_bar, top_inner, mid_inner, bottom_inner, right_bar],
        '9': [upper_left, top_inner, mid_inner, right_bar],
        'A': [left_bar, top_inner, (-1.0 + t, 1.0 - t * 3, 1.0 - t, 1.0 - t * 4), right_bar],
        'B': [
            left_bar,
            top_inner,
            mid_inner,
            bottom_inner,
            (1.0 - t, 1.0 - t, 1.0, h),
            (1.0 - t, -h, 1.0, -1.0 + t),
        ],
        'C': [(-1.0, 1.0, 1.0, 1.0 - t), (-1.0, 1.0 - t, -1.0 + t, -1.0 + t), (-1.0, -1.0 + t, 1.0, -1.0)],
        'D': [left_bar, top_inner, bottom_inner, (1.0 - t, 1.0 - t, 1.0, -1.0 + t)],
        'E': [left_bar, top_full, (-1.0 + t, h, 1.0, -h), (-1.0 + t, -1.0 + t, 1.0, -1.0)],
        'F': [left_bar, top_full, (-1.0 + t, h, 1.0, -h)],
        'G': [
            left_bar,
            top_inner,
            (-1.0 + t * 3, h, 1.0, -h),
            (-1.0 + t, -1.0 + t, t, -1.0),
            (t, -h, t * 2, -1.0),
        ],
        'H': [left_bar, mid_inner, right_bar],
        'I': [(-1.0, 1.0, 1.0, 1.0 - t), (-h, 1.0 - t, h, -1.0 + t), (-1.0, -1.0 + t, 1.0, -1.0)],
        'J': [(-1.0, 1.0, 1.0, 1.0 - t), (-h, 1.0 - t, h, -1.0 + t), (-1.0, -1.0 + t, h, -1.0)],
        'L': [left_bar, (-1.0 + t, -1.0 + t, 1.0, -1.0)],
        'O': [left_bar, top_inner, bottom_inner, right_bar],
        'P': [left_bar, top_inner, mid_inner, (1.0 - t, 1.0, 1.0, -h)],
        'Q': [
            left_bar,
            top_inner,
            (-1.0 + t, -1.0 + t, 1.0 - t * 2, -1.0),
            (1.0 - t, 1.0, 1.0, -1.0 + t * 2),
            (1.0 - t, -1.0 + t, 1.0, -1.0),
            (1.0 - t * 2, -1.0 + t * 2, 1.0 - t, -1.0 + t),
            (1.0 - t * 3, -1.0 + t * 3, 1.0 - t * 2, -1.0 + t * 2),
        ],
        'S': [
            upper_left,
            top_full,
            mid_inner,
            (-1.0, -1.0 + t, 1.0 - t, -1.0),
            (1.0 - t, h, 1.0, -1.0),
        ],
        'T': [(-1.0, 1.0, 1.0, 1.0 - t), (-h, 1.0 - t, h, -1.0)],
        'U': [left_bar, bottom_inner, right_bar],
        'Y': [upper_left, mid_inner, (1.0 - t, 1.0, 1.0, -h), (-h, -h, h, -1.0)],
    }

    table: StrokeTable = {char: tuple(Points(*rect) for rect in rects) for char, rects in raw.items()}
    for char, build in (('/', _slash), ('K', _k), ('N', _n), ('R', _r), ('V', _v), ('X', _x)):
        table[char] = tuple(build(t))

    logger.debug("Built block stroke table for thick=%s (%d characters)", thick, len(table))
    return table


def supported_characters(thick: float = THICK) -> List[str]:
    """Characters with a dedicated drawing, in sorted order."""
    return sorted(stroke_table(thick))


def block_strokes(char: str, thick: float = THICK) -> Tuple[Points, ...]:
    """Rectangles drawing ``char`` in its cell; a centered square if unsupported."""
    table = stroke_table(thick)
    if char in table:
        return table[char]
    return _placeholder(thick)


def fill_block_text(text: str, placement_area: SizeAndCenter, resx: float, resy: float,
                    thick: float = THICK, spacing: float = SPACING,
                    color: Color = BLOCK_COLOR) -> List[RectPrimitive]:
    """Lay out ``text`` in block cells and fit it into ``placement_area``.

    Cells are ``CELL_WIDTH`` wide with ``spacing`` before every cell but the
    first. The whole block keeps its aspect and is centered in the area.

    Args:
        text: String to draw.
        placement_area: Area to fit the block into.
        resx: Surface width in pixels.
        resy: Surface height in pixels.
        thick: Stroke thickness in cell units.
        spacing: Gap between cells in cell units.
        color: RGBA color of every rectangle.

    Returns:
        One RectPrimitive per stroke, in character order.
    """
    unscaled_x = 0.0
    unscaled_y = CELL_HEIGHT
    unscaled_rects: List[Points] = []

    for char in text:
        if unscaled_x > 0.0:
            unscaled_x += spacing
        for rect in block_strokes(char, thick):
            unscaled_rects.append(Points(rect.p1x + unscaled_x, rect.p1y, rect.p2x + unscaled_x, rect.p2y))
        unscaled_x += CELL_WIDTH

    if not unscaled_rects:
        return []

    target = box_from_fill_aspect(placement_area, 0.0, 0.0, resx, resy, unscaled_x / unscaled_y)

    # Cell origins sit one unit right of their left edge
    shift = 1.0 - unscaled_x / 2.0
    scale_x = target.sx * 2.0 / unscaled_x
    scale_y = target.sy * 2.0 / unscaled_y

    rects = []
    for unscaled_rect in unscaled_rects:
        sizing = box_from_points(Points(
            (unscaled_rect.p1x + shift) * scale_x,
            unscaled_rect.p1y * scale_y,
            (unscaled_rect.p2x + shift) * scale_x,
            unscaled_rect.p2y * scale_y,
        ))
        rects.append(RectPrimitive(
            scale=(sizing.sx, sizing.sy),
            translation=(sizing.cx + target.cx, sizing.cy + target.cy),
            color=tuple(color),
        ))
    return rects


@dataclass
class BlockFont:
    """Block font settings bundled for repeated use."""
    thick: float = THICK
    spacing: float = SPACING
    color: Color = field(default=BLOCK_COLOR)

    def strokes(self, char: str) -> Tuple[Points, ...]:
        return block_strokes(char, self.thick)

    def supports(self, char: str) -> bool:
        return char in stroke_table(self.thick)

    def fill_text(self, text: str, placement_area: SizeAndCenter,
                  resx: float, resy: float) -> List[RectPrimitive]:
        return fill_block_text(text, placement_area, resx, resy,
                               thick=self.thick, spacing=self.spacing, color=self.color)
