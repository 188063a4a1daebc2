"""Numeric helpers shared by the layout code.

Curve flattening:
    flatten_quad: Quadratic Bezier to a fixed number of segments.
    flatten_cubic: Cubic Bezier to a fixed number of segments.

Renderer buffers:
    pack_lines, pack_shapes, pack_capsules: Little-endian float32 records.
    LINE_RAW_SIZE, SHAPE_RAW_SIZE, CAPSULE_RAW_SIZE: Record sizes in bytes.

Preview:
    render_primitives: Draw primitives onto a Pillow image.
"""

from .buffers import (
    CAPSULE_RAW_SIZE,
    LINE_RAW_SIZE,
    SHAPE_RAW_SIZE,
    pack_capsules,
    pack_lines,
    pack_shapes,
    unpack_lines,
)
from .curves import flatten_cubic, flatten_quad
from .rendering import render_primitives, unit_to_pixel

__all__ = [
    'flatten_quad', 'flatten_cubic',
    'pack_lines', 'unpack_lines', 'pack_shapes', 'pack_capsules',
    'LINE_RAW_SIZE', 'SHAPE_RAW_SIZE', 'CAPSULE_RAW_SIZE',
    'render_primitives', 'unit_to_pixel',
]
