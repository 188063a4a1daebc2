"""Packing of primitives into renderer vertex-buffer records.

The external renderers read tightly packed little-endian float32 records:

    line     p1x p1y p2x p2y                          16 bytes
    shape    sx sy cx cy r g b a                      32 bytes
    capsule  p1x p1y p2x p2y radius r g b a           36 bytes

Rectangles and ellipses share the shape record. Buffer capacity is the
renderer's concern; these functions pack whatever they are given.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np

from ..domain.primitives import CapsulePrimitive, RectPrimitive

RAW_DTYPE = np.dtype('<f4')

LINE_RAW_SIZE = 4 * RAW_DTYPE.itemsize
SHAPE_RAW_SIZE = 8 * RAW_DTYPE.itemsize
CAPSULE_RAW_SIZE = 9 * RAW_DTYPE.itemsize


def pack_lines(lines: Union[np.ndarray, Sequence[Sequence[float]]]) -> bytes:
    """Pack an (N, 4) line array, LINE_RAW_SIZE bytes per line."""
    return np.asarray(lines, dtype=RAW_DTYPE).reshape(-1, 4).tobytes()


def unpack_lines(data: bytes) -> np.ndarray:
    """Inverse of ``pack_lines``, as a float32 (N, 4) array."""
    return np.frombuffer(data, dtype=RAW_DTYPE).reshape(-1, 4)


def pack_shapes(primitives: Iterable[RectPrimitive]) -> bytes:
    """Pack rectangles or ellipses, SHAPE_RAW_SIZE bytes each."""
    rows = [primitive.to_list() for primitive in primitives]
    return np.array(rows, dtype=RAW_DTYPE).reshape(-1, 8).tobytes()


def pack_capsules(primitives: Iterable[CapsulePrimitive]) -> bytes:
    """Pack capsules, CAPSULE_RAW_SIZE bytes each."""
    rows = [primitive.to_list() for primitive in primitives]
    return np.array(rows, dtype=RAW_DTYPE).reshape(-1, 9).tobytes()
