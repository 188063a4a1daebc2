"""Bezier curve flattening.

Outline curves are approximated with a fixed, caller-chosen number of
straight segments rather than adaptively. A fixed count keeps the number of
primitives produced per glyph predictable, which matters because the line
renderer's vertex buffer has a capacity fixed at construction time.

Both functions sample the curve once per parameter value ``t = i/n`` and
build segment ``i`` from samples ``i`` and ``i + 1``, so neighbouring
segments share their endpoint exactly.

Example:
    Flatten a quadratic arc into four segments::

        from glyph_lib.utils.curves import flatten_quad

        lines = flatten_quad((0, 0), (50, 100), (100, 0), 4)
        lines.shape  # (4, 4): rows of [x1, y1, x2, y2]
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _parameters(n: int) -> np.ndarray:
    if n < 1:
        raise ValueError(f"curve must be split into at least 1 line, got {n}")
    # linspace pins the last sample to exactly 1.0
    return np.linspace(0.0, 1.0, n + 1)


def _samples_to_lines(samples: np.ndarray) -> np.ndarray:
    return np.hstack([samples[:-1], samples[1:]])


def flatten_quad(p1: Sequence[float], c1: Sequence[float], p2: Sequence[float],
                 n: int) -> np.ndarray:
    """Flatten a quadratic Bezier curve into ``n`` line segments.

    The curve is evaluated as:
        B(t) = (1-t)^2 * P1 + 2t(1-t) * C1 + t^2 * P2

    Args:
        p1: Start point (x, y). The first segment starts here exactly.
        c1: Control point (x, y).
        p2: End point (x, y). The last segment ends here exactly.
        n: Number of segments, at least 1.

    Returns:
        Array of shape (n, 4) with rows [x1, y1, x2, y2].

    Raises:
        ValueError: If ``n`` is less than 1.
    """
    t = _parameters(n)[:, np.newaxis]
    u = 1.0 - t
    samples = (u * u) * np.asarray(p1, dtype=np.float64) \
        + (2.0 * t * u) * np.asarray(c1, dtype=np.float64) \
        + (t * t) * np.asarray(p2, dtype=np.float64)
    return _samples_to_lines(samples)


def flatten_cubic(p1: Sequence[float], c1: Sequence[float], c2: Sequence[float],
                  p2: Sequence[float], n: int) -> np.ndarray:
    """Flatten a cubic Bezier curve into ``n`` line segments.

    The curve is evaluated with the cubic Bernstein basis:
        B(t) = (1-t)^3 * P1 + 3t(1-t)^2 * C1 + 3t^2(1-t) * C2 + t^3 * P2

    Args:
        p1: Start point (x, y).
        c1: First control point (x, y), shapes the curve near p1.
        c2: Second control point (x, y), shapes the curve near p2.
        p2: End point (x, y).
        n: Number of segments, at least 1.

    Returns:
        Array of shape (n, 4) with rows [x1, y1, x2, y2].

    Raises:
        ValueError: If ``n`` is less than 1.
    """
    t = _parameters(n)[:, np.newaxis]
    u = 1.0 - t
    samples = (u * u * u) * np.asarray(p1, dtype=np.float64) \
        + (3.0 * t * u * u) * np.asarray(c1, dtype=np.float64) \
        + (3.0 * t * t * u) * np.asarray(c2, dtype=np.float64) \
        + (t * t * t) * np.asarray(p2, dtype=np.float64)
    return _samples_to_lines(samples)
