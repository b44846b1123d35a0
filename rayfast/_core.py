"""
Low-level Numba kernels for the 2-D line intersection solve and 3-D grid stepping.

The kernels use the ``numpy`` error model: float division by zero yields
``inf``/``nan`` instead of raising, which both the parallel-line test and the
zero-direction handling rely on. ``fastmath`` stays off for the same reason.
"""
import math
import numpy as np
from numba import njit
from typing import Tuple

# Direction codes, kept in sync with ``intersection.Direction``
ANY = 0
FORWARDS = 1
BACKWARDS = 2


@njit(cache=True)
def _is_between_unordered(value: float, bound1: float, bound2: float) -> bool:
    if bound1 > bound2:
        return value >= bound2 and value <= bound1
    return value >= bound1 and value <= bound2


@njit(cache=True, error_model="numpy")
def _line_intersection(direction: int,
                       a: float, b: float, c: float, d: float,
                       f: float, g: float, h: float, i: float
                       ) -> Tuple[bool, float, float]:
    """
    Intersect the infinite line (a,b)-(c,d) with the line through (f,g)-(h,i).

    Returns ``(ok, x, y)``; ``ok`` is False for parallel lines, points outside
    the segment bounds and points rejected by the direction filter.
    """
    den = (a - c) * (g - i) - (b - d) * (f - h)
    cross_src = a * d - b * c
    cross_seg = f * i - g * h
    x = (cross_src * (f - h) - (a - c) * cross_seg) / den
    y = (cross_src * (g - i) - (b - d) * cross_seg) / den

    if not (math.isfinite(x) and math.isfinite(y)):
        return False, 0.0, 0.0

    # bounds set by the second line; y is bounded by (h, i)
    if not _is_between_unordered(x, f, h):
        return False, 0.0, 0.0
    if not _is_between_unordered(y, h, i):
        return False, 0.0, 0.0

    if direction == ANY:
        return True, x, y

    dot = (c - a) * (x - a) + (d - b) * (y - b)
    if direction == FORWARDS:
        return dot >= 0.0, x, y
    # BACKWARDS
    return dot <= 0.0, x, y


@njit(cache=True, error_model="numpy")
def _advance(pos: np.ndarray, d: np.ndarray, grid_size: float) -> float:
    """
    Move ``pos`` in place to the nearest grid boundary along ``d``.

    Returns the parametric step taken. Zero components of ``d`` give an
    infinite remaining distance and never win the minimum. A NaN distance
    (non-finite position) propagates into the step.
    """
    lowest = math.inf
    for k in range(3):
        remaining = (grid_size - np.fmod(abs(pos[k]), grid_size)) / abs(d[k])
        if math.isnan(remaining) or remaining < lowest:
            lowest = remaining
    for k in range(3):
        pos[k] += d[k] * lowest
    return lowest


@njit(cache=True)
def _project(pos: np.ndarray, grid_size: float, exact: bool
             ) -> Tuple[float, float, float]:
    """Exact hit point, or the cell corner using C-style (truncating) remainder."""
    if exact:
        return pos[0], pos[1], pos[2]
    return (pos[0] - np.fmod(pos[0], grid_size),
            pos[1] - np.fmod(pos[1], grid_size),
            pos[2] - np.fmod(pos[2], grid_size))


@njit(cache=True, error_model="numpy")
def _walk(pos: np.ndarray, d: np.ndarray,
          grid_size: float,
          length: float,
          current_length: float,
          exact: bool,
          out: np.ndarray) -> Tuple[int, float]:
    """
    Step repeatedly, filling ``out`` (n, 3) until it is full or ``length`` is reached.

    Returns ``(count, current_length)``.
    """
    count = 0
    max_points = out.shape[0]
    while count < max_points and current_length < length:
        current_length += _advance(pos, d, grid_size)
        px, py, pz = _project(pos, grid_size, exact)
        out[count, 0] = px
        out[count, 1] = py
        out[count, 2] = pz
        count += 1
    return count, current_length
