"""
Uniform-grid ray traversal iterators and top-level helpers.
"""
import logging
import math
import sys
from typing import Callable, Iterable, Iterator, Optional, Tuple

import numpy as np

from ._core import _advance, _project, _walk
from .vector import Vector3d

logger = logging.getLogger(__name__)

#: Length used when a traversal should never run out (``Double.MAX_VALUE``).
UNBOUNDED = sys.float_info.max


class GridTraversal:
    """
    Forward-only walk of a ray through a uniform grid of cubes.

    Every step moves to the nearest grid boundary along the ray and emits
    either the cell corner reached (``exact=False``) or the exact boundary
    point (``exact=True``). The traversal stops once the accumulated
    parametric length reaches ``length``. It cannot be rewound; build a new
    one from the same arguments to walk again.

    The step length is measured in units of ``direction``, which is not
    normalised.
    """

    def __init__(
        self,
        start: Iterable[float],
        direction: Iterable[float],
        grid_size: float = 1.0,
        length: float = UNBOUNDED,
        *,
        exact: bool = False,
    ) -> None:
        grid_size = float(grid_size)
        if not (math.isfinite(grid_size) and grid_size > 0.0):
            raise ValueError(f"grid_size must be a positive finite number, got {grid_size!r}")

        self._pos = np.asarray(Vector3d.from_iterable(start), dtype=np.float64)
        self._dir = np.asarray(Vector3d.from_iterable(direction), dtype=np.float64)
        self._grid_size = grid_size
        self._length = float(length)
        self._exact = bool(exact)
        self._current_length = 0.0
        logger.debug("GridTraversal start=%s dir=%s grid_size=%s length=%s exact=%s",
                     self._pos, self._dir, grid_size, self._length, self._exact)

    # ---------------------------------------------------------------------
    # State
    # ---------------------------------------------------------------------
    @property
    def position(self) -> Vector3d:
        return Vector3d.from_iterable(self._pos)

    @property
    def direction(self) -> Vector3d:
        return Vector3d.from_iterable(self._dir)

    @property
    def grid_size(self) -> float:
        return self._grid_size

    @property
    def length(self) -> float:
        return self._length

    @property
    def exact(self) -> bool:
        return self._exact

    @property
    def current_length(self) -> float:
        """Parametric length travelled so far."""
        return self._current_length

    def has_next(self) -> bool:
        return self._current_length < self._length

    # ---------------------------------------------------------------------
    # Iteration
    # ---------------------------------------------------------------------
    def __iter__(self) -> Iterator[Vector3d]:
        return self

    def __next__(self) -> Vector3d:
        if not self.has_next():
            raise StopIteration
        self._current_length += float(_advance(self._pos, self._dir, self._grid_size))
        if not self.has_next():
            logger.debug("GridTraversal exhausted at length %s", self._current_length)
        return Vector3d(*_project(self._pos, self._grid_size, self._exact))

    def take(self, n: int) -> np.ndarray:
        """
        Advance up to *n* steps at once and return the emitted points as an
        ``(k, 3)`` array, ``k <= n``. Fewer rows mean the traversal ran out.
        """
        out = np.empty((max(int(n), 0), 3), dtype=np.float64)
        count, current_length = _walk(
            self._pos,
            self._dir,
            self._grid_size,
            self._length,
            self._current_length,
            self._exact,
            out,
        )
        self._current_length = float(current_length)
        return out[:count]


# -------------------------------------------------------------------------
# Convenience top-level helpers
# -------------------------------------------------------------------------
def create_grid_iterator(
    start: Iterable[float],
    direction: Iterable[float],
    grid_size: float = 1.0,
    length: float = UNBOUNDED,
) -> GridTraversal:
    """Iterate the cells of a grid of *grid_size* cubes crossed by the ray, until *length*."""
    return GridTraversal(start, direction, grid_size, length)


def create_exact_grid_iterator(
    start: Iterable[float],
    direction: Iterable[float],
    grid_size: float,
    length: float,
) -> GridTraversal:
    """Like :func:`create_grid_iterator` but yields the exact point where each boundary is hit."""
    return GridTraversal(start, direction, grid_size, length, exact=True)


def traverse_until_hit(
    start: Iterable[float],
    direction: Iterable[float],
    is_solid: Callable[[Vector3d], bool],
    *,
    grid_size: float = 1.0,
    length: float = UNBOUNDED,
    exact: bool = False,
) -> Optional[Tuple[Vector3d, float]]:
    """
    Return ``(point, current_length)`` for the first point accepted by
    *is_solid*, or *None* if the traversal runs out first.
    """
    traversal = GridTraversal(start, direction, grid_size, length, exact=exact)
    for point in traversal:
        if is_solid(point):
            return point, traversal.current_length
    return None
