"""
Ray class encapsulating origin and direction, with grid traversal helpers.
"""
from typing import Callable, Iterable, Optional, Tuple

from .grid import UNBOUNDED, GridTraversal, traverse_until_hit
from .vector import Vector3d


class Ray:
    def __init__(self, origin: Iterable[float], direction: Iterable[float]):
        self.origin = Vector3d.from_iterable(origin)
        self.direction = Vector3d.from_iterable(direction)

    def __repr__(self) -> str:
        return f"Ray(origin={tuple(self.origin)}, direction={tuple(self.direction)})"

    def point_at(self, t: float) -> Vector3d:
        """Position after travelling parametric length *t*."""
        return self.origin + self.direction * t

    def grid_cells(self, grid_size: float = 1.0, length: float = UNBOUNDED) -> GridTraversal:
        return GridTraversal(self.origin, self.direction, grid_size, length)

    def exact_grid_points(self, grid_size: float = 1.0, length: float = UNBOUNDED) -> GridTraversal:
        return GridTraversal(self.origin, self.direction, grid_size, length, exact=True)

    def traverse_until_hit(
        self,
        is_solid: Callable[[Vector3d], bool],
        grid_size: float = 1.0,
        length: float = UNBOUNDED,
    ) -> Optional[Tuple[Vector3d, float]]:
        """Delegate to :func:`rayfast.grid.traverse_until_hit`."""
        return traverse_until_hit(self.origin, self.direction, is_solid,
                                  grid_size=grid_size, length=length)
