"""
Ray-casting primitives: bounded 2-D line intersection and uniform-grid ray traversal.
"""
from .vector import Vector3d
from .intersection import Direction, line_intersection
from .grid import (
    UNBOUNDED,
    GridTraversal,
    create_exact_grid_iterator,
    create_grid_iterator,
    traverse_until_hit,
)
from .ray import Ray

__all__ = [
    "Vector3d",
    "Direction",
    "line_intersection",
    "UNBOUNDED",
    "GridTraversal",
    "create_grid_iterator",
    "create_exact_grid_iterator",
    "traverse_until_hit",
    "Ray",
]
