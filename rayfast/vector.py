"""
Immutable 3-D vector used for positions, directions and traversal output.
"""
import math
from typing import Iterable, NamedTuple


class Vector3d(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, x: float, y: float, z: float) -> "Vector3d":
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3d":
        """Build from any 3-element iterable (tuple, list, ndarray, Vector3d)."""
        components = tuple(float(v) for v in values)
        if len(components) != 3:
            raise ValueError(f"expected 3 components, got {len(components)}")
        return cls(*components)

    def __add__(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other: "Vector3d") -> "Vector3d":
        return Vector3d(self.x - other[0], self.y - other[1], self.z - other[2])

    def __mul__(self, scalar: float) -> "Vector3d":
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Vector3d") -> float:
        return self.x * other[0] + self.y * other[1] + self.z * other[2]

    def length(self) -> float:
        return math.sqrt(self.dot(self))
