"""Two-dimensional float vectors and linear interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    UP: ClassVar[Vec2]
    DOWN: ClassVar[Vec2]
    LEFT: ClassVar[Vec2]
    RIGHT: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Vec2:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vec2:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude2(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def with_magnitude(self, magnitude: float) -> Vec2:
        """Return a vector with the same direction and the given length."""
        length = self.magnitude()
        if length == 0:
            raise ValueError("cannot set the magnitude of a zero vector")
        return self * (magnitude / length)

    def cwise_mul(self, other: Vec2) -> Vec2:
        """Component-wise product."""
        return Vec2(self.x * other.x, self.y * other.y)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.UP = Vec2(0.0, 1.0)
Vec2.DOWN = Vec2(0.0, -1.0)
Vec2.LEFT = Vec2(-1.0, 0.0)
Vec2.RIGHT = Vec2(1.0, 0.0)


def lerp(a, b, t: float):
    """Linear interpolation between ``a`` and ``b`` (numbers or vectors)."""
    return a + (b - a) * t