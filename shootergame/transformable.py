"""Rectangles, affine transforms and objects with position, rotation, scale and origin."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from shootergame.vector import Vec2


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle with float coordinates."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside the rectangle (right and bottom edges excluded)."""
        low_x, high_x = sorted((self.left, self.right))
        low_y, high_y = sorted((self.top, self.bottom))
        return low_x <= point.x < high_x and low_y <= point.y < high_y


@dataclass(frozen=True)
class IntRect:
    """An axis-aligned rectangle with integer coordinates."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Transform:
    """A 2D affine transform stored as the top two rows of a 3x3 matrix."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    IDENTITY: ClassVar[Transform]

    def transform_point(self, point: Vec2) -> Vec2:
        return Vec2(
            self.a * point.x + self.b * point.y + self.c,
            self.d * point.x + self.e * point.y + self.f,
        )

    def transform_rect(self, rect: FloatRect) -> FloatRect:
        """Return the bounding box of the transformed rectangle."""
        corners = [
            self.transform_point(Vec2(x, y))
            for x in (rect.left, rect.right)
            for y in (rect.top, rect.bottom)
        ]
        xs = [corner.x for corner in corners]
        ys = [corner.y for corner in corners]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def combine(self, other: Transform) -> Transform:
        """Return the transform that applies ``other`` first and then ``self``."""
        return Transform(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def __matmul__(self, other: object) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.combine(other)

    def inverse(self) -> Transform:
        """Return the inverse transform, or the identity if this one is singular."""
        det = self.a * self.e - self.b * self.d
        if det == 0:
            return Transform()
        return Transform(
            self.e / det,
            -self.b / det,
            (self.b * self.f - self.e * self.c) / det,
            -self.d / det,
            self.a / det,
            (self.d * self.c - self.a * self.f) / det,
        )


Transform.IDENTITY = Transform()


def _require_vec(name: str, value: object) -> Vec2:
    if not isinstance(value, Vec2):
        raise TypeError(f"{name} must be a Vec2")
    return value


class Transformable:
    """Something placed in the world by position, rotation (degrees), scale and origin."""

    def __init__(self) -> None:
        self._position = Vec2.ZERO
        self._rotation = 0.0
        self._scale = Vec2.ONE
        self._origin = Vec2.ZERO

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = _require_vec("position", value)

    @property
    def rotation(self) -> float:
        """Rotation in degrees, kept within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        angle = math.fmod(float(angle), 360.0)
        if angle < 0:
            angle += 360.0
        self._rotation = angle

    @property
    def scale(self) -> Vec2:
        return self._scale

    @scale.setter
    def scale(self, value: Vec2) -> None:
        self._scale = _require_vec("scale", value)

    @property
    def origin(self) -> Vec2:
        return self._origin

    @origin.setter
    def origin(self, value: Vec2) -> None:
        self._origin = _require_vec("origin", value)

    def move(self, delta: Vec2) -> None:
        self.position = self._position + _require_vec("delta", delta)

    def rotate(self, angle: float) -> None:
        self.rotation = self._rotation + angle

    def scale_by(self, factor: Vec2) -> None:
        self.scale = self._scale.cwise_mul(_require_vec("factor", factor))

    def transform(self) -> Transform:
        """The combined transform: origin offset, scale, rotation, then position."""
        angle = -math.radians(self._rotation)
        cosine, sine = math.cos(angle), math.sin(angle)
        sxc = self._scale.x * cosine
        syc = self._scale.y * cosine
        sxs = self._scale.x * sine
        sys_ = self._scale.y * sine
        tx = -self._origin.x * sxc - self._origin.y * sys_ + self._position.x
        ty = self._origin.x * sxs - self._origin.y * syc + self._position.y
        return Transform(sxc, sys_, tx, -sxs, syc, ty)

    def inverse_transform(self) -> Transform:
        return self.transform().inverse()