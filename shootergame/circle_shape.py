"""Drawable shapes built from points, and the circle shape."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Optional

from shootergame.color import Color
from shootergame.transformable import FloatRect, IntRect, Transformable
from shootergame.vector import Vec2


def _edge_normal(p1: Vec2, p2: Vec2) -> Vec2:
    normal = Vec2(p1.y - p2.y, p2.x - p1.x)
    length = normal.magnitude()
    return normal / length if length != 0 else normal


def _bounds(points: list[Vec2]) -> FloatRect:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class Shape(Transformable, ABC):
    """A filled, optionally outlined and textured polygon."""

    def __init__(self) -> None:
        super().__init__()
        self.fill_color = Color.WHITE
        self.outline_color = Color.WHITE
        self.outline_thickness = 0.0
        self.texture_rect = IntRect()
        self._texture: Optional[Any] = None

    @abstractmethod
    def point_count(self) -> int:
        """Number of points of the shape."""

    @abstractmethod
    def get_point(self, index: int) -> Vec2:
        """The point at ``index`` in local coordinates."""

    @property
    def texture(self) -> Optional[Any]:
        return self._texture

    def set_texture(self, texture: Optional[Any], reset_rect: bool = False) -> None:
        """Use ``texture`` (anything with a ``size`` pair) to fill the shape.

        The texture rectangle is set to the whole texture when asked to, or when
        no texture and no rectangle were set before.
        """
        if texture is not None and (
            reset_rect or (self._texture is None and self.texture_rect == IntRect())
        ):
            width, height = texture.size
            self.texture_rect = IntRect(0, 0, int(width), int(height))
        self._texture = texture

    def _points(self) -> list[Vec2]:
        return [self.get_point(index) for index in range(self.point_count())]

    def _outline_points(self, points: list[Vec2]) -> list[Vec2]:
        inside = _bounds(points)
        center = Vec2(inside.left + inside.width / 2, inside.top + inside.height / 2)
        count = len(points)
        outline: list[Vec2] = []
        for index, p1 in enumerate(points):
            p0 = points[index - 1]
            p2 = points[(index + 1) % count]
            n1 = _edge_normal(p0, p1)
            n2 = _edge_normal(p1, p2)
            if n1.dot(center - p1) > 0:
                n1 = -n1
            if n2.dot(center - p1) > 0:
                n2 = -n2
            factor = 1 + n1.dot(n2)
            normal = (n1 + n2) / factor if factor != 0 else n1
            outline.append(p1)
            outline.append(p1 + normal * self.outline_thickness)
        return outline

    def local_bounds(self) -> FloatRect:
        """Bounds of the shape and its outline, ignoring the transform."""
        points = self._points()
        if len(points) < 3:
            return FloatRect()
        if self.outline_thickness == 0:
            return _bounds(points)
        return _bounds(self._outline_points(points))

    def global_bounds(self) -> FloatRect:
        """Bounds of the shape after its transform is applied."""
        return self.transform().transform_rect(self.local_bounds())


class CircleShape(Shape):
    """A regular polygon approximating a circle, with its bounding box at the origin."""

    def __init__(self, radius: float = 0.0, point_count: int = 30) -> None:
        super().__init__()
        if isinstance(point_count, bool) or not isinstance(point_count, int):
            raise TypeError("point count must be an integer")
        if point_count < 0:
            raise ValueError("point count cannot be negative")
        self.radius = float(radius)
        self._point_count = point_count

    def point_count(self) -> int:
        return self._point_count

    def get_point(self, index: int) -> Vec2:
        if not 0 <= index < self._point_count:
            raise IndexError(f"point index out of range: {index}")
        angle = index * 2 * math.pi / self._point_count - math.pi / 2
        return Vec2(
            self.radius + math.cos(angle) * self.radius,
            self.radius + math.sin(angle) * self.radius,
        )