"""Convex polygon shapes with freely placed points."""

from __future__ import annotations

from shootergame.circle_shape import Shape
from shootergame.vector import Vec2


def _require_count(count: object) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError("point count must be an integer")
    if count < 0:
        raise ValueError("point count cannot be negative")
    return count


class ConvexShape(Shape):
    """A convex polygon whose points are set one by one in local coordinates."""

    def __init__(self, point_count: int = 0) -> None:
        super().__init__()
        self._points_list: list[Vec2] = [Vec2.ZERO] * _require_count(point_count)

    def set_point_count(self, count: int) -> None:
        """Resize the polygon, keeping existing points and adding zero points."""
        count = _require_count(count)
        current = len(self._points_list)
        if count < current:
            del self._points_list[count:]
        else:
            self._points_list.extend([Vec2.ZERO] * (count - current))

    def point_count(self) -> int:
        return len(self._points_list)

    def _check_index(self, index: object) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("point index must be an integer")
        if not 0 <= index < len(self._points_list):
            raise IndexError(f"point index out of range: {index}")
        return index

    def set_point(self, index: int, point: Vec2) -> None:
        """Place the point at ``index``."""
        if not isinstance(point, Vec2):
            raise TypeError("point must be a Vec2")
        self._points_list[self._check_index(index)] = point

    def get_point(self, index: int) -> Vec2:
        return self._points_list[self._check_index(index)]