"""Polygon colliders that detect overlaps with line-segment intersection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from shootergame.vector import Vec2

if TYPE_CHECKING:
    from shootergame.entity import Entity

_MAX_DISPLACEMENT = 4.0


@dataclass(frozen=True)
class Line:
    """A line segment from ``begin`` to ``end``."""

    begin: Vec2
    end: Vec2

    def translated(self, delta: Vec2) -> Line:
        return Line(self.begin + delta, self.end + delta)


def intersection_params(first: Line, second: Line) -> Optional[tuple[float, float]]:
    """Return the parameters along both segments where they cross, or None.

    Parallel segments never intersect; both parameters must lie in [0, 1].
    """
    ab = first.end - first.begin
    cd = second.end - second.begin
    ac = second.begin - first.begin

    determinant = ab.cross(cd)
    if determinant == 0:
        return None

    t1 = (cd.y * ac.x - cd.x * ac.y) / determinant
    t2 = (ab.y * ac.x - ab.x * ac.y) / determinant
    if 0 <= t1 <= 1 and 0 <= t2 <= 1:
        return t1, t2
    return None


class Collider:
    """A polygon collider, optionally attached to an entity whose position offsets it."""

    def __init__(
        self,
        points: Iterable[Vec2] = (),
        is_static: bool = False,
        entity: Optional[Entity] = None,
    ) -> None:
        self.is_static = bool(is_static)
        self.is_immovable = False
        self._entity: Optional[Entity] = None
        self.set_points(points)
        self.attach(entity)

    def set_points(self, points: Iterable[Vec2]) -> None:
        """Replace the polygon and rebuild its inner and outer lines."""
        pts = tuple(points)
        for point in pts:
            if not isinstance(point, Vec2):
                raise TypeError("collider points must be Vec2 values")
        self._points = pts
        self._center = sum(pts, Vec2.ZERO) / len(pts) if pts else Vec2.ZERO
        self._inner_lines = tuple(Line(self._center, point) for point in pts)
        self._outer_lines = tuple(
            Line(point, following) for point, following in zip(pts, pts[1:] + pts[:1])
        )

    def attach(self, entity: Optional[Entity]) -> None:
        """Attach the collider to ``entity`` and make it the entity's collider."""
        self._entity = entity
        if entity is None:
            return
        if entity.collider is not self:
            entity.set_collider(self)

    @property
    def entity(self) -> Optional[Entity]:
        return self._entity

    @property
    def points(self) -> tuple[Vec2, ...]:
        return self._points

    @property
    def center(self) -> Vec2:
        """Mean of the points, or the zero vector when there are none."""
        return self._center

    @property
    def inner_lines(self) -> tuple[Line, ...]:
        """Lines from the centre to every point."""
        return self._inner_lines

    @property
    def outer_lines(self) -> tuple[Line, ...]:
        """The polygon's edges, the last one closing back to the first point."""
        return self._outer_lines

    def _offset(self) -> Vec2:
        return self._entity.position if self._entity is not None else Vec2.ZERO

    def check_collisions(self, other: Collider) -> bool:
        """Whether this collider overlaps ``other``.

        When both colliders are static and this one is movable and attached,
        its entity is pushed by at most a few units.
        """
        own_offset = self._offset()
        other_edges = [edge.translated(other._offset()) for edge in other.outer_lines]

        collided_at_least_once = False
        displacement = Vec2.ZERO
        for inner in self._inner_lines:
            line = inner.translated(own_offset)
            for edge in other_edges:
                params = intersection_params(line, edge)
                if params is not None:
                    break
            else:
                continue
            collided_at_least_once = True
            displacement = displacement - (line.end - line.begin) * (1 - params[0])

        if self.is_static and other.is_static and not self.is_immovable and self._entity:
            if displacement.magnitude2() >= _MAX_DISPLACEMENT * _MAX_DISPLACEMENT:
                displacement = displacement.with_magnitude(_MAX_DISPLACEMENT)
            self._entity.move(displacement)
        return collided_at_least_once

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collider):
            return NotImplemented
        return (
            self._points == other._points
            and self.is_static == other.is_static
            and self.is_immovable == other.is_immovable
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Collider(points={list(self._points)!r}, is_static={self.is_static}, "
            f"is_immovable={self.is_immovable})"
        )