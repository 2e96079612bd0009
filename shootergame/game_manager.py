"""Ownership of the running entities and collision bookkeeping."""

from __future__ import annotations

import enum
from itertools import combinations
from typing import Any, Optional

from shootergame.entity import Entity


class CollisionState(enum.Enum):
    ENTER = enum.auto()
    STAY = enum.auto()
    EXIT = enum.auto()


class GameManager:
    """Runs entities, adds and removes them between frames, and reports collisions."""

    def __init__(self) -> None:
        self.parent: Optional[Any] = None
        self.ran_start = False
        self._entities: list[Entity] = []
        self._new_entities: list[Entity] = []
        self._destroyed_entities: list[Entity] = []
        self._collision_table: dict[Entity, set[Entity]] = {}

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def add_entity(self, entity: Entity) -> Entity:
        """Queue ``entity``; it joins the game at the next move of new entities."""
        if entity.manager is None:
            entity.manager = self
        self._new_entities.append(entity)
        return entity

    def start(self) -> None:
        self.move_new_entities()
        for entity in self._entities:
            entity.start()
        self.ran_start = True

    def update(self, delta_time: float) -> None:
        for entity in self._entities:
            entity.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for entity in self._entities:
            entity.late_update(delta_time)
        self.check_collisions()

    def render(self, target: Any, debug_render: bool = False) -> None:
        for entity in self._entities:
            entity.render(target)
            if debug_render:
                entity.debug_render(target)
        self.move_new_entities()
        self.destroy_entities()

    def handle_event(self, event: Any) -> None:
        for entity in self._entities:
            entity.handle_event(event)

    def check_collisions(self) -> list[tuple[Entity, Entity, CollisionState]]:
        """Test every pair once, then fire enter, stay and exit callbacks."""
        events: list[tuple[Entity, Entity, CollisionState]] = []
        for first, second in combinations(self._entities, 2):
            collided = first.collider.check_collisions(second.collider)
            known = second in self._collision_table.get(first, ())
            if collided:
                state = CollisionState.STAY if known else CollisionState.ENTER
                events.append((first, second, state))
            elif known:
                events.append((first, second, CollisionState.EXIT))

        for first, second, state in events:
            if state is CollisionState.ENTER:
                self._collision_table.setdefault(first, set()).add(second)
                first.on_collision_enter(second)
                second.on_collision_enter(first)
            elif state is CollisionState.STAY:
                first.on_collision_stay(second)
                second.on_collision_stay(first)
            else:
                self._collision_table[first].discard(second)
                first.on_collision_exit(second)
                second.on_collision_exit(first)
        return events

    def move_new_entities(self) -> None:
        """Move queued entities into the game, starting them if the game already started."""
        for entity in self._new_entities:
            if self.ran_start:
                entity.start()
            self._entities.append(entity)
        self._new_entities.clear()

    def destroy_entity(self, entity: Entity) -> None:
        """Schedule ``entity`` for removal at the end of the frame."""
        self._destroyed_entities.append(entity)

    def destroy_entities(self) -> None:
        for doomed in self._destroyed_entities:
            for index, entity in enumerate(self._entities):
                if entity is doomed:
                    del self._entities[index]
                    break
        self._destroyed_entities.clear()

    def destroy(self) -> None:
        self._entities.clear()
        self._collision_table.clear()
        self.parent = None