"""Game entities and the player-controlled entity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from shootergame.circle_shape import CircleShape
from shootergame.collider import Collider
from shootergame.color import Color
from shootergame.convex_shape import ConvexShape
from shootergame.vector import Vec2

if TYPE_CHECKING:
    from shootergame.game_manager import GameManager


@dataclass
class InputState:
    """Keys held down and the mouse position in game coordinates."""

    pressed: set[str] = field(default_factory=set)
    mouse_position: Vec2 = Vec2.ZERO

    def is_pressed(self, key: str) -> bool:
        return key.upper() in {name.upper() for name in self.pressed}


class Entity:
    """Something living in the game world, with health, position and a collider."""

    def __init__(
        self,
        manager: Optional[GameManager] = None,
        mod_name: str = "",
        name: str = "",
    ) -> None:
        self.manager = manager
        self.mod_name = mod_name
        self.name = name
        self.metadata = ""
        self.alive = True
        self.late_updates = 0
        self.last_event: Any = None
        self.touching: set[Entity] = set()
        self._health = 100.0
        self._position = Vec2.ZERO
        self._collider = Collider()
        self._collider.attach(self)

    @property
    def health(self) -> float:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        """Set health; reaching zero or below kills and schedules removal."""
        self._health = float(value)
        if self._health <= 0:
            self.on_death()
            if self.manager is not None:
                self.manager.destroy_entity(self)

    def change_health(self, delta: float) -> None:
        self.health = self._health + delta

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        if not isinstance(value, Vec2):
            raise TypeError("position must be a Vec2")
        self._position = value

    def move(self, delta: Vec2) -> None:
        self._position = self._position + delta

    @property
    def collider(self) -> Collider:
        return self._collider

    def set_collider(self, collider: Collider) -> None:
        """Use ``collider`` for this entity and attach it here."""
        self._collider = collider
        if collider.entity is not self:
            collider.attach(self)

    @property
    def full_name(self) -> str:
        return f"{self.mod_name}/{self.name}"

    def is_player(self) -> bool:
        return False

    def debug_render(self, target: Any) -> None:
        """Draw the collider's lines, placed at the entity's position."""
        for line in (*self._collider.inner_lines, *self._collider.outer_lines):
            target.draw(line.translated(self._position))

    def start(self) -> None:
        """Called once the entity enters the running game."""

    def update(self, delta_time: float) -> None:
        """Called every frame with the elapsed seconds."""

    def late_update(self, delta_time: float) -> None:
        """Called every frame after all updates; counts the frames seen."""
        self.late_updates += 1

    def handle_event(self, event: Any) -> None:
        """Called for every window event; remembers the latest one."""
        self.last_event = event

    def render(self, target: Any) -> None:
        """Draw the entity onto ``target``."""

    def on_death(self) -> None:
        """Called when health drops to zero or below; marks the entity dead."""
        self.alive = False

    def on_collision_enter(self, other: Entity) -> None:
        """Called when a collision with ``other`` begins."""
        self.touching.add(other)

    def on_collision_stay(self, other: Entity) -> None:
        """Called while the collision with ``other`` goes on."""
        self.touching.add(other)

    def on_collision_exit(self, other: Entity) -> None:
        """Called when the collision with ``other`` ends."""
        self.touching.discard(other)


_MOVEMENT = (
    ("W", Vec2.DOWN),
    ("A", Vec2.LEFT),
    ("S", Vec2.UP),
    ("D", Vec2.RIGHT),
)


class Player(Entity):
    """A round player with a gun that points at the mouse."""

    RADIUS = 25.0
    GUN_SIZE = Vec2(43.0, 18.0)
    VELOCITY = 200.0

    def __init__(
        self,
        manager: Optional[GameManager] = None,
        is_current_player: bool = True,
        input_state: Optional[InputState] = None,
    ) -> None:
        super().__init__(manager, "", "Player")
        self.is_current_player = is_current_player
        self.input_state = input_state if input_state is not None else InputState()
        self.player_id = 0

        self.circle = CircleShape(self.RADIUS)
        self.circle.origin = Vec2(self.RADIUS, self.RADIUS)
        self.circle.fill_color = Color.RED
        self.circle.outline_thickness = 1.0
        self.circle.outline_color = Color.BLACK

        width, height = self.GUN_SIZE
        self.gun = ConvexShape(4)
        corners = (Vec2(0, 0), Vec2(width, 0), Vec2(width, height), Vec2(0, height))
        for index, corner in enumerate(corners):
            self.gun.set_point(index, corner)
        self.gun.origin = Vec2(0, height / 2)
        self.gun.fill_color = Color.GRAY
        self.gun.outline_thickness = 1.0
        self.gun.outline_color = Color.BLACK

        self.position = self._position

    @Entity.position.setter
    def position(self, value: Vec2) -> None:
        Entity.position.fset(self, value)
        self.circle.position = self._position
        self.gun.position = self._position

    def start(self) -> None:
        """Build a static collider from every other point of the circle."""
        offset = Vec2.ONE * self.RADIUS
        points = [
            self.circle.get_point(index * 2) - offset
            for index in range(self.circle.point_count() // 2)
        ]
        self.set_collider(Collider(points, True, self))

    def update(self, delta_time: float) -> None:
        if not self.is_current_player:
            return
        step = self.VELOCITY * float(delta_time)
        for key, direction in _MOVEMENT:
            if self.input_state.is_pressed(key):
                self.move(direction * step)
        difference = self.input_state.mouse_position - self._position
        self.gun.rotation = math.degrees(math.atan2(difference.y, difference.x))

    def render(self, target: Any) -> None:
        target.draw(self.gun)
        target.draw(self.circle)

    def move(self, delta: Vec2) -> None:
        super().move(delta)
        self.circle.move(delta)
        self.gun.move(delta)

    def is_player(self) -> bool:
        return True

    @property
    def gun_rotation(self) -> float:
        """Rotation of the gun in degrees."""
        return self.gun.rotation