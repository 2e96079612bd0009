# shootergame

The core of a top-down shooter as plain Python, with no window or graphics library
behind it. It holds the game's geometry, colours, shapes, collision detection, entity
life cycle, scenes and frame loop. You drive it from your own renderer and input code,
or run it headless in tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `shootergame.vector`: `Vec2`, an immutable 2D vector. It supports `+`, `-`,
  negation, and multiplication and division by a number. It has `cross`, `dot`,
  `magnitude`, `magnitude2`, `with_magnitude` and `cwise_mul`, and the constants
  `ZERO`, `ONE`, `UP`, `DOWN`, `LEFT` and `RIGHT`. The module also has `lerp(a, b, t)`.
- `shootergame.color`: `Color`, an 8-bit RGBA colour whose channels are checked to lie in
  0..255. It has `from_hex` (0xRRGGBBAA), `clamped`, `to_hex` and `to_grayscale`, plus
  addition, subtraction, multiplication and division that saturate at 0..255. The module
  also has named constants such as `Color.RED`, `mix_colors` and `lerp_color`.
- `shootergame.gradient`: `ColorGradient` maps time to colour through keys placed with
  `set_key`, interpolating linearly between them. `MovingGradient(period, rng)` fades
  towards a new random colour every period. `random_color(rng)` returns an opaque
  random colour.
- `shootergame.context_settings`: `ContextSettings`, a dataclass of rendering-context
  settings whose numeric fields become non-negative integers, and the `Attribute` flags.
  `update(**kwargs)` raises `AttributeError` for an unknown field.
- `shootergame.transformable`: `FloatRect`, `IntRect`, `Transform` and `Transformable`.
  `Transform` is an affine transform with `transform_point`, `transform_rect`, `combine`
  (also available as `t1 @ t2`) and `inverse`. `Transformable` has a position, a
  rotation in degrees, a scale and an origin, plus `move`, `rotate`, `scale_by`,
  `transform` and `inverse_transform`.
- `shootergame.circle_shape`: `Shape`, the base class for polygons, which carries fill
  and outline colours, an outline thickness, a texture and a texture rectangle, with
  `local_bounds` and `global_bounds`. `CircleShape(radius, point_count=30)` is a regular
  polygon whose bounding box starts at the origin.
- `shootergame.convex_shape`: `ConvexShape`, a polygon whose points are set with
  `set_point` and resized with `set_point_count`.
- `shootergame.collider`: `Line`, `intersection_params(first, second)` and `Collider`.
  A collider is a polygon with a centre, inner lines (centre to each point) and outer
  lines (its edges). `check_collisions` tests one collider's inner lines against the
  other's outer lines, offset by the attached entities' positions. When both colliders
  are static and the first is movable and attached, it pushes the first entity away by
  at most 4 units.
- `shootergame.entity`: `Entity`, which has health, a position, a collider, a full name
  (`mod_name/name`) and overridable hooks for start, update, events, rendering, death
  and collisions. When health reaches zero, `on_death` is called and the entity is
  scheduled for removal from its manager. `Player` is a circle with a gun that moves
  with the W, A, S and D keys and points the gun at the mouse. `InputState` holds the
  pressed keys and the mouse position.
- `shootergame.game_manager`: `GameManager` queues entities with `add_entity` and
  brings them in with `move_new_entities`. It runs their updates and removes destroyed
  ones at the end of `render`. `check_collisions` returns the events of the frame as
  `(first, second, CollisionState)` tuples and calls the enter, stay and exit hooks.
- `shootergame.scenes`: `Scene`, `SceneManager`, `MainMenuScene`, `AboutScene` and
  `DebugScene`. Holding F3 for more than a second switches between the main menu and
  the debug scene, which spawns two players.
- `shootergame.game`: `Game` builds the three scenes and the entity manager.
  `advance(elapsed)` runs the updates that are due and records the drawn objects in
  `last_frame`; with `max_fps` set, it runs fixed steps. `resize(width, height)` fits a
  letterboxed viewport, and `compute_viewport` does the same calculation on its own.

## Example

```python
from shootergame.collider import Collider
from shootergame.entity import Entity
from shootergame.game_manager import GameManager
from shootergame.vector import Vec2

manager = GameManager()
square = [Vec2(-10, -10), Vec2(10, -10), Vec2(10, 10), Vec2(-10, 10)]

a = manager.add_entity(Entity(manager, "demo", "a"))
b = manager.add_entity(Entity(manager, "demo", "b"))
a.set_collider(Collider(square, True, a))
b.set_collider(Collider(square, True, b))
b.move(Vec2(5, 0))

manager.start()
events = manager.late_update(1 / 60)  # checks collisions, calls on_collision_enter
print(a.touching == {b})
```

Running the game headless:

```python
from shootergame.game import Game, compute_viewport

game = Game(max_fps=60)
game.resize(1920, 1200)
steps = game.advance(0.5)
print(game.scene_manager.active_name, steps, game.scale_percentage())

viewport = compute_viewport(1920, 1200, 16 / 9)
```

## What it does not do

The package opens no window. It loads no fonts or textures and plays no sound. Its
widgets are plain data objects that are not drawn. It does not read keyboard or mouse
input on its own: you fill in `InputState`. It has no mod loading or scripting of
entities, and no networking for multiplayer.