from shootergame.collider import Collider
from shootergame.entity import Entity
from shootergame.game_manager import CollisionState, GameManager
from shootergame.vector import Vec2


def square(half=1.0):
    return [Vec2(-half, -half), Vec2(half, -half), Vec2(half, half), Vec2(-half, half)]


class Recorder(Entity):
    def __init__(self, manager, name="probe"):
        super().__init__(manager, "test", name)
        self.calls = []

    def start(self):
        self.calls.append("start")

    def update(self, delta_time):
        self.calls.append(("update", delta_time))

    def late_update(self, delta_time):
        self.calls.append(("late", delta_time))

    def handle_event(self, event):
        self.calls.append(("event", event))

    def render(self, target):
        target.draw(self)

    def on_collision_enter(self, other):
        self.calls.append(("enter", other))

    def on_collision_stay(self, other):
        self.calls.append(("stay", other))

    def on_collision_exit(self, other):
        self.calls.append(("exit", other))


class Target:
    def __init__(self):
        self.drawn = []

    def draw(self, item):
        self.drawn.append(item)


def boxed(manager, position, name):
    entity = Recorder(manager, name)
    entity.position = position
    entity.set_collider(Collider(square()))
    manager.add_entity(entity)
    return entity


def test_added_entity_waits_for_move():
    manager = GameManager()
    entity = manager.add_entity(Recorder(manager))
    assert entity not in manager.entities
    manager.move_new_entities()
    assert manager.entities == (entity,)


def test_add_entity_sets_manager():
    manager = GameManager()
    entity = manager.add_entity(Entity(None, "mod", "thing"))
    assert entity.manager is manager


def test_start_starts_existing_entities_once():
    manager = GameManager()
    entity = manager.add_entity(Recorder(manager))
    manager.start()
    assert entity.calls == ["start"]
    assert manager.ran_start


def test_entities_added_after_start_are_started_on_move():
    manager = GameManager()
    manager.start()
    entity = manager.add_entity(Recorder(manager))
    assert entity.calls == []
    manager.move_new_entities()
    assert entity.calls == ["start"]


def test_update_and_late_update_forward_delta():
    manager = GameManager()
    entity = manager.add_entity(Recorder(manager))
    manager.move_new_entities()
    manager.update(0.5)
    manager.late_update(0.5)
    assert entity.calls == [("update", 0.5), ("late", 0.5)]


def test_handle_event_forwarded():
    manager = GameManager()
    entity = manager.add_entity(Recorder(manager))
    manager.move_new_entities()
    manager.handle_event("resize")
    assert entity.calls == [("event", "resize")]


def test_destroyed_entity_is_removed():
    manager = GameManager()
    keep = manager.add_entity(Recorder(manager, "keep"))
    drop = manager.add_entity(Recorder(manager, "drop"))
    manager.move_new_entities()
    manager.destroy_entity(drop)
    assert drop in manager.entities
    manager.destroy_entities()
    assert manager.entities == (keep,)


def test_render_draws_then_moves_and_destroys():
    manager = GameManager()
    first = manager.add_entity(Recorder(manager, "first"))
    manager.move_new_entities()
    second = manager.add_entity(Recorder(manager, "second"))
    manager.destroy_entity(first)
    target = Target()
    manager.render(target)
    assert target.drawn == [first]
    assert manager.entities == (second,)


def test_debug_render_draws_collider_lines():
    manager = GameManager()
    entity = boxed(manager, Vec2(0, 0), "box")
    manager.move_new_entities()
    target = Target()
    manager.render(target, True)
    assert target.drawn[0] is entity
    assert len(target.drawn) == 1 + 2 * len(entity.collider.points)


def test_collision_enter_stay_exit():
    manager = GameManager()
    first = boxed(manager, Vec2(0, 0), "first")
    second = boxed(manager, Vec2(0.5, 0), "second")
    manager.move_new_entities()

    events = manager.check_collisions()
    assert events == [(first, second, CollisionState.ENTER)]
    assert first.calls == [("enter", second)]
    assert second.calls == [("enter", first)]

    manager.check_collisions()
    assert first.calls[-1] == ("stay", second)
    assert second.calls[-1] == ("stay", first)

    second.position = Vec2(100, 0)
    manager.check_collisions()
    assert first.calls[-1] == ("exit", second)
    assert second.calls[-1] == ("exit", first)

    assert manager.check_collisions() == []


def test_late_update_checks_collisions():
    manager = GameManager()
    first = boxed(manager, Vec2(0, 0), "first")
    second = boxed(manager, Vec2(0.5, 0), "second")
    manager.move_new_entities()
    manager.late_update(0.1)
    assert ("enter", second) in first.calls


def test_separate_entities_produce_no_events():
    manager = GameManager()
    first = boxed(manager, Vec2(0, 0), "first")
    boxed(manager, Vec2(50, 50), "second")
    manager.move_new_entities()
    assert manager.check_collisions() == []
    assert first.calls == []


def test_destroy_clears_entities_and_parent():
    manager = GameManager()
    manager.parent = object()
    first = boxed(manager, Vec2(0, 0), "first")
    boxed(manager, Vec2(0.5, 0), "second")
    manager.move_new_entities()
    manager.check_collisions()
    manager.destroy()
    assert manager.entities == ()
    assert manager.parent is None
    manager.add_entity(first)
    second = boxed(manager, Vec2(0.5, 0), "again")
    manager.move_new_entities()
    events = manager.check_collisions()
    assert events == [(first, second, CollisionState.ENTER)]


def test_collision_states_follow_enter_stay_exit_order():
    manager = GameManager()
    boxed(manager, Vec2(0, 0), "first")
    second = boxed(manager, Vec2(0.5, 0), "second")
    manager.move_new_entities()
    states = [event[2] for event in manager.check_collisions()]
    states += [event[2] for event in manager.check_collisions()]
    second.position = Vec2(100, 0)
    states += [event[2] for event in manager.check_collisions()]
    assert states == [CollisionState.ENTER, CollisionState.STAY, CollisionState.EXIT]
    assert len(set(states)) == 3