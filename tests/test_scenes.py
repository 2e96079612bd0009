import pytest

from shootergame.collider import Line
from shootergame.color import Color
from shootergame.entity import Player
from shootergame.game import Game
from shootergame.scenes import (
    F3,
    F3_HOLD_TIME,
    MENU_BUTTON_TEXT_SIZE,
    TITLE_TEXT_SIZE,
    AboutScene,
    DebugScene,
    MainMenuScene,
    Scene,
    SceneManager,
)
from shootergame.vector import Vec2


class RecordingScene(Scene):
    def __init__(self, log, label):
        super().__init__(None)
        self.log = log
        self.label = label

    def start(self):
        self.log.append((self.label, "start"))

    def destroy(self):
        self.log.append((self.label, "destroy"))

    def update(self, delta_time):
        self.log.append((self.label, "update", delta_time))

    def handle_event(self, event):
        self.log.append((self.label, "event", event))

    def render(self, target):
        self.log.append((self.label, "render", target))


def test_scene_manager_add_keeps_first_scene():
    manager = SceneManager()
    log = []
    first = RecordingScene(log, "a")
    assert manager.add("a", first) is True
    assert manager.add("a", RecordingScene(log, "other")) is False
    manager.set_active("a")
    assert manager.active is first


def test_scene_manager_unknown_name_raises():
    manager = SceneManager()
    with pytest.raises(KeyError):
        manager.set_active("missing")


def test_scene_manager_switch_destroys_old_and_starts_new():
    log = []
    manager = SceneManager()
    manager.add("a", RecordingScene(log, "a"))
    manager.add("b", RecordingScene(log, "b"))
    manager.set_active("a")
    manager.set_active("b")
    assert log == [("a", "start"), ("a", "destroy"), ("b", "start")]
    assert manager.active_name == "b"


def test_scene_manager_forwards_only_to_active():
    log = []
    manager = SceneManager()
    manager.add("a", RecordingScene(log, "a"))
    manager.add("b", RecordingScene(log, "b"))
    manager.update(0.5)
    assert log == []
    manager.set_active("b")
    log.clear()
    manager.update(0.5)
    manager.handle_event("evt")
    manager.render("target")
    assert log == [("b", "update", 0.5), ("b", "event", "evt"), ("b", "render", "target")]


def test_main_menu_is_shown_at_start():
    game = Game()
    scene = game.current_scene
    assert isinstance(scene, MainMenuScene)
    assert scene.title_label in game.gui
    assert [b.text for b in scene.buttons] == ["Play", "Map Maker", "Settings", "About", "Quit"]
    assert scene.title_label.text == game.window_title


def test_about_button_and_back_button():
    game = Game()
    game.current_scene.about_button.press()
    about = game.current_scene
    assert isinstance(about, AboutScene)
    assert about.title_label.text == "About"
    assert about.back_button in game.gui
    about.back_button.press()
    assert isinstance(game.current_scene, MainMenuScene)
    assert about.back_button not in game.gui


def test_title_color_follows_gradient():
    game = Game()
    scene = game.current_scene
    game.advance(0.7)
    assert scene.title_label.color == scene.title_gradient.current_color()


def test_resize_scales_menu_text():
    game = Game()
    game.resize(640, 360)
    scene = game.current_scene
    scale = game.scale_percentage()
    assert scene.title_label.text_size == int(TITLE_TEXT_SIZE * scale)
    assert all(b.text_size == int(MENU_BUTTON_TEXT_SIZE * scale) for b in scene.buttons)


def test_holding_f3_opens_debug_scene():
    game = Game()
    menu = game.current_scene
    game.input_state.pressed.add(F3)
    game.advance(F3_HOLD_TIME * 0.6)
    assert game.current_scene is menu
    assert game.game_manager.entities == ()
    game.advance(F3_HOLD_TIME * 0.6)
    assert game.current_scene is not menu
    assert game.current_scene.background_color == Color.CYAN
    assert len(game.game_manager.entities) == 2


def test_releasing_f3_resets_hold():
    game = Game()
    menu = game.current_scene
    game.input_state.pressed.add(F3)
    game.advance(F3_HOLD_TIME * 0.6)
    game.input_state.pressed.discard(F3)
    game.advance(F3_HOLD_TIME * 0.1)
    game.input_state.pressed.add(F3)
    game.advance(F3_HOLD_TIME * 0.6)
    assert game.current_scene is menu
    assert game.current_scene.title_label.text == game.window_title
    assert game.game_manager.entities == ()


def test_debug_scene_spawns_two_players():
    game = Game()
    game.switch_scene("debug_menu")
    entities = game.game_manager.entities
    assert len(entities) == 2
    assert all(isinstance(e, Player) for e in entities)
    assert entities[0].position == Vec2(100, 100)
    assert entities[1].position == Vec2(300, 300)
    assert entities[0].is_current_player and not entities[1].is_current_player
    assert game.current_scene.background_color == Color.CYAN


def test_debug_render_draws_players_and_optional_colliders():
    game = Game()
    game.switch_scene("debug_menu")
    game.advance(0.1)
    players = game.game_manager.entities
    assert players[0].circle in game.last_frame
    assert not any(isinstance(item, Line) for item in game.last_frame)
    game.current_scene.draw_colliders_toggle.toggle()
    game.advance(0.1)
    assert any(isinstance(item, Line) for item in game.last_frame)


def test_holding_f3_in_debug_returns_to_menu_and_clears_entities():
    game = Game()
    game.switch_scene("debug_menu")
    game.input_state.pressed.add(F3)
    game.advance(F3_HOLD_TIME * 0.6)
    assert isinstance(game.current_scene, DebugScene)
    game.advance(F3_HOLD_TIME * 0.6)
    assert isinstance(game.current_scene, MainMenuScene)
    assert game.game_manager.entities == ()


def test_quit_button_closes_game():
    game = Game()
    game.current_scene.quit_button.press()
    assert game.is_open is False
    assert game.gui == []