"""Scenes of the game: the main menu, the about page and the debug playground."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from shootergame.color import Color, lerp_color
from shootergame.entity import Player
from shootergame.gradient import MovingGradient
from shootergame.vector import Vec2

if TYPE_CHECKING:
    from shootergame.game import Game

RESIZED = "resized"
F3 = "F3"

TITLE_TEXT_SIZE = 42
MENU_BUTTON_TEXT_SIZE = 24
F3_HOLD_TIME = 1.0

MENU_BUTTON_COLOR = Color.from_hex(0x232CFFFF)
MENU_PANEL_COLOR = Color.from_hex(0x5AD9EFFF)
_GRADIENT_PERIOD = 2.0


def _is_resize(event: Any) -> bool:
    return getattr(event, "type", event) == RESIZED


@dataclass
class _Panel:
    color: Color


@dataclass
class _Label:
    text: str
    text_size: int
    color: Color = Color.BLACK


@dataclass
class _Button:
    text: str
    text_size: int = MENU_BUTTON_TEXT_SIZE
    background_color: Color = MENU_BUTTON_COLOR
    hover_color: Color = lerp_color(MENU_BUTTON_COLOR, Color.BLACK, 0.2)
    down_color: Color = lerp_color(MENU_BUTTON_COLOR, Color.BLACK, 0.4)
    on_press: Optional[Callable[[], None]] = None

    def press(self) -> None:
        if self.on_press is not None:
            self.on_press()


@dataclass
class _Toggle:
    text: str
    down: bool = False

    def toggle(self) -> None:
        self.down = not self.down


def _menu_button(text: str, on_press: Optional[Callable[[], None]] = None) -> _Button:
    return _Button(text, on_press=on_press)


class Scene:
    """A screen of the game with its own widgets and per-frame hooks."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.background_color = Color.BLACK
        self.widgets: list[Any] = []

    def _scaled(self, size: float) -> int:
        return int(size * self.game.scale_percentage())

    def start(self) -> None:
        """Show the scene's widgets."""
        self.game.gui.extend(self.widgets)

    def update(self, delta_time: float) -> None:
        """Advance the scene by ``delta_time`` seconds."""

    def late_update(self, delta_time: float) -> None:
        """Run after every scene update of the frame."""

    def handle_event(self, event: Any) -> None:
        """React to a window event."""

    def render(self, target: Any) -> None:
        """Draw the scene onto ``target``."""

    def destroy(self) -> None:
        """Remove every widget from the game's interface."""
        self.game.gui.clear()


class SceneManager:
    """Named scenes, of which at most one is active."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self._active_name: Optional[str] = None

    def __contains__(self, name: object) -> bool:
        return name in self._scenes

    def add(self, name: str, scene: Scene) -> bool:
        """Register ``scene`` under ``name``; an existing name is kept and False returned."""
        if name in self._scenes:
            return False
        self._scenes[name] = scene
        return True

    def set_active(self, name: str) -> None:
        """Destroy the active scene and start the one called ``name``."""
        if name not in self._scenes:
            raise KeyError(f"no scene named {name!r}")
        previous = self.active
        if previous is not None:
            previous.destroy()
        self._active_name = name
        self._scenes[name].start()

    @property
    def active(self) -> Optional[Scene]:
        if self._active_name is None:
            return None
        return self._scenes[self._active_name]

    @property
    def active_name(self) -> Optional[str]:
        return self._active_name

    def update(self, delta_time: float) -> None:
        scene = self.active
        if scene is not None:
            scene.update(delta_time)

    def handle_event(self, event: Any) -> None:
        scene = self.active
        if scene is not None:
            scene.handle_event(event)

    def render(self, target: Any) -> None:
        scene = self.active
        if scene is not None:
            scene.render(target)


class MainMenuScene(Scene):
    """The title screen; holding F3 opens the debug scene."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.background_color = Color.BLACK
        self.title_gradient = MovingGradient(_GRADIENT_PERIOD)
        self.background_panel = _Panel(MENU_PANEL_COLOR)
        self.title_label = _Label(
            game.window_title, TITLE_TEXT_SIZE, self.title_gradient.current_color()
        )
        self.play_button = _menu_button("Play")
        self.map_maker_button = _menu_button("Map Maker")
        self.settings_button = _menu_button("Settings")
        self.about_button = _menu_button("About", lambda: game.switch_scene("about_menu"))
        self.quit_button = _menu_button("Quit", game.close)
        self.widgets = [
            self.background_panel,
            self.title_label,
            self.play_button,
            self.map_maker_button,
            self.settings_button,
            self.about_button,
            self.quit_button,
        ]
        self._f3_held = 0.0

    @property
    def buttons(self) -> tuple[_Button, ...]:
        return (
            self.play_button,
            self.map_maker_button,
            self.settings_button,
            self.about_button,
            self.quit_button,
        )

    def start(self) -> None:
        self._f3_held = 0.0
        super().start()

    def handle_event(self, event: Any) -> None:
        if _is_resize(event):
            self.title_label.text_size = self._scaled(TITLE_TEXT_SIZE)
            for button in self.buttons:
                button.text_size = self._scaled(MENU_BUTTON_TEXT_SIZE)

    def update(self, delta_time: float) -> None:
        self.title_gradient.update(delta_time)
        self.title_label.color = self.title_gradient.current_color()

    def late_update(self, delta_time: float) -> None:
        self._f3_held += delta_time
        if not self.game.input_state.is_pressed(F3):
            self._f3_held = 0.0
        if self._f3_held > F3_HOLD_TIME:
            self.game.switch_scene("debug_menu")


class AboutScene(Scene):
    """A page describing the game, with a button back to the menu."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.background_color = Color.BLACK
        self.title_gradient = MovingGradient(_GRADIENT_PERIOD)
        self.background_panel = _Panel(MENU_PANEL_COLOR)
        self.title_label = _Label("About", 42, self.title_gradient.current_color())
        self.description_label = _Label(
            "Shooter game is a multiplayer and moddable game\n"
            "write creative stuff here",
            25,
        )
        self.credits_label = _Label(
            "Programming: the Shooter Game team\n"
            "Artwork: the Shooter Game team\n"
            "Music & SFX: the Shooter Game team",
            18,
        )
        self.back_button = _menu_button("Back", lambda: game.switch_scene("main_menu"))
        self.widgets = [
            self.background_panel,
            self.title_label,
            self.description_label,
            self.credits_label,
            self.back_button,
        ]

    def handle_event(self, event: Any) -> None:
        if _is_resize(event):
            self.title_label.text_size = self._scaled(TITLE_TEXT_SIZE)
            self.description_label.text_size = self._scaled(25)
            self.credits_label.text_size = self._scaled(18)
            self.back_button.text_size = self._scaled(MENU_BUTTON_TEXT_SIZE)

    def update(self, delta_time: float) -> None:
        self.title_gradient.update(delta_time)
        self.title_label.color = self.title_gradient.current_color()


class DebugScene(Scene):
    """A test ground with two players; holding F3 returns to the main menu."""

    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self.background_color = Color.CYAN
        self.welcome_label = _Label(
            "Welcome to the debug menu!\nVarious test will go here\n", 18
        )
        self.draw_colliders_toggle = _Toggle("Draw colliders", False)
        self.widgets = [self.welcome_label, self.draw_colliders_toggle]
        self._f3_held = 0.0

    def start(self) -> None:
        self._f3_held = 0.0
        super().start()
        manager = self.game.game_manager
        manager.add_entity(Player(manager, True, self.game.input_state))
        manager.add_entity(Player(manager, False, self.game.input_state))
        manager.move_new_entities()
        entities = manager.entities
        entities[0].position = Vec2(100, 100)
        entities[1].position = Vec2(300, 300)
        manager.start()

    def handle_event(self, event: Any) -> None:
        if _is_resize(event):
            self.welcome_label.text_size = self._scaled(18)
        self.game.game_manager.handle_event(event)

    def update(self, delta_time: float) -> None:
        pressed = self.game.input_state.is_pressed(F3)
        self._f3_held += delta_time
        if not pressed:
            self._f3_held = 0.0
        if pressed and self._f3_held > F3_HOLD_TIME:
            self.game.switch_scene("main_menu")
        self.game.game_manager.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        self.game.game_manager.late_update(delta_time)

    def render(self, target: Any) -> None:
        self.game.game_manager.render(target, self.draw_colliders_toggle.down)

    def destroy(self) -> None:
        super().destroy()
        self.game.game_manager.destroy()