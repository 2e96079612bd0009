"""The game: its scenes, its entity manager and its frame loop."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from shootergame.color import Color
from shootergame.entity import InputState
from shootergame.game_manager import GameManager
from shootergame.scenes import (
    RESIZED,
    AboutScene,
    DebugScene,
    MainMenuScene,
    Scene,
    SceneManager,
)
from shootergame.vector import Vec2

_MAX_FPS_LIMIT = 0xFFFF


@dataclass(frozen=True)
class Viewport:
    """The drawn area, as fractions of the window, and its size in pixels."""

    left: float
    top: float
    width: float
    height: float
    size: Vec2


def compute_viewport(width: float, height: float, aspect_ratio: float) -> Viewport:
    """Fit a view of the given aspect ratio into the window, adding black bars."""
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    if aspect_ratio <= 0:
        raise ValueError("aspect ratio must be positive")
    area_based_on_width = width * width / aspect_ratio
    area_based_on_height = height * height * aspect_ratio
    if area_based_on_width < area_based_on_height:
        camera = (width / aspect_ratio) / height
        border = 1 - camera
        return Viewport(0.0, border / 2, 1.0, 1 - border, Vec2(width, height * camera))
    camera = (height * aspect_ratio) / width
    border = 1 - camera
    return Viewport(border / 2, 0.0, 1 - border, 1.0, Vec2(width * camera, height))


@dataclass(frozen=True)
class _ResizeEvent:
    width: int
    height: int
    type: str = RESIZED


class _FrameTarget:
    def __init__(self) -> None:
        self.drawn: list[Any] = []

    def draw(self, drawable: Any) -> None:
        self.drawn.append(drawable)


class Game:
    """Owns the scenes and the entity manager and advances them frame by frame."""

    WINDOW_TITLE = "Shooter Game 2"
    INITIAL_WINDOW_SIZE = Vec2(1280, 720)
    MIN_WINDOW_SIZE = Vec2(1024, 576)
    TARGET_ASPECT_RATIO = 16.0 / 9.0
    VERSION = (0, 1, 0)

    def __init__(self, max_fps: int = 0) -> None:
        self.window_title = self.WINDOW_TITLE
        self.is_open = True
        self.gui: list[Any] = []
        self.input_state = InputState()
        self.game_manager = GameManager()
        self.game_manager.parent = self
        self.viewport = Viewport(0.0, 0.0, 1.0, 1.0, self.INITIAL_WINDOW_SIZE)
        self.viewport_size = self.INITIAL_WINDOW_SIZE
        self.delta_time = 0.0
        self.clear_color = Color.BLACK
        self.last_frame: tuple[Any, ...] = ()
        self._accumulated = 0.0
        self._max_fps = 0
        self.max_fps = max_fps

        self.current_scene: Optional[Scene] = None
        self.scene_manager = SceneManager()
        self.scene_manager.add("main_menu", MainMenuScene(self))
        self.scene_manager.add("about_menu", AboutScene(self))
        self.scene_manager.add("debug_menu", DebugScene(self))
        self.switch_scene("main_menu")

    @property
    def max_fps(self) -> int:
        """Fixed update rate; zero means one update per advance."""
        return self._max_fps

    @max_fps.setter
    def max_fps(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("max_fps must be an integer")
        if not 0 <= value <= _MAX_FPS_LIMIT:
            raise ValueError(f"max_fps out of range: {value}")
        self._max_fps = value

    def switch_scene(self, name: str) -> None:
        self.scene_manager.set_active(name)
        self.current_scene = self.scene_manager.active

    def resize(self, width: int, height: int) -> Viewport:
        """Adapt the viewport to a new window size and tell the active scene."""
        viewport = compute_viewport(width, height, self.TARGET_ASPECT_RATIO)
        self.viewport = viewport
        self.viewport_size = viewport.size
        self.scene_manager.handle_event(_ResizeEvent(width, height))
        return viewport

    def scale_percentage(self) -> float:
        """Interface scale: square root of the viewport's area over the initial area."""
        initial = self.INITIAL_WINDOW_SIZE
        return math.sqrt(
            (self.viewport_size.x * self.viewport_size.y) / (initial.x * initial.y)
        )

    def _step(self, delta_time: float) -> None:
        self.scene_manager.update(delta_time)
        if self.current_scene is not None:
            self.current_scene.late_update(delta_time)

    def _render(self) -> None:
        target = _FrameTarget()
        if self.current_scene is not None:
            self.clear_color = self.current_scene.background_color
        self.scene_manager.render(target)
        self.last_frame = tuple(target.drawn)

    def advance(self, elapsed: float) -> int:
        """Run the updates due after ``elapsed`` seconds, then render; return the update count."""
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        if not self.is_open:
            return 0
        if self._max_fps == 0:
            self.delta_time = elapsed
            self._step(elapsed)
            steps = 1
        else:
            frame_time = 1 / self._max_fps
            self.delta_time = frame_time
            self._accumulated += elapsed
            steps = 0
            while self._accumulated >= frame_time:
                self._step(frame_time)
                self._accumulated -= frame_time
                steps += 1
        if self.is_open:
            self._render()
        return steps

    def close(self) -> None:
        """Tear down the active scene and the entities; further advances do nothing."""
        if not self.is_open:
            return
        if self.current_scene is not None:
            self.current_scene.destroy()
        self.game_manager.destroy()
        self.is_open = False