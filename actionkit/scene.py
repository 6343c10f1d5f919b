"""Scenes, the scene manager and a loading scene that prepares the next one in the background."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


class Scene(ABC):
    """A game scene with a lifecycle and a ready flag set once it is initialized."""

    def __init__(self) -> None:
        self._ready = threading.Event()

    @property
    def ready(self) -> bool:
        """Whether the scene has finished preparing."""
        return self._ready.is_set()

    def set_ready(self) -> None:
        self._ready.set()

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene's resources."""

    @abstractmethod
    def finalize(self) -> None:
        """Release the scene's resources."""

    @abstractmethod
    def update(self, elapsed_time: float) -> None:
        """Advance the scene by elapsed_time seconds."""

    @abstractmethod
    def render(self) -> Any:
        """Produce this frame's drawing."""


class SceneManager:
    """Runs the current scene and switches to a requested one at the next update."""

    def __init__(self) -> None:
        self._current: Optional[Scene] = None
        self._next: Optional[Scene] = None

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._current

    def update(self, elapsed_time: float) -> None:
        if self._next is not None:
            self.clear()
            self._current = self._next
            self._next = None
            if not self._current.ready:
                self._current.initialize()

        if self._current is not None:
            self._current.update(elapsed_time)

    def render(self) -> Any:
        """Render the current scene and return what it produced, or None without one."""
        if self._current is None:
            return None
        return self._current.render()

    def clear(self) -> None:
        """Finalize and drop the current scene."""
        if self._current is not None:
            self._current.finalize()
            self._current = None

    def change_scene(self, scene: Scene) -> None:
        """Request a switch to scene; it happens at the next update."""
        self._next = scene


@dataclass(frozen=True)
class SpriteDraw:
    """Placement of a sprite on screen, in pixels, rotated by angle degrees."""

    x: float
    y: float
    width: float
    height: float
    angle: float


class LoadingScene(Scene):
    """Shows a spinning icon while the next scene initializes on a worker thread."""

    ROTATION_SPEED = 180.0

    def __init__(
        self,
        next_scene: Scene,
        manager: SceneManager,
        *,
        screen_size: tuple[float, float] = (1280.0, 720.0),
        icon_size: tuple[float, float] = (128.0, 128.0),
    ) -> None:
        super().__init__()
        self._next_scene: Optional[Scene] = next_scene
        self._manager = manager
        self.screen_size = screen_size
        self.icon_size = icon_size
        self.angle = 0.0
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[Exception] = None

    @property
    def next_scene(self) -> Optional[Scene]:
        """The scene being loaded, or None once it has been handed over."""
        return self._next_scene

    def initialize(self) -> None:
        if self._next_scene is None:
            raise RuntimeError("there is no scene left to load")
        self._thread = threading.Thread(
            target=self._load, args=(self._next_scene,), name="scene-loading", daemon=True
        )
        self._thread.start()

    def _load(self, scene: Scene) -> None:
        try:
            scene.initialize()
        except Exception as exc:
            self._error = exc
            return
        scene.set_ready()

    def finalize(self) -> None:
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def update(self, elapsed_time: float) -> None:
        self.angle += self.ROTATION_SPEED * elapsed_time

        if self._error is not None:
            raise RuntimeError("loading the next scene failed") from self._error

        if self._next_scene is not None and self._next_scene.ready:
            self._manager.change_scene(self._next_scene)
            self._next_scene = None

    def render(self) -> SpriteDraw:
        """Place the icon in the bottom-right corner at the current angle."""
        screen_width, screen_height = self.screen_size
        icon_width, icon_height = self.icon_size
        return SpriteDraw(
            x=float(screen_width - icon_width),
            y=float(screen_height - icon_height),
            width=float(icon_width),
            height=float(icon_height),
            angle=self.angle,
        )