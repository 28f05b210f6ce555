"""Top-level game loop control and scenes."""

from __future__ import annotations

import abc


class Scene(abc.ABC):
    """One state of the game, such as a title screen or play."""

    def on_enter(self, game: Game) -> None:
        """Called when the scene becomes current."""

    def on_exit(self, game: Game) -> None:
        """Called when the scene stops being current."""

    @abc.abstractmethod
    def update(self, delta_time: float, game: Game) -> None:
        """Advance the scene by one frame."""

    @abc.abstractmethod
    def draw(self, game: Game) -> None:
        """Render the scene."""


class Game:
    """Owns the current scene and forwards the frame to it."""

    def __init__(self, initial_scene: Scene | None = None) -> None:
        self._scene: Scene | None = None
        self.change_scene(initial_scene)

    @property
    def current_scene(self) -> Scene | None:
        return self._scene

    def update(self, delta_time: float) -> None:
        if self._scene is not None:
            self._scene.update(delta_time, self)

    def draw(self) -> None:
        if self._scene is not None:
            self._scene.draw(self)

    def change_scene(self, new_scene: Scene | None) -> None:
        """Exit the current scene and enter the new one."""
        if self._scene is not None:
            self._scene.on_exit(self)
        self._scene = new_scene
        if self._scene is not None:
            self._scene.on_enter(self)