"""The opening scene in Fuad's room."""

from __future__ import annotations

from .scene import Scene
from .scene_2 import Scene2

BACKGROUND = "Futon_Room.png"
MUSIC = "Morning.mp3"


class Scene1(Scene):
    """Fuad says a line, then the story moves on to the restaurant."""

    def _manager(self):
        if self.scene_manager is None:
            raise RuntimeError("scene is not attached to a scene manager")
        return self.scene_manager

    def start(self) -> None:
        manager = self._manager()
        manager.set_background(BACKGROUND)
        manager.add_dialog(True, "Fuad", "asdasdasdasdasd", "fuad.png", self.on_dialog_finished)
        manager.play_music(MUSIC)

    def on_dialog_finished(self) -> None:
        """Move on to the next scene."""
        self._manager().go_to(Scene2())