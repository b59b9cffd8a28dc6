"""The restaurant scene, where Mita and Fuad meet."""

from __future__ import annotations

from .scene import Scene

BACKGROUND = "Restaurant_A.png"
MUSIC = "Morning.mp3"


class Scene2(Scene):
    """Mita greets Fuad at the restaurant."""

    def start(self) -> None:
        manager = self.scene_manager
        if manager is None:
            raise RuntimeError("scene is not attached to a scene manager")
        manager.set_background(BACKGROUND)
        manager.add_dialog(False, "Mita", "Hai! Apa kabar!", "mita.png")
        manager.add_dialog(True, "Fuad", "Ehh.. ehhh.. Halo..", "fuad.png")
        manager.play_music(MUSIC)