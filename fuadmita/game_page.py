"""The page that hosts the story scenes."""

from __future__ import annotations

from typing import Optional

import pygame

from .canvas import CANVAS_SIZE, Canvas
from .page import Page
from .scene_1 import Scene1
from .scene_manager import AudioPlayer, SceneManager
from .ui import InputState, UIElement


def _poll_inputs() -> InputState:
    if not pygame.display.get_init() or pygame.display.get_surface() is None:
        return InputState()
    keys = pygame.key.get_pressed()
    return InputState(
        mouse=pygame.mouse.get_pos(),
        mouse_pressed=bool(pygame.mouse.get_pressed()[0]),
        enter_pressed=bool(keys[pygame.K_RETURN]),
    )


class GamePage(Page):
    """Runs a scene manager and shows its output as a full-page image.

    ``inputs`` may be set to feed a fixed input state; otherwise the live
    keyboard and mouse are read when a window is open.
    """

    def __init__(self, audio: Optional[AudioPlayer] = None) -> None:
        super().__init__()
        self.audio = audio
        self.scene_manager: Optional[SceneManager] = None
        self.scene_image: Optional[UIElement] = None
        self.inputs: Optional[InputState] = None

    def start(self) -> None:
        assets = self.ui.canvas.assets
        self.scene_manager = SceneManager(Canvas(assets), self.audio)
        self.scene_manager.go_to(Scene1())
        width, height = CANVAS_SIZE
        self.scene_image = self.ui.add_image(0, 0, width, height, False, "")

    def update(self) -> None:
        if self.scene_manager is None or self.scene_image is None:
            raise RuntimeError("game page has not been started")
        inputs = self.inputs if self.inputs is not None else _poll_inputs()
        self.scene_manager.update(inputs)
        self.ui.copy_canvas_to_image(self.scene_image.properties, self.scene_manager.canvas)

    def destroy(self) -> None:
        if self.scene_manager is not None:
            self.scene_manager.destroy()
            self.scene_manager = None
        self.scene_image = None
        super().destroy()