"""Runs story scenes: backgrounds, queued dialogs, music and scene transitions."""

from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import pygame

from .assets import Assets
from .canvas import CANVAS_SIZE, Canvas, TextStyle
from .scene import Scene
from .ui import UI, InputState

logger = logging.getLogger(__name__)

TRANSITION_STEP = 0.025
_STEPS_PER_PHASE = 40

NAMETAG_IMAGE = "nametag.png"
ARROW_IMAGE = "arrow_dialog.png"
WHITE = (255, 255, 255)
DIALOG_BOX_COLOR = (0, 0, 0, 150)
PERSON_ANIM_STEP = 0.05


def _alpha(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass
class Dialog:
    """One line of dialog, or a question with up to four answers."""

    is_left: bool
    name: str
    message: str
    image_path: str
    is_question: bool = False
    questions: tuple[str, ...] = ()
    on_finished: Optional[Callable[[], None]] = None


class SceneManagerState(enum.Enum):
    EMPTY = 0
    NAVIGATING = 1
    TALKING = 2
    REST = 3


class AudioPlayer:
    """Plays one music track at a time and any number of sound effects."""

    def __init__(self, assets: Assets) -> None:
        self.assets = assets
        self.music: Optional[Path] = None
        self.sounds: list[pygame.mixer.Sound] = []

    @staticmethod
    def _ensure_mixer() -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()

    def play_music(self, path: str) -> None:
        """Replace the current music with the file ``path``."""
        full_path = self.assets.path(path)
        if not full_path.is_file():
            raise FileNotFoundError(f"music not found: {full_path}")
        self.stop_music()
        self._ensure_mixer()
        pygame.mixer.music.load(str(full_path))
        pygame.mixer.music.play()
        self.music = full_path

    def stop_music(self) -> None:
        if self.music is None:
            return
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()
        self.music = None

    def play_sound(self, path: str) -> None:
        """Start a sound effect; a missing file is logged and skipped."""
        full_path = self.assets.path(path)
        if not full_path.is_file():
            logger.error("failed to load sound file: %s", path)
            return
        self._ensure_mixer()
        sound = pygame.mixer.Sound(str(full_path))
        sound.play()
        self.sounds.append(sound)

    def prune(self) -> None:
        """Forget sound effects that have finished playing."""
        self.sounds = [sound for sound in self.sounds if sound.get_num_channels() > 0]


class SceneManager:
    """Drives the active scene, its dialogs and fades between scenes."""

    def __init__(self, canvas: Canvas, audio: Optional[AudioPlayer] = None) -> None:
        self.canvas = canvas
        self.audio = audio if audio is not None else AudioPlayer(canvas.assets)
        self.state = SceneManagerState.EMPTY
        self.current_scene: Optional[Scene] = None
        self.pending_scene: Optional[Scene] = None
        self.is_transitioning = False
        self.pending_has_entered = False
        self._transition_steps = 0
        self.background: Optional[pygame.Surface] = None
        self.dialog_queue: deque[Dialog] = deque()
        self.dialog_enter_key_pressed = False
        self._reset_dialog()

    @property
    def transition_progress(self) -> float:
        """0 to 1 while fading out the old scene, 1 to 2 while fading in the new one."""
        return self._transition_steps * TRANSITION_STEP

    def _reset_dialog(self) -> None:
        self.dialog_person_anim_progress = 0.0
        self.dialog_person_anim_progress_step = PERSON_ANIM_STEP
        self.dialog_text_progress = -1
        self.dialog_text_progress_max = -1
        self.dialog_text_wait_time = 4
        self.dialog_arrow_x_modifier = 0.0
        self.dialog_arrow_x_modifier_reverse = False

    def go_to(self, scene: Scene) -> None:
        """Show ``scene``: at once if none is shown yet, else after a transition."""
        assets = self.canvas.assets
        scene.scene_manager = self
        scene.canvas = Canvas(assets)
        scene.ui = UI(Canvas(assets))
        if self.current_scene is None:
            self.current_scene = scene
            scene.start()
            return
        self.is_transitioning = True
        self.pending_scene = scene
        self._transition_steps = 0

    def set_background(self, file_path: str) -> None:
        """Use an image as the background; a missing file leaves an empty one."""
        try:
            self.background = self.canvas.assets.texture(file_path)
        except (FileNotFoundError, pygame.error):
            logger.error("failed to load background file, file path: %s", file_path)
            self.background = pygame.Surface((0, 0), pygame.SRCALPHA)

    def add_dialog(self, is_left, name, message, image_path, on_finished=None) -> None:
        self.dialog_queue.append(
            Dialog(
                is_left=is_left,
                name=name,
                message=message,
                image_path=image_path,
                on_finished=on_finished,
            )
        )

    def add_question(
        self, is_left, name, message, question1, question2, question3, question4, image_path
    ) -> None:
        self.dialog_queue.append(
            Dialog(
                is_left=is_left,
                name=name,
                message=message,
                image_path=image_path,
                is_question=True,
                questions=(question1, question2, question3, question4),
            )
        )

    def play_music(self, file_path: str) -> None:
        self.audio.play_music(file_path)

    def play_sound(self, file_path: str) -> None:
        self.audio.play_sound(file_path)

    def stop_music(self) -> None:
        self.audio.stop_music()

    def update(self, inputs: Optional[InputState] = None) -> None:
        """Advance one frame."""
        inputs = inputs if inputs is not None else InputState()
        self.audio.prune()
        if self.is_transitioning:
            self._update_transition()
            self._transition_steps += 1
        else:
            self._update_current(inputs)

    def _update_transition(self) -> None:
        steps = self._transition_steps
        progress = steps / _STEPS_PER_PHASE
        width, height = CANVAS_SIZE
        if steps <= _STEPS_PER_PHASE:
            self.canvas.clear()
            self.canvas.copy_from(self.current_scene.canvas)
            self.canvas.draw_rect(0, 0, width, height, (0, 0, 0, _alpha(255 * progress)))
            self.canvas.update()
        elif steps <= 2 * _STEPS_PER_PHASE:
            pending = self.pending_scene
            if not self.pending_has_entered:
                pending.start()
                self.pending_has_entered = True
            self.canvas.clear()
            if self.background is not None:
                pending.canvas.draw_texture(0, 0, self.background)
            pending.update()
            pending.canvas.update()
            self.canvas.copy_from(pending.canvas)
            alpha = _alpha(255 - (progress - 1.0) * 255)
            self.canvas.draw_rect(0, 0, width, height, (0, 0, 0, alpha))
            self.canvas.update()
        else:
            self.current_scene.destroy()
            self.is_transitioning = False
            self.current_scene = self.pending_scene
            self.pending_scene = None
            self.pending_has_entered = False

    def _update_current(self, inputs: InputState) -> None:
        scene = self.current_scene
        if scene is None:
            raise RuntimeError("no scene to show; call go_to first")
        self.canvas.clear()
        scene.canvas.clear()
        if self.background is not None:
            scene.canvas.draw_texture(0, 0, self.background)
        scene.update()
        scene.ui.hit_test(inputs)
        if scene.ui.is_dirty:
            scene.ui.draw_all()
        scene.canvas.copy_from(scene.ui.canvas)

        if self.dialog_queue:
            if inputs.enter_pressed:
                if not self.dialog_enter_key_pressed:
                    self.dialog_enter_key_pressed = True
                    dialog = self.dialog_queue[0]
                    if dialog.on_finished is not None:
                        dialog.on_finished()
                    self.dialog_queue.popleft()
                    if not self.dialog_queue:
                        self.state = SceneManagerState.REST
                    self._reset_dialog()
            else:
                self.dialog_enter_key_pressed = False
                self.state = SceneManagerState.TALKING
                self._draw_dialog(scene.canvas)
                if self.dialog_person_anim_progress < 1.0:
                    self.dialog_person_anim_progress += self.dialog_person_anim_progress_step

        scene.canvas.update()
        self.canvas.copy_from(scene.canvas)
        self.canvas.update()

    def _draw_dialog(self, canvas: Canvas) -> None:
        dialog = self.dialog_queue[0]
        anim = self.dialog_person_anim_progress

        if self.dialog_text_progress == -1:
            self.dialog_text_progress_max = len(dialog.message)
            self.dialog_text_progress = len(dialog.message)

        person_x = int(-180 + 200 * anim) if dialog.is_left else int(700 - 200 * anim)
        canvas.draw_image(person_x, 80, dialog.image_path)

        nametag_x = 752 if dialog.is_left else 46
        modifier_y = int(100 * min(anim * 2.0, 1.0))

        canvas.draw_rect(48, 480 - modifier_y, 904, 144, DIALOG_BOX_COLOR)
        canvas.draw_image(nametag_x, 345, NAMETAG_IMAGE)
        canvas.draw_text(nametag_x + 14, 350, dialog.name, TextStyle.BOLD, 20, WHITE)

        if anim >= 0.8:
            shown = dialog.message[: self.dialog_text_progress_max - self.dialog_text_progress]
            canvas.draw_text(72, 504 - modifier_y, shown, TextStyle.NORMAL, 24, WHITE)
            if self.dialog_text_wait_time > 3:
                self.dialog_text_progress = max(self.dialog_text_progress - 2, 0)
                self.dialog_text_wait_time = 0
            else:
                self.dialog_text_wait_time += 1

        if anim >= 1.0:
            if self.dialog_arrow_x_modifier >= 10.0:
                self.dialog_arrow_x_modifier_reverse = True
            elif self.dialog_arrow_x_modifier <= -10.0:
                self.dialog_arrow_x_modifier_reverse = False
            self.dialog_arrow_x_modifier += -1.0 if self.dialog_arrow_x_modifier_reverse else 1.0
            canvas.draw_image(int(918 + self.dialog_arrow_x_modifier), 500, ARROW_IMAGE)

    def destroy(self) -> None:
        """Tear down the current scene, background, queued dialogs and music."""
        if self.current_scene is not None:
            self.current_scene.destroy()
            self.current_scene = None
        self.background = None
        self.dialog_queue.clear()
        self.stop_music()