import pygame
import pytest

from fuadmita.assets import Assets
from fuadmita.canvas import Canvas
from fuadmita.scene_2 import BACKGROUND, MUSIC, Scene2
from fuadmita.scene_manager import SceneManager


class FakeAudio:
    def __init__(self):
        self.music = []
        self.stopped = 0
        self.sounds = []

    def play_music(self, path):
        self.music.append(path)

    def stop_music(self):
        self.stopped += 1

    def play_sound(self, path):
        self.sounds.append(path)

    def prune(self):
        pass


@pytest.fixture
def assets(tmp_path):
    surface = pygame.Surface((1000, 550), pygame.SRCALPHA)
    surface.fill((10, 20, 30, 255))
    pygame.image.save(surface, str(tmp_path / BACKGROUND))
    return Assets(tmp_path)


def test_start_queues_two_dialogs_in_order(assets):
    manager = SceneManager(Canvas(assets), FakeAudio())
    manager.go_to(Scene2())
    assert [d.name for d in manager.dialog_queue] == ["Mita", "Fuad"]
    assert [d.is_left for d in manager.dialog_queue] == [False, True]
    assert [d.image_path for d in manager.dialog_queue] == ["mita.png", "fuad.png"]
    assert manager.dialog_queue[0].message == "Hai! Apa kabar!"


def test_start_sets_background_and_music(assets):
    audio = FakeAudio()
    manager = SceneManager(Canvas(assets), audio)
    manager.go_to(Scene2())
    assert audio.music == [MUSIC]
    assert manager.background.get_size() == (1000, 550)


def test_dialogs_have_no_finish_callback(assets):
    manager = SceneManager(Canvas(assets), FakeAudio())
    manager.go_to(Scene2())
    assert all(d.on_finished is None for d in manager.dialog_queue)


def test_start_without_manager_raises():
    with pytest.raises(RuntimeError):
        Scene2().start()