import pygame
import pytest

from fuadmita.assets import Assets
from fuadmita.canvas import Canvas
from fuadmita.page import Page
from fuadmita.page_manager import PageManager
from fuadmita.ui import UI, Cursor, InputState

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


class RecordingPage(Page):
    def __init__(self, color=RED):
        super().__init__()
        self.color = color
        self.events = []

    def start(self):
        self.events.append("start")
        self.ui.add_rectangle(0, 0, 1000, 550, self.color)

    def update(self):
        self.events.append("update")

    def destroy(self):
        self.events.append("destroy")
        super().destroy()


@pytest.fixture
def manager(tmp_path):
    return PageManager(Canvas(Assets(tmp_path)))


def _pixel(manager, pos=(10, 10)):
    return tuple(manager.canvas.get_texture().get_at(pos))


def _finish_transition(manager, limit=500):
    for _ in range(limit):
        if not manager.is_transitioning:
            return
        manager.update(InputState())
    raise AssertionError("transition never finished")


def test_first_page_starts_immediately(manager):
    page = RecordingPage()
    manager.go_to(page)
    assert manager.current_page is page
    assert page.events == ["start"]
    assert isinstance(page.ui, UI)
    assert page.page_manager is manager
    assert manager.is_transitioning is False


def test_update_composes_page_ui(manager):
    page = RecordingPage(RED)
    manager.go_to(page)
    manager.update(InputState())
    assert page.events == ["start", "update"]
    assert _pixel(manager) == RED
    assert page.ui.requires_copy is False


def test_update_without_page_raises(manager):
    with pytest.raises(RuntimeError):
        manager.update(InputState())


def test_second_page_waits_for_transition(manager):
    first = RecordingPage(RED)
    second = RecordingPage(GREEN)
    manager.go_to(first)
    manager.update(InputState())
    manager.go_to(second)
    assert manager.is_transitioning is True
    assert manager.pending_page is second
    assert manager.current_page is first
    assert manager.transition_progress == 0.0
    assert second.events == []
    assert second.ui is not first.ui


def test_fade_out_darkens_old_page(manager):
    first = RecordingPage(RED)
    manager.go_to(first)
    manager.update(InputState())
    manager.go_to(RecordingPage(GREEN))
    reds = []
    while manager.transition_progress <= 1.0:
        progress = manager.transition_progress
        manager.update(InputState())
        if progress > 0:
            reds.append(_pixel(manager)[0])
    assert all(red < 255 for red in reds)
    assert reds == sorted(reds, reverse=True)
    assert reds[-1] == 0
    assert manager.pending_page.events == []


def test_fade_in_brightens_new_page(manager):
    manager.go_to(RecordingPage(RED))
    manager.update(InputState())
    manager.go_to(RecordingPage(GREEN))
    greens = []
    while manager.is_transitioning:
        progress = manager.transition_progress
        manager.update(InputState())
        if 1.0 < progress <= 2.0:
            greens.append(_pixel(manager)[1])
    assert greens == sorted(greens)
    assert greens[0] < greens[-1]


def test_transition_swaps_pages(manager):
    first = RecordingPage(RED)
    second = RecordingPage(GREEN)
    manager.go_to(first)
    manager.update(InputState())
    manager.go_to(second)
    _finish_transition(manager)
    assert manager.current_page is second
    assert manager.pending_page is None
    assert manager.last_page_canvas is None
    assert manager.pending_has_entered is False
    assert first.events.count("destroy") == 1
    assert first.ui is None
    assert second.events.count("start") == 1


def test_after_transition_new_page_is_updated(manager):
    manager.go_to(RecordingPage(RED))
    manager.update(InputState())
    second = RecordingPage(GREEN)
    manager.go_to(second)
    _finish_transition(manager)
    updates = second.events.count("update")
    manager.update(InputState())
    assert second.events.count("update") == updates + 1
    assert _pixel(manager) == GREEN


def _write_button_image(tmp_path):
    pygame.image.save(pygame.Surface((4, 4)), str(tmp_path / "button.bmp"))


def test_button_click_goes_to_next_page(tmp_path, manager):
    _write_button_image(tmp_path)
    target = RecordingPage(GREEN)

    class MenuPage(Page):
        def start(self):
            self.ui.add_button(20, 50, 100, 50, "", 18, (0, 0, 255), "button.bmp",
                               lambda: self.page_manager.go_to(target))

    manager.go_to(MenuPage())
    manager.update(InputState(mouse=(30, 60), mouse_pressed=True))
    assert manager.is_transitioning is True
    assert manager.pending_page is target


def test_cursor_follows_hover_and_resets_on_transition(tmp_path, manager):
    _write_button_image(tmp_path)

    class MenuPage(Page):
        def start(self):
            self.ui.add_button(20, 50, 100, 50, "", 18, (0, 0, 255), "button.bmp")

    manager.go_to(MenuPage())
    assert manager.cursor is Cursor.ARROW
    manager.update(InputState(mouse=(30, 60)))
    assert manager.cursor is Cursor.HAND
    manager.go_to(RecordingPage())
    manager.update(InputState(mouse=(30, 60)))
    assert manager.cursor is Cursor.ARROW