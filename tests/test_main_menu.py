import shutil
from pathlib import Path

import pygame
import pytest

from fuadmita.about_page import AboutPage
from fuadmita.assets import Assets
from fuadmita.canvas import Canvas
from fuadmita.game_page import GamePage
from fuadmita.main_menu import MainMenuPage
from fuadmita.page_manager import PageManager
from fuadmita.ui import InputState, UIElementType


@pytest.fixture
def manager(tmp_path):
    font_src = Path(pygame.__file__).parent / pygame.font.get_default_font()
    for name in ("Roboto-Regular.ttf", "Roboto-SemiBold.ttf"):
        shutil.copy(font_src, tmp_path / name)
    for name in ("Futon_Room.png", "fuad.png"):
        surface = pygame.Surface((40, 30), pygame.SRCALPHA)
        surface.fill((10, 20, 30, 255))
        pygame.image.save(surface, str(tmp_path / name))
    return PageManager(Canvas(Assets(tmp_path)))


def test_start_builds_menu(manager):
    page = MainMenuPage()
    manager.go_to(page)
    assert [e.type for e in page.ui.elements] == [
        UIElementType.IMAGE,
        UIElementType.TEXT,
        UIElementType.BUTTON,
    ]
    assert page.text_aku.properties.text == "Abcasdsadasdasd"
    button = page.ui.elements[2].properties
    assert button.text == "Pencet aku"
    assert (button.x, button.y, button.width, button.height) == (20, 50, 100, 50)
    assert button.on_click == page.open_game


def test_open_game_starts_transition(manager):
    page = MainMenuPage()
    manager.go_to(page)
    page.open_game()
    assert manager.is_transitioning
    assert isinstance(manager.pending_page, GamePage)


def test_open_about_starts_transition(manager):
    page = MainMenuPage()
    manager.go_to(page)
    page.open_about()
    assert manager.is_transitioning is True
    assert manager.current_page is page
    assert isinstance(manager.pending_page, AboutPage)
    assert manager.pending_page.page_manager is manager


def test_clicking_button_opens_game(manager):
    page = MainMenuPage()
    manager.go_to(page)
    manager.update(InputState(mouse=(30, 60), mouse_pressed=True))
    assert isinstance(manager.pending_page, GamePage)
    assert manager.current_page is page


def test_open_game_without_manager_raises():
    with pytest.raises(RuntimeError):
        MainMenuPage().open_game()