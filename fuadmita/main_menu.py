"""The main menu page shown at start-up."""

from __future__ import annotations

from typing import Optional

from .about_page import AboutPage
from .canvas import CANVAS_SIZE, TextStyle
from .game_page import GamePage
from .page import Page
from .ui import UIElement

BACKGROUND = "Futon_Room.png"
BUTTON_BACKGROUND = "fuad.png"
TEXT_COLOR = (50, 50, 50, 255)
BUTTON_TEXT_COLOR = (0, 0, 255)


class MainMenuPage(Page):
    """A background, a line of text and a button that opens the game."""

    text_aku: Optional[UIElement] = None

    def start(self) -> None:
        width, height = CANVAS_SIZE
        self.ui.add_image(0, 0, width, height, True, BACKGROUND)
        self.text_aku = self.ui.add_text(
            10, 20, "Abcasdsadasdasd", TextStyle.NORMAL, 16, TEXT_COLOR
        )
        self.ui.add_button(
            20, 50, 100, 50, "Pencet aku", 18, BUTTON_TEXT_COLOR, BUTTON_BACKGROUND, self.open_game
        )

    def _manager(self):
        if self.page_manager is None:
            raise RuntimeError("page is not attached to a page manager")
        return self.page_manager

    def open_game(self) -> None:
        self._manager().go_to(GamePage())

    def open_about(self) -> None:
        self._manager().go_to(AboutPage())