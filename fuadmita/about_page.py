"""The about page."""

from __future__ import annotations

from .canvas import CANVAS_SIZE, TextStyle
from .page import Page

BACKGROUND = "emoji.png"
WHITE = (255, 255, 255)


class AboutPage(Page):
    """A full-page picture with a heading."""

    def start(self) -> None:
        width, height = CANVAS_SIZE
        self.ui.add_image(0, 0, width, height, True, BACKGROUND)
        self.ui.add_text(50, 10, "About", TextStyle.NORMAL, 24, WHITE)