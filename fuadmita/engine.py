"""The game window and main loop."""

from __future__ import annotations

import time
from typing import Optional

import pygame

from .assets import Assets
from .canvas import CANVAS_SIZE, Canvas
from .page import Page
from .page_manager import PageManager
from .ui import Cursor, InputState

WINDOW_SIZE = CANVAS_SIZE
WINDOW_TITLE = "Fuad dan Mita"
FRAME_BUDGET_MS = 8
FPS_FONT_SIZE = 30
FPS_COLOR = (255, 0, 0)

_SYSTEM_CURSORS = {
    Cursor.ARROW: pygame.SYSTEM_CURSOR_ARROW,
    Cursor.HAND: pygame.SYSTEM_CURSOR_HAND,
}


class Engine:
    """Owns the output surface and page manager; ``run`` opens the window."""

    def __init__(self, assets: Optional[Assets] = None) -> None:
        self.assets = assets if assets is not None else Assets()
        self.render_surface = pygame.Surface(WINDOW_SIZE, pygame.SRCALPHA)
        self.page_manager = PageManager(Canvas(self.assets, self.render_surface))
        self.running = False

    def step(self, inputs: Optional[InputState] = None) -> pygame.Surface:
        """Advance one frame and return the composed picture."""
        self.page_manager.update(inputs if inputs is not None else InputState())
        return self.page_manager.canvas.get_texture()

    def run(self, first_page: Optional[Page] = None) -> None:
        """Open the window and loop until it is closed."""
        pygame.init()
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            if first_page is not None:
                self.page_manager.go_to(first_page)
            fps_font = self.assets.font(True, FPS_FONT_SIZE)
            fps_text = ""
            frames = 0
            fps_started = time.monotonic()
            shown_cursor: Optional[Cursor] = None
            self.running = True
            while self.running:
                frame_started = time.monotonic()
                if frame_started - fps_started >= 1.0:
                    fps_text = str(frames)
                    frames = 0
                    fps_started = frame_started

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                if not self.running:
                    break

                frame = self.step(_poll_inputs())
                cursor = self.page_manager.cursor
                if cursor is not shown_cursor:
                    _apply_cursor(cursor)
                    shown_cursor = cursor

                window.fill((0, 0, 0))
                window.blit(frame, (0, 0))
                if fps_text:
                    window.blit(fps_font.render(fps_text, True, FPS_COLOR), (0, 0))
                pygame.display.flip()
                frames += 1

                elapsed_ms = (time.monotonic() - frame_started) * 1000
                wait_ms = max(FRAME_BUDGET_MS - elapsed_ms, 0)
                time.sleep(wait_ms / 1000)
        finally:
            self.running = False
            pygame.quit()


def _poll_inputs() -> InputState:
    keys = pygame.key.get_pressed()
    return InputState(
        mouse=pygame.mouse.get_pos(),
        mouse_pressed=bool(pygame.mouse.get_pressed()[0]),
        enter_pressed=bool(keys[pygame.K_RETURN]),
    )


def _apply_cursor(cursor: Cursor) -> None:
    try:
        pygame.mouse.set_system_cursor(_SYSTEM_CURSORS[cursor])
    except pygame.error:
        pass