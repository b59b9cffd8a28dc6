"""Switches between pages with a fade-to-black transition."""

from __future__ import annotations

from typing import Optional

from .canvas import CANVAS_SIZE, Canvas
from .page import Page
from .ui import UI, Cursor, InputState

TRANSITION_STEP = 0.025
_STEPS_PER_PHASE = 40


def _alpha(value: float) -> int:
    return max(0, min(255, int(value)))


class PageManager:
    """Runs the active page and composes its UI onto the output canvas."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.current_page: Optional[Page] = None
        self.pending_page: Optional[Page] = None
        self.is_transitioning = False
        self.pending_has_entered = False
        self.last_page_canvas: Optional[Canvas] = None
        self._transition_steps = 0

    @property
    def transition_progress(self) -> float:
        """0 to 1 while fading out the old page, 1 to 2 while fading in the new one."""
        return self._transition_steps * TRANSITION_STEP

    @property
    def cursor(self) -> Cursor:
        """The cursor the active page asks for."""
        page = self.current_page
        if page is None or page.ui is None:
            return Cursor.ARROW
        return page.ui.cursor

    def _new_canvas(self) -> Canvas:
        return Canvas(self.canvas.assets)

    def go_to(self, page: Page) -> None:
        """Show ``page``: at once if nothing is shown yet, else after a transition."""
        page.ui = UI(self._new_canvas())
        page.page_manager = self
        if self.current_page is None:
            self.current_page = page
            page.start()
            return
        self.is_transitioning = True
        self.pending_page = page
        self._transition_steps = 0
        snapshot = self._new_canvas()
        snapshot.copy_from(self.current_page.ui.canvas)
        self.last_page_canvas = snapshot

    def update(self, inputs: Optional[InputState] = None) -> None:
        """Advance one frame."""
        inputs = inputs if inputs is not None else InputState()
        if not self.is_transitioning:
            self._update_current(inputs)
        else:
            self._update_transition()
            self._transition_steps += 1

    def _update_current(self, inputs: InputState) -> None:
        page = self.current_page
        if page is None:
            raise RuntimeError("no page to show; call go_to first")
        page.update()
        ui = page.ui
        ui.hit_test(inputs)
        if ui.is_dirty:
            ui.draw_all()
        if ui.requires_copy:
            self.canvas.clear()
            self.canvas.copy_from(ui.canvas)
            ui.requires_copy = False

    def _update_transition(self) -> None:
        steps = self._transition_steps
        progress = steps / _STEPS_PER_PHASE
        width, height = CANVAS_SIZE
        if steps == 0:
            self.current_page.ui.reset_cursor()
        elif steps <= _STEPS_PER_PHASE:
            self.canvas.clear()
            self.canvas.copy_from(self.last_page_canvas)
            self.canvas.draw_rect(0, 0, width, height, (0, 0, 0, _alpha(255 * progress)))
            self.canvas.update()
        elif steps <= 2 * _STEPS_PER_PHASE:
            pending = self.pending_page
            if not self.pending_has_entered:
                pending.start()
                self.pending_has_entered = True
            pending.update()
            if pending.ui.is_dirty:
                pending.ui.draw_all()
            self.canvas.clear()
            self.canvas.copy_from(pending.ui.canvas)
            pending.ui.requires_copy = False
            alpha = _alpha(255 - (progress - 1.0) * 255)
            self.canvas.draw_rect(0, 0, width, height, (0, 0, 0, alpha))
            self.canvas.update()
        else:
            old = self.current_page
            old.destroy()
            old.ui = None
            self.is_transitioning = False
            self.current_page = self.pending_page
            self.pending_page = None
            self.last_page_canvas = None
            self.pending_has_entered = False