"""Retained-mode UI: a list of elements drawn onto a canvas, with button hit testing."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import pygame

from .canvas import Canvas, TextAlignment, TextStyle

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_BACKGROUND = "emoji2.png"


class Cursor(enum.Enum):
    ARROW = "arrow"
    HAND = "hand"


@dataclass
class InputState:
    """Snapshot of the input devices for one frame."""

    mouse: tuple[int, int] = (-1, -1)
    mouse_pressed: bool = False
    enter_pressed: bool = False


class UIElementType(enum.Enum):
    TEXT = 0
    BUTTON = 1
    RECTANGLE = 2
    IMAGE = 3


@dataclass
class TextElement:
    x: int
    y: int
    text: str
    style: TextStyle
    font_size: int
    color: Any


@dataclass
class ButtonElement:
    x: int
    y: int
    width: int
    height: int
    text: str
    font_size: int
    text_color: Any
    background: pygame.Surface
    on_click: Optional[Callable[[], None]] = None


@dataclass
class RectangleElement:
    x: int
    y: int
    width: int
    height: int
    color: Any


@dataclass
class ImageElement:
    x: int
    y: int
    width: int
    height: int
    image: pygame.Surface
    stretch: bool


@dataclass
class UIElement:
    id: int
    type: UIElementType
    properties: Any = field(repr=False)


class UI:
    """Holds UI elements and redraws them onto its canvas when dirty."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.canvas.clear()
        self.canvas.update()
        self.elements: list[UIElement] = []
        self.is_dirty = False
        self.requires_copy = False
        self.is_mouse_down = False
        self.is_hovering_button = False
        self.cursor = Cursor.ARROW

    def _add(self, kind: UIElementType, properties: Any, insert_after: Optional[UIElement]) -> UIElement:
        element = UIElement(id=random.randint(0, 1_000_000), type=kind, properties=properties)
        if insert_after is None:
            self.elements.append(element)
        else:
            position = next(
                (index for index, item in enumerate(self.elements) if item.id == insert_after.id),
                None,
            )
            if position is None:
                logger.warning(
                    "insert_after element is not in this UI; appending the new element at the end"
                )
                self.elements.append(element)
            else:
                self.elements.insert(position + 1, element)
        self.is_dirty = True
        return element

    def add_text(self, x, y, text, style, font_size, color, insert_after=None) -> UIElement:
        return self._add(
            UIElementType.TEXT, TextElement(x, y, text, style, font_size, color), insert_after
        )

    def add_button(
        self,
        x,
        y,
        width,
        height,
        text,
        font_size,
        text_color,
        background_path="",
        on_click=None,
        insert_after=None,
    ) -> UIElement:
        background = self.canvas.assets.texture(background_path or DEFAULT_BUTTON_BACKGROUND)
        button = ButtonElement(x, y, width, height, text, font_size, text_color, background, on_click)
        return self._add(UIElementType.BUTTON, button, insert_after)

    def add_rectangle(self, x, y, width, height, color, insert_after=None) -> UIElement:
        return self._add(
            UIElementType.RECTANGLE, RectangleElement(x, y, width, height, color), insert_after
        )

    def add_image(self, x, y, width, height, stretch, image_path="", insert_after=None) -> UIElement:
        image = pygame.Surface((0, 0), pygame.SRCALPHA)
        if image_path:
            try:
                image = self.canvas.assets.texture(image_path)
            except (FileNotFoundError, pygame.error) as exc:
                logger.error("failed to load image %s: %s", image_path, exc)
        return self._add(
            UIElementType.IMAGE, ImageElement(x, y, width, height, image, stretch), insert_after
        )

    def copy_canvas_to_image(self, image: ImageElement, source: Canvas) -> None:
        image.image = source.get_texture()
        self.is_dirty = True

    def request_update(self) -> None:
        self.is_dirty = True

    def draw_all(self) -> None:
        """Redraw every element onto the canvas in list order."""
        canvas = self.canvas
        canvas.clear()
        for element in self.elements:
            props = element.properties
            if element.type is UIElementType.TEXT:
                canvas.draw_text(props.x, props.y, props.text, props.style, props.font_size, props.color)
            elif element.type is UIElementType.BUTTON:
                canvas.draw_texture_in_box(
                    props.x, props.y, props.width, props.height, True, props.background
                )
                canvas.draw_text_in_box(
                    props.x,
                    props.y,
                    props.width,
                    props.height,
                    props.text,
                    TextStyle.BOLD,
                    TextAlignment.CENTER,
                    props.font_size,
                    props.text_color,
                )
            elif element.type is UIElementType.RECTANGLE:
                canvas.draw_rect(props.x, props.y, props.width, props.height, props.color)
            elif element.type is UIElementType.IMAGE:
                canvas.draw_texture_in_box(
                    props.x, props.y, props.width, props.height, props.stretch, props.image
                )
        canvas.update()
        self.is_dirty = False
        self.requires_copy = True

    def hit_test(self, inputs: InputState) -> None:
        """Fire button clicks on press and switch the cursor while over a button."""
        mouse_x, mouse_y = inputs.mouse
        hovering = False
        for element in tuple(self.elements):
            if element.type is not UIElementType.BUTTON:
                continue
            button = element.properties
            inside = (
                button.x <= mouse_x <= button.x + button.width
                and button.y <= mouse_y <= button.y + button.height
            )
            if not inside:
                continue
            hovering = True
            if inputs.mouse_pressed:
                if not self.is_mouse_down:
                    self.is_mouse_down = True
                    if button.on_click is not None:
                        button.on_click()
            else:
                self.is_mouse_down = False

        if not self.is_hovering_button and hovering:
            self.cursor = Cursor.HAND
            self.is_hovering_button = True
        elif self.is_hovering_button and not hovering:
            self.cursor = Cursor.ARROW
            self.is_hovering_button = False

    def reset_cursor(self) -> None:
        self.cursor = Cursor.ARROW