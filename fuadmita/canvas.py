"""An off-screen drawing surface with a displayed front buffer."""

from __future__ import annotations

import enum

import pygame

from .assets import Assets

CANVAS_SIZE = (1000, 550)


class TextStyle(enum.Enum):
    NORMAL = 0
    BOLD = 1


class TextAlignment(enum.Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


def _empty_surface(size: tuple[int, int] = CANVAS_SIZE) -> pygame.Surface:
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


class Canvas:
    """Drawing happens on a back buffer; ``update`` makes it the visible texture."""

    def __init__(self, assets: Assets, surface: pygame.Surface | None = None) -> None:
        self.assets = assets
        self.surface = surface if surface is not None else _empty_surface()
        self._front = _empty_surface(self.surface.get_size())
        self._textures: dict[str, pygame.Surface] = {}

    def clear(self) -> None:
        self.surface.fill((0, 0, 0, 0))

    def update(self) -> None:
        """Publish what has been drawn so far as the canvas texture."""
        self._front = self.surface.copy()

    def draw_rect(self, x, y, width, height, color) -> None:
        if width <= 0 or height <= 0:
            return
        colour = pygame.Color(color)
        if colour.a == 255:
            self.surface.fill(colour, pygame.Rect(x, y, width, height))
            return
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        layer.fill(colour)
        self.surface.blit(layer, (x, y))

    def draw_circle(self, x, y, radius, color) -> None:
        if radius <= 0:
            return
        layer = pygame.Surface((2 * radius, 2 * radius), pygame.SRCALPHA)
        pygame.draw.circle(layer, pygame.Color(color), (radius, radius), radius)
        self.surface.blit(layer, (x, y))

    def _render_text(self, text: str, style: TextStyle, font_size: int, color) -> pygame.Surface:
        font = self.assets.font(style is TextStyle.BOLD, font_size)
        colour = pygame.Color(color)
        rgb = (colour.r, colour.g, colour.b)
        lines = [font.render(line, True, rgb) for line in text.split("\n")]
        width = max(line.get_width() for line in lines)
        line_height = font.get_linesize()
        height = max(line_height * (len(lines) - 1) + lines[-1].get_height(), 0)
        block = pygame.Surface((width, height), pygame.SRCALPHA)
        for index, line in enumerate(lines):
            block.blit(line, (0, index * line_height))
        if colour.a < 255:
            block.set_alpha(colour.a)
        return block

    def draw_text(self, x, y, text, style, font_size, color) -> None:
        self.surface.blit(self._render_text(text, style, font_size, color), (x, y))

    def draw_text_in_box(self, x, y, width, height, text, style, alignment, font_size, color) -> None:
        """Draw text aligned horizontally inside a box, raised around its middle."""
        block = self._render_text(text, style, font_size, color)
        text_width, text_height = block.get_size()
        pos_y = y + int(height / 2) - text_height
        if alignment is TextAlignment.LEFT:
            pos_x = x
        elif alignment is TextAlignment.CENTER:
            pos_x = x + int(width / 2) - text_width / 2
        else:
            pos_x = x + width - text_width
        self.surface.blit(block, (int(pos_x), int(pos_y)))

    def draw_texture(self, x, y, texture: pygame.Surface) -> None:
        self.surface.blit(texture, (x, y))

    def draw_texture_in_box(self, x, y, width, height, stretch, texture: pygame.Surface) -> None:
        """Draw a texture scaled to the box, or cropped to it when not stretching."""
        tex_width, tex_height = texture.get_size()
        if tex_width == 0 or tex_height == 0:
            return
        if stretch:
            if width <= 0 or height <= 0:
                return
            self.surface.blit(pygame.transform.scale(texture, (width, height)), (x, y))
        else:
            area = pygame.Rect(0, 0, max(width, 0), max(height, 0))
            self.surface.blit(texture, (x, y), area)

    def draw_image(self, x, y, file_path: str) -> None:
        """Draw an image file, keeping it loaded for later draws."""
        key = str(self.assets.path(file_path))
        texture = self._textures.get(key)
        if texture is None:
            texture = self.assets.texture(file_path)
            self._textures[key] = texture
        self.draw_texture(x, y, texture)

    def copy_from(self, source: "Canvas") -> None:
        """Draw the visible texture of ``source`` over this canvas and publish it."""
        self.surface.blit(source._front, (0, 0))
        self.update()

    def get_texture(self) -> pygame.Surface:
        return self._front.copy()