"""Locating and loading the game's asset files (fonts and images)."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame

ASSET_DIR_ENV = "FUADMITA_ASSETS"
REGULAR_FONT = "Roboto-Regular.ttf"
BOLD_FONT = "Roboto-SemiBold.ttf"


def default_asset_dir() -> Path:
    """Return the asset directory: $FUADMITA_ASSETS, else the program's own directory."""
    configured = os.environ.get(ASSET_DIR_ENV)
    if configured:
        return Path(configured)
    return Path(sys.argv[0] if sys.argv else "").resolve().parent


class Assets:
    """Resolves asset names against a root directory and loads them."""

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        self.root = Path(root) if root is not None else default_asset_dir()
        self._fonts: dict[tuple[bool, int], pygame.font.Font] = {}

    def path(self, name: str) -> Path:
        """Full path of the asset called ``name``."""
        return self.root / name

    def font(self, bold: bool, size: int) -> pygame.font.Font:
        """The regular or semi-bold font at ``size`` points, loaded once."""
        key = (bool(bold), int(size))
        cached = self._fonts.get(key)
        if cached is not None:
            return cached
        font_path = self.path(BOLD_FONT if bold else REGULAR_FONT)
        if not font_path.is_file():
            raise FileNotFoundError(f"font not found: {font_path}")
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(str(font_path), key[1])
        self._fonts[key] = font
        return font

    def texture(self, name: str) -> pygame.Surface:
        """Load the image ``name`` as a surface."""
        image_path = self.path(name)
        if not image_path.is_file():
            raise FileNotFoundError(f"image not found: {image_path}")
        return pygame.image.load(str(image_path))