"""Base class for story scenes driven by the scene manager."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .canvas import Canvas
    from .ui import UI


class Scene:
    """A scene draws onto its own canvas and owns a UI.

    The scene manager attaches ``scene_manager``, ``canvas`` and ``ui`` before
    ``start`` runs.
    """

    def __init__(self) -> None:
        self.scene_manager: Optional[Any] = None
        self.canvas: Optional["Canvas"] = None
        self.ui: Optional["UI"] = None

    def start(self) -> None:
        """Called once when the scene first becomes active."""

    def update(self) -> None:
        """Called every frame while the scene is active."""

    def destroy(self) -> None:
        """Called when the scene is replaced; releases its canvas and UI."""
        self.canvas = None
        self.ui = None