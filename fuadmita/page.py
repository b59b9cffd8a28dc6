"""Base class for full-window pages driven by the page manager."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .page_manager import PageManager
    from .ui import UI


class Page:
    """A page owns a UI; subclasses override the lifecycle hooks they need.

    The page manager attaches ``page_manager`` and ``ui`` before ``start`` runs.
    """

    def __init__(self) -> None:
        self.page_manager: Optional["PageManager"] = None
        self.ui: Optional["UI"] = None

    def start(self) -> None:
        """Called once when the page first becomes active."""

    def update(self) -> None:
        """Called every frame while the page is active."""

    def destroy(self) -> None:
        """Called when the page is replaced; releases its UI."""
        self.ui = None