"""A small pygame visual novel with pages, scenes, queued dialogs and fade transitions."""

__version__ = "0.1.0"