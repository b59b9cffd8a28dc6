"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .assets import Assets
from .engine import Engine
from .main_menu import MainMenuPage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fuadmita", description="Fuad dan Mita visual novel.")
    parser.add_argument(
        "--assets",
        default=None,
        help="directory holding fonts, images and music (default: $FUADMITA_ASSETS or the program directory)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    engine = Engine(Assets(args.assets))
    engine.run(MainMenuPage())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())