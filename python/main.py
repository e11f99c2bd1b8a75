#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                    # 3×3, two minutes on the clock
    python main.py -s 4 -d 300        # 4×4, five minutes
    python main.py --theme ocean -v   # start themed, debug logging
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.config import GameConfig  # noqa: E402
from backend.models.errors import InvalidConfiguration  # noqa: E402
from frontend.cli.rich.app import THEMES, run  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def build_config(size: int, duration: int, max_moves: int) -> GameConfig:
    """Build a validated config, reporting bad values as CLI errors."""
    try:
        return GameConfig(
            grid_size=size, duration=duration, max_moves=max_moves
        ).validate()
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc)) from exc


def _check_theme(value: str) -> str:
    if value not in THEMES:
        raise typer.BadParameter(
            f"Unknown theme {value!r}; choose from {', '.join(THEMES)}."
        )
    return value


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    duration: int = typer.Option(
        120, "-d", "--duration",
        help="Seconds on the countdown.",
    ),
    max_moves: int = typer.Option(
        500, "--max-moves",
        help="Move budget used when scoring.",
    ),
    theme: str = typer.Option(
        "classic", "--theme",
        callback=_check_theme,
        help="Colour theme the puzzle starts with.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible shuffles.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine decisions at debug level.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(verbose)
    config = build_config(size, duration, max_moves)

    run(config, theme=theme, seed=seed)


if __name__ == "__main__":
    app()
