"""Rich terminal frontend — styled board, countdown, score and themes.

Drives :class:`GamePlay` the way any presentation layer should: it turns
keys into moves, calls ``tick()`` once per wall-clock second while the
timer runs, and renders only what the engine exposes. The "image" of the
original picture puzzle is a colour theme here.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Outcome, TimerState
from backend.models.board import Board, Direction
from backend.models.config import GameConfig
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

# Longest wait for a key before the clock is checked again.
POLL_INTERVAL = 0.25

MIN_SIZE, MAX_SIZE = 2, 8


@dataclass(frozen=True)
class Theme:
    border: str
    tile: str
    correct: str


THEMES: dict[str, Theme] = {
    "classic": Theme(border="bright_blue", tile="bold white", correct="bold green"),
    "ocean": Theme(border="cyan", tile="bold bright_cyan", correct="bold blue"),
    "sunset": Theme(border="magenta", tile="bold yellow", correct="bold red"),
    "forest": Theme(border="green", tile="bold bright_white", correct="bold bright_green"),
}

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def next_theme(current: str) -> str:
    names = list(THEMES)
    index = names.index(current) if current in names else -1
    return names[(index + 1) % len(names)]


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, theme: Theme) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style=theme.border,
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
                continue
            style = theme.correct if board.is_tile_correct(board.index_of(r, c)) else theme.tile
            cells.append(f"[{style}]{val:>{width}}[/{style}]")
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    time_style = "bold red" if game.remaining <= 10 else "bold yellow"
    stats.append(game.timer_display, style=time_style)
    stats.append("    Score: ", style="dim")
    stats.append(f"{game.score:.1f}", style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int, theme_name: str) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("I", style="bold yellow")
    opts.append(f"  Theme: {theme_name}    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]S L I D I N G   P U Z Z L E[/bold]",
        border_style=THEMES[theme_name].border,
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay) -> None:
    console.clear()

    theme = THEMES[game.image]
    size = game.size

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("I", style="bold cyan")
    controls.append("  theme   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    hint = Text()
    if game.timer_state is TimerState.IDLE:
        hint = Text("  The clock starts with your first move.", style="dim italic")

    panel = Panel(
        Align.center(render_board(game.state.board, theme)),
        title=f"[bold]Sliding Puzzle  {size}×{size}[/bold]",
        subtitle=f"[dim]{game.image}[/dim]",
        border_style=theme.border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    console.print(Align.center(hint))
    console.print(Align.center(controls))


def _draw_result(game: GamePlay) -> None:
    console.clear()

    theme = THEMES[game.image]
    size = game.size

    banner = Text()
    if game.outcome is Outcome.SOLVED:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("CONGRATULATIONS!", style="bold green")
        banner.append("  You solved it!  ", style="green")
        banner.append("★\n", style="bold yellow")
        border = "bold green"
    else:
        banner.append("\n  TIME'S UP", style="bold red")
        banner.append("  The clock beat you this time.\n", style="red")
        border = "bold red"

    group = Group(
        Align.center(render_board(game.state.board, theme)),
        Align.center(banner),
        Align.center(_stats(game)),
    )
    panel = Panel(
        group,
        title=f"[bold]Sliding Puzzle  {size}×{size}[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> bool:
    """Run one game to completion. Returns False if the player quit."""
    celebration: list[float] = []
    game.on_solved = celebration.append
    next_tick: float | None = None

    while not game.is_complete:
        _draw_game(game)

        # Wait for a key, ticking the engine once per elapsed second. A tick
        # ends the wait so the countdown gets repainted.
        key: str | None = None
        while True:
            ticked = False
            now = time.monotonic()
            if game.timer_state is TimerState.RUNNING:
                if next_tick is None:
                    next_tick = now + 1.0
                while now >= next_tick and game.timer_state is TimerState.RUNNING:
                    game.tick()
                    next_tick += 1.0
                    ticked = True
                wait = min(POLL_INTERVAL, max(0.0, next_tick - now))
            else:
                next_tick = None
                wait = POLL_INTERVAL
            if ticked:
                break
            key = get_key_timeout(wait)
            if key is not None:
                break

        if key is None:
            continue
        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key == "image":
            game.change_image(next_theme(game.image))
            next_tick = None
        elif key == "restart":
            game.new_game()
            next_tick = None
        elif key == "quit":
            return False

    if celebration:
        time.sleep(celebration[-1])
    _draw_result(game)

    while True:
        key = get_key()
        if key == "restart":
            return True
        if key == "quit":
            return False


def run(config: GameConfig, theme: str = "classic", seed: int | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    rng = random.Random(seed)
    sel_size = config.grid_size
    theme_name = theme

    while True:
        _draw_menu(sel_size, theme_name)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key == "image":
            theme_name = next_theme(theme_name)
        elif key == "enter":
            game = GamePlay(config.with_size(sel_size), image=theme_name, rng=rng)
            while _play(game):
                game.new_game()
            theme_name = game.image
