"""Pure helpers of the Rich frontend."""

from __future__ import annotations

from backend.models.board import Board
from frontend.cli.rich.app import THEMES, next_theme, render_board


def test_next_theme_cycles_through_all() -> None:
    names = list(THEMES)
    seen = [names[0]]
    for _ in range(len(names)):
        seen.append(next_theme(seen[-1]))
    assert seen[:-1] == names
    assert seen[-1] == names[0]


def test_next_theme_from_unknown_starts_over() -> None:
    assert next_theme("not-a-theme") == list(THEMES)[0]


def test_render_board_has_one_row_per_grid_row() -> None:
    table = render_board(Board.solved(4), THEMES["classic"])
    assert table.row_count == 4
    assert len(table.columns) == 4
