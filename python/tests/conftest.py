"""Shared fixtures for the puzzle test suite."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from backend.models.config import GameConfig


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def one_move_board() -> Board:
    """3×3 board one slide (index 8 → blank at 7) away from the goal."""
    return Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])


@pytest.fixture
def far_board() -> Board:
    """Solvable 3×3 far from the goal: no single move finishes it."""
    return Board.from_flat(3, [8, 7, 6, 5, 4, 3, 2, 1, 0])


@pytest.fixture
def one_move_left(one_move_board: Board) -> GamePlay:
    return GamePlay.from_board(one_move_board)


@pytest.fixture
def far_game(far_board: Board) -> GamePlay:
    return GamePlay.from_board(far_board)


@pytest.fixture
def scoring_config() -> GameConfig:
    return GameConfig(max_moves=500, move_weight=10, time_weight=5, duration=120)
