"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.engine.gamestate.timer import Countdown
from backend.models.board import Board
from backend.models.config import GameConfig


class Outcome(StrEnum):
    UNFINISHED = "unfinished"
    SOLVED = "solved"
    TIMED_OUT = "timed_out"


class GameState:
    """Holds the current board, move counter, countdown and outcome."""

    def __init__(self, board: Board, config: GameConfig) -> None:
        self.board = board
        self.config = config
        self.moves: int = 0
        self.timer = Countdown(config.duration)
        self.outcome = Outcome.UNFINISHED

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    # -- completion -----------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        return self.outcome is not Outcome.UNFINISHED

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    # -- scoring --------------------------------------------------------------

    def calculate_score(self) -> float:
        """Score from moves used and time left; deliberately unclamped.

        ``base + (max_moves - moves) * move_weight
        + (remaining / duration) * time_weight``
        """
        cfg = self.config
        return (
            cfg.base_score
            + (cfg.max_moves - self.moves) * cfg.move_weight
            + (self.timer.remaining / self.timer.duration) * cfg.time_weight
        )
