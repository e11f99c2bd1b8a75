"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.config import GameConfig

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling and rejecting bad permutations."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def fallback(size: int) -> Board:
        """Return the solved board with the blank slid one cell left.

        One legal move away from the goal, so always solvable and never
        already solved.
        """
        board = Board.solved(size)
        board.swap_with_blank(board.blank_index - 1)
        return board

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> None:
        """Fisher–Yates shuffle *board* in-place (any permutation, solvable or not)."""
        rng = rng or random
        tiles = board.tiles
        for i in range(len(tiles) - 1, 0, -1):
            j = rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]
        board.blank_index = tiles.index(0)

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = GameConfig.generation_attempts,
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size.

        Reshuffles until the permutation is solvable and not already the
        goal. After *max_attempts* failures the fixed :meth:`fallback`
        board is returned instead.
        """
        board = GameGenerator.solved(size)
        for attempt in range(1, max_attempts + 1):
            GameGenerator.shuffle(board, rng)
            if board.is_solved():
                logger.debug("Shuffle %d produced the goal state, retrying", attempt)
                continue
            if not Solver.is_solvable(board):
                logger.debug("Shuffle %d is unsolvable, retrying", attempt)
                continue
            return board

        logger.warning(
            "No solvable %dx%d shuffle after %d attempts, using fallback board",
            size,
            size,
            max_attempts,
        )
        return GameGenerator.fallback(size)
