"""Solvability rules for sliding puzzle boards."""

from __future__ import annotations

from backend.models.board import Board


class Solver:
    """Stateless solvability checks — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count out-of-order pairs of tiles, ignoring the blank."""
        flat = [v for v in board.tiles if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal slides.

        Odd-sided grids are solvable iff the inversion count is even. On
        even-sided grids every vertical slide also flips inversion parity,
        so the blank's row (counted from the bottom) joins the sum.
        """
        n = board.size
        inversions = Solver.inversions(board)
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row, _ = board.position(board.blank_index)
        blank_row_from_bottom = n - 1 - blank_row
        return (inversions + blank_row_from_bottom) % 2 == 0
