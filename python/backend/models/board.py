"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat, row-major list of ints. 0 represents the
    blank space.
    """

    size: int
    tiles: list[int]
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = list(flat)
        return cls(size=size, tiles=tiles, blank_index=tiles.index(0))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank last)."""
        tiles = list(range(1, size * size)) + [0]
        return cls(size=size, tiles=tiles, blank_index=size * size - 1)

    # -- geometry -------------------------------------------------------------

    def position(self, index: int) -> tuple[int, int]:
        """Return the ``(row, col)`` of a cell index."""
        return divmod(index, self.size)

    def index_of(self, row: int, col: int) -> int:
        return row * self.size + col

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size * self.size

    def is_adjacent(self, index: int, other: int) -> bool:
        """True if the two cells share an edge (never diagonally)."""
        row, col = self.position(index)
        other_row, other_col = self.position(other)
        return (abs(row - other_row) == 1 and col == other_col) or (
            abs(col - other_col) == 1 and row == other_row
        )

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[self.index_of(row, col)]

    def rows(self) -> list[list[int]]:
        """Return the tiles as a list of rows (a copy)."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        return all(
            tile == (0 if index == last else index + 1)
            for index, tile in enumerate(self.tiles)
        )

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == len(self.tiles) - 1
        return index == val - 1

    def is_permutation(self) -> bool:
        return sorted(self.tiles) == list(range(self.size * self.size))

    # -- mutation -------------------------------------------------------------

    def swap_with_blank(self, index: int) -> None:
        """Swap the tile at *index* into the blank (no legality check)."""
        blank = self.blank_index
        self.tiles[blank], self.tiles[index] = self.tiles[index], self.tiles[blank]
        self.blank_index = index

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=self.tiles[:],
            blank_index=self.blank_index,
        )
