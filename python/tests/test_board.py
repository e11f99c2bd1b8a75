"""Board model: construction, geometry and goal checks."""

from __future__ import annotations

import itertools

import pytest

from backend.models.board import Board


# -- construction -------------------------------------------------------------


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.blank_index == 7
    assert board.tiles == [1, 2, 3, 4, 5, 6, 7, 0, 8]


def test_from_flat_copies_input() -> None:
    flat = [1, 2, 3, 0]
    board = Board.from_flat(2, flat)
    board.swap_with_blank(2)
    assert flat == [1, 2, 3, 0]


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3],
        [1, 2, 3, 4, 0],
    ],
    ids=["short", "long"],
)
def test_from_flat_rejects_wrong_length(flat: list[int]) -> None:
    with pytest.raises(ValueError, match="Expected 4 tiles"):
        Board.from_flat(2, flat)


@pytest.mark.parametrize(
    "flat",
    [
        [1, 1, 2, 0],
        [1, 2, 3, 4],
        [1, 2, 3, -1],
    ],
    ids=["duplicate", "no-blank", "negative"],
)
def test_from_flat_rejects_non_permutation(flat: list[int]) -> None:
    with pytest.raises(ValueError, match="permutation"):
        Board.from_flat(2, flat)


@pytest.mark.parametrize("size", [2, 3, 4, 7])
def test_solved_layout(size: int) -> None:
    board = Board.solved(size)
    assert board.tiles == list(range(1, size * size)) + [0]
    assert board.blank_index == size * size - 1
    assert board.is_solved()


# -- geometry -----------------------------------------------------------------


def test_position_and_index_round_trip() -> None:
    board = Board.solved(4)
    for index in range(16):
        assert board.index_of(*board.position(index)) == index


def test_adjacency_is_orthogonal_only() -> None:
    board = Board.solved(3)
    # centre cell 4 touches 1, 3, 5, 7 and nothing else
    assert [i for i in range(9) if board.is_adjacent(4, i)] == [1, 3, 5, 7]


def test_adjacency_does_not_wrap_rows() -> None:
    board = Board.solved(3)
    # 5 ends row 1 and 6 starts row 2: consecutive indices, not neighbours
    assert not board.is_adjacent(5, 6)
    assert not board.is_adjacent(6, 5)


def test_rows_view() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert board.get_tile(2, 2) == 8


# -- goal checks --------------------------------------------------------------


def test_every_transposition_of_goal_is_unsolved() -> None:
    for size in (2, 3, 4):
        goal = Board.solved(size).tiles
        for i, j in itertools.combinations(range(size * size), 2):
            tiles = goal[:]
            tiles[i], tiles[j] = tiles[j], tiles[i]
            assert not Board.from_flat(size, tiles).is_solved(), (size, i, j)


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert [board.is_tile_correct(i) for i in range(9)] == [
        True, True, True, True, True, True, True, False, False,
    ]


def test_swap_with_blank_keeps_permutation() -> None:
    board = Board.solved(3)
    board.swap_with_blank(5)
    assert board.tiles == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert board.blank_index == 5
    assert board.is_permutation()


def test_copy_is_independent() -> None:
    board = Board.solved(2)
    clone = board.copy()
    clone.swap_with_blank(2)
    assert board.is_solved()
    assert not clone.is_solved()
