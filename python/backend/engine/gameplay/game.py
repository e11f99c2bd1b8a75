"""Core gameplay logic — processes moves, ticks the clock, checks the win."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState, Outcome, TimerState
from backend.models.board import Board, Direction
from backend.models.config import GameConfig

logger = logging.getLogger(__name__)

# Called with the configured delay (seconds) once the board is solved.
CelebrationHook = Callable[[float], None]


class GamePlay:
    """Orchestrates a single game session.

    The session is replaced wholesale by :meth:`new_game`. Invalid moves are
    ignored rather than reported; only bad configuration raises.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        image: Any = None,
        rng: random.Random | None = None,
        on_solved: CelebrationHook | None = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.image = image
        self.on_solved = on_solved
        self._rng = rng
        self.state: GameState
        self.new_game()

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        on_solved: CelebrationHook | None = None,
    ) -> GamePlay:
        """Create a game session from a copy of an existing board.

        The copy is rebuilt from the tiles, so the blank is located afresh
        and later changes to *board* do not reach the game.

        Raises:
            ValueError: if the tiles are not a permutation of 0..N*N-1.
        """
        board = Board.from_flat(board.size, board.tiles)
        obj = object.__new__(cls)
        obj.config = (config or GameConfig()).with_size(board.size)
        obj.image = None
        obj.on_solved = on_solved
        obj._rng = None
        obj.state = GameState(board, obj.config)
        return obj

    # -- lifecycle ------------------------------------------------------------

    def new_game(self, size: int | None = None, image: Any = None) -> None:
        """Discard the current session and deal a freshly shuffled board.

        Raises:
            InvalidConfiguration: if *size* is not an integer >= 2.
        """
        if size is not None:
            self.config = self.config.with_size(size)
        if image is not None:
            self.image = image
        board = GameGenerator.generate(
            self.config.grid_size,
            rng=self._rng,
            max_attempts=self.config.generation_attempts,
        )
        self.state = GameState(board, self.config)
        logger.info("New %dx%d game", self.size, self.size)

    def change_image(self, image: Any) -> None:
        """Switch the active picture and restart at the same grid size."""
        self.image = image
        self.new_game()

    # -- movement -------------------------------------------------------------

    def attempt_move(self, index: int) -> bool:
        """Slide the tile at *index* into the blank if it is adjacent.

        Returns True if the move was applied. Out-of-range indices,
        non-adjacent tiles and moves after the game has ended are no-ops.
        """
        state = self.state
        board = state.board

        if state.is_complete:
            logger.debug("Ignoring move %r: game is over", index)
            return False
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not board.in_bounds(index)
        ):
            logger.debug("Ignoring move %r: off the board", index)
            return False
        if not board.is_adjacent(index, board.blank_index):
            logger.debug("Ignoring move %d: not next to the blank", index)
            return False

        board.swap_with_blank(index)
        if state.moves == 0:
            state.timer.start()
        state.increment_moves()
        self.check_win()
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        br, bc = board.position(board.blank_index)

        # The offset points to the tile that will slide into the blank.
        offsets = {
            Direction.UP: (1, 0),
            Direction.DOWN: (-1, 0),
            Direction.LEFT: (0, 1),
            Direction.RIGHT: (0, -1),
        }
        dr, dc = offsets[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.size and 0 <= tc < board.size):
            return False
        return self.attempt_move(board.index_of(tr, tc))

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank."""
        board = self.state.board
        if not (0 <= row < board.size and 0 <= col < board.size):
            return False
        return self.attempt_move(board.index_of(row, col))

    # -- clock ----------------------------------------------------------------

    def tick(self) -> None:
        """Advance the countdown by one second (no-op unless it is running)."""
        state = self.state
        if state.timer.tick() and not state.is_complete:
            state.outcome = Outcome.TIMED_OUT
            logger.info("Time is up after %d moves", state.moves)

    # -- win ------------------------------------------------------------------

    def check_win(self) -> bool:
        """Mark the game solved if the board is in goal order."""
        state = self.state
        if not state.is_solved:
            return False
        if not state.is_complete:
            state.outcome = Outcome.SOLVED
            state.timer.stop()
            logger.info(
                "Solved in %d moves with %ds left", state.moves, state.timer.remaining
            )
            if self.on_solved is not None:
                self.on_solved(self.config.celebration_delay)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def tiles(self) -> tuple[int, ...]:
        return tuple(self.state.board.tiles)

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def remaining(self) -> int:
        return self.state.timer.remaining

    @property
    def timer_state(self) -> TimerState:
        return self.state.timer.state

    @property
    def timer_display(self) -> str:
        return self.state.timer.display()

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def is_won(self) -> bool:
        return self.state.outcome is Outcome.SOLVED

    def calculate_score(self) -> float:
        return self.state.calculate_score()

    @property
    def score(self) -> float:
        return self.calculate_score()
