"""Game configuration: grid size, countdown length and scoring weights."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from numbers import Real

from backend.models.errors import InvalidConfiguration

MIN_GRID_SIZE = 2


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = 3
    duration: int = 120
    max_moves: int = 500
    move_weight: float = 10
    time_weight: float = 5
    base_score: float = 100
    # Seconds the celebration collaborator should wait after a win.
    celebration_delay: float = 0.5
    # Shuffles tried before falling back to a fixed solvable board.
    generation_attempts: int = 1000

    def validate(self) -> GameConfig:
        """Return ``self`` if every value is usable, else raise.

        Raises:
            InvalidConfiguration: on a non-numeric value, a grid smaller
                than 2×2, a non-positive duration, a negative move cap or
                delay, or a non-positive generation attempt cap.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, Real) or isinstance(value, bool):
                raise InvalidConfiguration(
                    f"{field.name} must be a number, got {value!r}."
                )
        if (
            not isinstance(self.grid_size, int)
            or isinstance(self.grid_size, bool)
            or self.grid_size < MIN_GRID_SIZE
        ):
            raise InvalidConfiguration(
                f"Grid size must be an integer >= {MIN_GRID_SIZE}, "
                f"got {self.grid_size!r}."
            )
        if self.duration <= 0:
            raise InvalidConfiguration(
                f"Duration must be positive, got {self.duration!r}."
            )
        if self.max_moves < 0:
            raise InvalidConfiguration(
                f"Max moves must be non-negative, got {self.max_moves!r}."
            )
        if self.celebration_delay < 0:
            raise InvalidConfiguration(
                f"Celebration delay must be non-negative, "
                f"got {self.celebration_delay!r}."
            )
        if self.generation_attempts < 1:
            raise InvalidConfiguration(
                f"Generation attempts must be at least 1, "
                f"got {self.generation_attempts!r}."
            )
        return self

    def with_size(self, grid_size: int) -> GameConfig:
        return replace(self, grid_size=grid_size).validate()
