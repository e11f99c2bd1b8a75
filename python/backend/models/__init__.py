from backend.models.board import Board, Direction
from backend.models.config import GameConfig
from backend.models.errors import InvalidConfiguration

__all__ = ["Board", "Direction", "GameConfig", "InvalidConfiguration"]
