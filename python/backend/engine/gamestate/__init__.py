from backend.engine.gamestate.state import GameState, Outcome
from backend.engine.gamestate.timer import Countdown, TimerState

__all__ = ["Countdown", "GameState", "Outcome", "TimerState"]
