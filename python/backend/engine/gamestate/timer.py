"""Countdown timer advanced by an external once-per-second tick."""

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class TimerState(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    EXPIRED = "expired"
    STOPPED = "stopped"


class Countdown:
    """Seconds remaining plus the state the timer is in.

    The countdown never schedules anything itself: whoever drives the game
    calls :meth:`tick` once per second while :attr:`state` is ``RUNNING``.
    """

    def __init__(self, duration: int) -> None:
        self.duration = duration
        self.remaining: int = duration
        self.state = TimerState.IDLE

    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    def start(self) -> None:
        if self.state is TimerState.IDLE:
            self.state = TimerState.RUNNING
            logger.debug("Timer started with %ds", self.remaining)

    def stop(self) -> None:
        if self.is_running:
            self.state = TimerState.STOPPED
            logger.debug("Timer stopped at %ds", self.remaining)

    def tick(self) -> bool:
        """Advance one second. Returns True if this tick expired the timer."""
        if not self.is_running:
            return False
        if self.remaining > 0:
            self.remaining -= 1
        if self.remaining == 0:
            self.state = TimerState.EXPIRED
            logger.debug("Timer expired")
            return True
        return False

    def display(self) -> str:
        """Format the remaining time as ``m:ss``."""
        minutes, seconds = divmod(self.remaining, 60)
        return f"{minutes}:{seconds:02d}"
