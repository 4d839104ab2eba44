"""
Fixed-timestep simulation clock

Converts host frame time into whole logical ticks, tracks the session phase
and owns the countdown.
"""

from __future__ import annotations

import logging
from enum import Enum

from .utils import format_countdown

logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class SimulationClock:
    """Pause-aware tick driver with a countdown in ticks"""

    def __init__(
        self,
        session_ticks: int = 3600,
        ticks_per_second: int = 60,
        max_ticks_per_frame: int = 5,
    ):
        if session_ticks <= 0:
            raise ValueError("session_ticks must be positive")
        if ticks_per_second <= 0 or max_ticks_per_frame <= 0:
            raise ValueError("ticks_per_second and max_ticks_per_frame must be positive")
        self.session_ticks = session_ticks
        self.ticks_per_second = ticks_per_second
        self.max_ticks_per_frame = max_ticks_per_frame
        self.reset()

    def reset(self):
        self.phase = Phase.RUNNING
        self.time_remaining = self.session_ticks
        self.elapsed_ticks = 0
        self._accumulator = 0.0

    @property
    def tick_length(self) -> float:
        return 1.0 / self.ticks_per_second

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def consume(self, elapsed_seconds: float) -> int:
        """Number of whole ticks due after `elapsed_seconds` of wall-clock time"""
        if not self.running:
            self._accumulator = 0.0
            return 0
        self._accumulator += max(0.0, elapsed_seconds)
        due = int(self._accumulator // self.tick_length)
        if due > self.max_ticks_per_frame:
            logger.debug("Dropping %d ticks after a slow frame", due - self.max_ticks_per_frame)
            self._accumulator = 0.0
            return self.max_ticks_per_frame
        self._accumulator -= due * self.tick_length
        return due

    def toggle_pause(self) -> bool:
        """Flip RUNNING/PAUSED. Returns False if nothing changed."""
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.RUNNING
        else:
            return False
        self._accumulator = 0.0
        return True

    def finish(self):
        self.phase = Phase.GAME_OVER

    def countdown(self) -> bool:
        """Spend one tick of session time. Returns True when time just ran out."""
        if self.time_remaining <= 0:
            return False
        self.time_remaining -= 1
        self.elapsed_ticks += 1
        return self.time_remaining == 0

    @property
    def display(self) -> str:
        return format_countdown(self.time_remaining)
