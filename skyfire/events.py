"""
Requests the simulation hands to its collaborators (renderer, audio, HUD)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
CYAN: Color = (0, 255, 255)
MAGENTA: Color = (255, 0, 255)
BLACK: Color = (0, 0, 0)


class EventKind(Enum):
    PLAY_EXPLOSION = "play_explosion"
    START_MUSIC = "start_music"
    PAUSE_MUSIC = "pause_music"
    STOP_AND_REWIND_MUSIC = "stop_and_rewind_music"
    GAME_OVER = "game_over"
    TIME_UP = "time_up"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    score: Optional[int] = None

    @property
    def is_audio(self) -> bool:
        return self.kind in (
            EventKind.PLAY_EXPLOSION,
            EventKind.START_MUSIC,
            EventKind.PAUSE_MUSIC,
            EventKind.STOP_AND_REWIND_MUSIC,
        )

    @property
    def message(self) -> Optional[str]:
        if self.kind is EventKind.GAME_OVER:
            return f"Game Over! Final Score: {self.score}"
        if self.kind is EventKind.TIME_UP:
            return f"Time's up! Final Score: {self.score}"
        return None


@dataclass(frozen=True)
class DrawCall:
    """One primitive in screen space (origin top-left, y down).

    shape is "rect", "circle" (x, y is the center and width the radius) or
    "text" (x, y is the text center).
    """
    kind: str
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    color: Color = WHITE
    shape: str = "rect"
    image: Optional[str] = None
    text: Optional[str] = None
    font_size: int = 12


@dataclass(frozen=True)
class HudSnapshot:
    score: int
    health: int
    timer: str
    paused: bool
    game_over: bool
    final_score: Optional[int] = None
