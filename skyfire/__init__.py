"""Skyfire - fixed-tick 2D arcade shooter"""

from .clock import Phase, SimulationClock
from .collision import CollisionDetector, CollisionReport
from .entities import Bullet, Enemy, InputIntent, Particle, Player, PowerUp
from .events import DrawCall, EventKind, GameEvent, HudSnapshot
from .game_state import GameState
from .spawner import SpawnController

__all__ = [
    'GameState', 'SimulationClock', 'Phase', 'SpawnController',
    'CollisionDetector', 'CollisionReport',
    'Player', 'Enemy', 'Bullet', 'PowerUp', 'Particle', 'InputIntent',
    'GameEvent', 'EventKind', 'DrawCall', 'HudSnapshot',
]
