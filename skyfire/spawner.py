"""
Timer-driven enemy and power-up spawning
"""

from __future__ import annotations

import random
from typing import List, Tuple

from .entities import ENEMY_KINDS, POWERUP_KINDS, Enemy, PowerUp


class SpawnController:
    """Two independent tick counters that reset whenever they fire"""

    def __init__(
        self,
        rng: random.Random,
        width: int = 800,
        height: int = 600,
        enemy_spawn_interval: int = 60,
        powerup_spawn_interval: int = 300,
    ):
        if enemy_spawn_interval <= 0 or powerup_spawn_interval <= 0:
            raise ValueError("Spawn intervals must be positive")
        self.rng = rng
        self.width = width
        self.height = height
        self.enemy_spawn_interval = enemy_spawn_interval
        self.powerup_spawn_interval = powerup_spawn_interval

        self._enemy_spawn_timer = 0
        self._powerup_spawn_timer = 0

    def reset(self):
        self._enemy_spawn_timer = 0
        self._powerup_spawn_timer = 0

    def tick(self) -> Tuple[List[Enemy], List[PowerUp]]:
        enemies: List[Enemy] = []
        powerups: List[PowerUp] = []

        self._enemy_spawn_timer += 1
        if self._enemy_spawn_timer >= self.enemy_spawn_interval:
            enemies.append(self.spawn_enemy())
            self._enemy_spawn_timer = 0

        self._powerup_spawn_timer += 1
        if self._powerup_spawn_timer >= self.powerup_spawn_interval:
            powerups.append(self.spawn_powerup())
            self._powerup_spawn_timer = 0

        return enemies, powerups

    def spawn_enemy(self) -> Enemy:
        kind = self.rng.choice(ENEMY_KINDS)
        x = self.rng.random() * (self.width - 50)
        # Rolled for every kind so the random stream does not depend on it
        health = self.rng.randint(1, 3)
        return Enemy.spawned(x, -50, kind, health, field_height=self.height)

    def spawn_powerup(self) -> PowerUp:
        kind = self.rng.choice(POWERUP_KINDS)
        x = self.rng.random() * (self.width - 30)
        return PowerUp.spawned(x, -30, kind, field_height=self.height)
