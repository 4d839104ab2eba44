"""
Game entity dataclasses

Every movable entity advances one tick at a time and reports whether it is
still alive. Coordinates are screen space: origin top-left, y grows downward.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, Tuple

from .utils import clamp, hue_to_rgb

# Entities below this line are pruned
OFFSCREEN_MARGIN = 50

ENEMY_KINDS = ("basic", "fast", "strong")
POWERUP_KINDS = ("bulletSpeed", "bulletPower", "heal")

ENEMY_SPEEDS = {"basic": 2.0, "fast": 4.0, "strong": 2.0}
MAX_ENEMY_HEALTH = 3
MAX_PLAYER_HEALTH = 100


@dataclass(frozen=True)
class InputIntent:
    """Snapshot of the directions the player wants to move in"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def any(self) -> bool:
        return self.up or self.down or self.left or self.right


@dataclass
class Entity:
    """Axis-aligned box with a per-tick update"""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def step(self) -> bool:
        """One tick of movement; subclasses implement it and return whether still alive"""
        raise NotImplementedError

    def advance(self, ticks: int = 1) -> bool:
        """Run `ticks` simulation steps, stopping early once dead"""
        alive = True
        for _ in range(ticks):
            alive = self.step()
            if not alive:
                break
        return alive


@dataclass
class Bullet(Entity):
    """Player projectile travelling straight up"""
    speed: float = 5.0
    power: int = 1

    @classmethod
    def fired(cls, x: float, y: float, speed: float, power: int) -> "Bullet":
        size = power * 5
        return cls(x=x, y=y, width=size, height=size, speed=speed, power=power)

    def step(self) -> bool:
        self.y -= self.speed
        return self.y > 0


@dataclass
class Enemy(Entity):
    """Descending enemy; strong ones wobble sideways"""
    kind: str = "basic"
    speed: float = 2.0
    health: int = 1
    field_height: float = 600

    @classmethod
    def spawned(cls, x: float, y: float, kind: str, health: int, field_height: float = 600) -> "Enemy":
        if kind == "strong":
            health = MAX_ENEMY_HEALTH
        return cls(x=x, y=y, width=50, height=50, kind=kind,
                   speed=ENEMY_SPEEDS[kind], health=health, field_height=field_height)

    def step(self) -> bool:
        self.y += self.speed
        if self.kind == "strong":
            # Phase follows absolute y, not time since spawn
            self.x += math.sin(self.y / 100) * 3
        return self.y < self.field_height + OFFSCREEN_MARGIN

    def take_damage(self, amount: int = 1) -> bool:
        """Returns True if the enemy survives the hit"""
        self.health = max(0, self.health - amount)
        return self.health > 0


@dataclass
class PowerUp(Entity):
    """Falling pickup"""
    kind: str = "heal"
    speed: float = 2.0
    field_height: float = 600

    @classmethod
    def spawned(cls, x: float, y: float, kind: str, field_height: float = 600) -> "PowerUp":
        return cls(x=x, y=y, width=30, height=30, kind=kind, field_height=field_height)

    def step(self) -> bool:
        self.y += self.speed
        return self.y < self.field_height + OFFSCREEN_MARGIN


@dataclass
class Particle(Entity):
    """Cosmetic explosion debris. Drawn as a circle of radius `width`."""
    vx: float = 0.0
    vy: float = 0.0
    color: Tuple[int, int, int] = (255, 255, 255)
    life: int = 60

    @classmethod
    def burst(cls, x: float, y: float, rng: random.Random) -> "Particle":
        size = rng.random() * 5 + 2
        return cls(
            x=x,
            y=y,
            width=size,
            height=size,
            vx=rng.random() * 4 - 2,
            vy=rng.random() * 4 - 2,
            color=hue_to_rgb(rng.random() * 360),
        )

    @property
    def size(self) -> float:
        return self.width

    def step(self) -> bool:
        self.x += self.vx
        self.y += self.vy
        self.width *= 0.95
        self.height = self.width
        self.life -= 1
        return self.life > 0 and self.width > 1


@dataclass
class Player(Entity):
    """Player ship. Fires automatically on a fixed cadence."""
    x: float = 400.0
    y: float = 500.0
    width: float = 50.0
    height: float = 50.0
    speed: float = 5.0
    health: int = MAX_PLAYER_HEALTH
    bullet_speed: float = 5.0
    bullet_power: int = 1
    moving_up: bool = False
    moving_down: bool = False
    moving_left: bool = False
    moving_right: bool = False
    shoot_timer: int = 0
    fire_interval: int = 20
    field_width: float = 800
    field_height: float = 600
    _pending: List[Bullet] = field(default_factory=list, repr=False)

    def apply_input(self, intent: InputIntent):
        self.moving_up = intent.up
        self.moving_down = intent.down
        self.moving_left = intent.left
        self.moving_right = intent.right

    def step(self) -> bool:
        max_x = self.field_width - self.width
        max_y = self.field_height - self.height
        if self.moving_up:
            self.y = clamp(self.y - self.speed, 0, max_y)
        if self.moving_down:
            self.y = clamp(self.y + self.speed, 0, max_y)
        if self.moving_left:
            self.x = clamp(self.x - self.speed, 0, max_x)
        if self.moving_right:
            self.x = clamp(self.x + self.speed, 0, max_x)

        self.shoot_timer += 1
        if self.shoot_timer >= self.fire_interval:
            self._pending.append(
                Bullet.fired(self.x + 25, self.y, self.bullet_speed, self.bullet_power)
            )
            self.shoot_timer = 0
        return self.health > 0

    def advance(self, ticks: int = 1) -> List[Bullet]:
        """Move and fire; returns the bullets fired during these ticks"""
        for _ in range(ticks):
            self.step()
        fired, self._pending = self._pending, []
        return fired

    def take_damage(self, amount: int = 20):
        self.health = max(0, self.health - amount)

    def apply_power_up(self, kind: str):
        if kind == "bulletSpeed":
            self.bullet_speed += 2
        elif kind == "bulletPower":
            self.bullet_power += 1
        elif kind == "heal":
            self.health = min(MAX_PLAYER_HEALTH, self.health + 20)
        else:
            raise ValueError(f"Unknown power-up kind: {kind}")
