"""
GameState - one Skyfire session
-------------------------------
- Owns the player, bullets, enemies, power-ups and particles
- `tick()` runs one fixed logical step: move, spawn, collide, count down
- Collisions are resolved in two passes (report, then apply)
- Collaborators talk to it through input intents, draw calls, the HUD snapshot
  and a queue of fire-and-forget events
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .clock import Phase, SimulationClock
from .collision import CollisionDetector, CollisionReport
from .entities import Bullet, Enemy, InputIntent, Particle, Player, PowerUp
from .events import (
    BLACK, CYAN, GREEN, MAGENTA, RED, WHITE, YELLOW,
    DrawCall, EventKind, GameEvent, HudSnapshot,
)
from .spawner import SpawnController

logger = logging.getLogger(__name__)

KILL_SCORE = 100
CONTACT_DAMAGE = 20
PARTICLES_PER_KILL = 20

ENEMY_COLORS = {3: WHITE, 2: YELLOW, 1: RED}
POWERUP_COLORS = {"bulletSpeed": CYAN, "bulletPower": MAGENTA, "heal": GREEN}
POWERUP_LETTERS = {"bulletSpeed": "S", "bulletPower": "P", "heal": "H"}


class GameState:
    """Fixed-tick simulation of a single shooter session"""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        session_ticks: int = 3600,
        enemy_spawn_interval: int = 60,
        powerup_spawn_interval: int = 300,
        ticks_per_second: int = 60,
        max_ticks_per_frame: int = 5,
        seed: Optional[int] = None,
        player_sprite: Optional[str] = "assets/sprites/player_plane.png",
    ):
        if width <= 0 or height <= 0:
            raise ValueError("Play field size must be positive")

        self.width = width
        self.height = height
        self.player_sprite = player_sprite
        self.rng = random.Random(seed)

        self.clock = SimulationClock(
            session_ticks=session_ticks,
            ticks_per_second=ticks_per_second,
            max_ticks_per_frame=max_ticks_per_frame,
        )
        self.spawner = SpawnController(
            self.rng,
            width=width,
            height=height,
            enemy_spawn_interval=enemy_spawn_interval,
            powerup_spawn_interval=powerup_spawn_interval,
        )
        self.collisions = CollisionDetector()

        self._events: List[GameEvent] = []
        self._reset_session()

    def _reset_session(self):
        self.player = Player(field_width=self.width, field_height=self.height)
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.powerups: List[PowerUp] = []
        self.particles: List[Particle] = []
        self.score = 0
        self.wave = 1
        self.final_score: Optional[int] = None
        self.last_report = CollisionReport()
        self._music_started = False
        self.clock.reset()
        self.spawner.reset()

    # ----------------------------
    # Session state
    # ----------------------------

    @property
    def time_remaining(self) -> int:
        return self.clock.time_remaining

    @property
    def paused(self) -> bool:
        return self.clock.paused

    @property
    def game_over(self) -> bool:
        return self.clock.game_over

    @property
    def phase(self) -> Phase:
        return self.clock.phase

    # ----------------------------
    # Input collaborator
    # ----------------------------

    def set_input_intent(self, intent: InputIntent):
        self.player.apply_input(intent)
        if intent.any() and not self._music_started and self.clock.running:
            self._music_started = True
            self._emit(EventKind.START_MUSIC)

    def request_pause_toggle(self) -> bool:
        if not self.clock.toggle_pause():
            return False
        if self.clock.paused:
            logger.debug("Paused with %d ticks left", self.time_remaining)
            self._emit(EventKind.PAUSE_MUSIC)
        else:
            logger.debug("Resumed")
            self._music_started = True
            self._emit(EventKind.START_MUSIC)
        return True

    def request_restart(self):
        logger.info("Restarting session (previous score %d)", self.score)
        self._reset_session()
        self._music_started = True
        self._emit(EventKind.STOP_AND_REWIND_MUSIC)
        self._emit(EventKind.START_MUSIC)

    # ----------------------------
    # Simulation
    # ----------------------------

    def advance_time(self, elapsed_seconds: float) -> int:
        """Run however many ticks `elapsed_seconds` of host time is worth"""
        due = self.clock.consume(elapsed_seconds)
        for _ in range(due):
            if not self.clock.running:
                break
            self.tick()
        return due

    def tick(self):
        if not self.clock.running:
            return

        # Update world
        self.bullets.extend(self.player.advance())
        self.bullets = [b for b in self.bullets if b.advance()]
        self.enemies = [e for e in self.enemies if e.advance()]
        self.powerups = [p for p in self.powerups if p.advance()]
        self.particles = [p for p in self.particles if p.advance()]

        # Spawn logic
        new_enemies, new_powerups = self.spawner.tick()
        self.enemies.extend(new_enemies)
        self.powerups.extend(new_powerups)

        # Handle collisions
        report = self.collisions.resolve(self.player, self.bullets, self.enemies, self.powerups)
        self._apply_collisions(report)
        self.last_report = report

        # Countdown
        if self.clock.countdown() and not self.clock.game_over:
            self._end_session(EventKind.TIME_UP)

    def _apply_collisions(self, report: CollisionReport):
        for hit in report.hits:
            hit.enemy.take_damage()

        spent = {id(b) for b in report.spent_bullets}
        killed = {id(e) for e in report.kills}
        rammed = {id(e) for e in report.rammed}
        collected = {id(p) for p in report.collected}

        for enemy in report.kills:
            self.score += KILL_SCORE
            cx, cy = enemy.center
            for _ in range(PARTICLES_PER_KILL):
                self.particles.append(Particle.burst(cx, cy, self.rng))
            self._emit(EventKind.PLAY_EXPLOSION)

        for _ in report.rammed:
            self.player.take_damage(CONTACT_DAMAGE)

        for powerup in report.collected:
            self.player.apply_power_up(powerup.kind)

        self.bullets = [b for b in self.bullets if id(b) not in spent]
        self.enemies = [e for e in self.enemies if id(e) not in killed and id(e) not in rammed]
        self.powerups = [p for p in self.powerups if id(p) not in collected]

        if self.player.health <= 0:
            self._emit(EventKind.STOP_AND_REWIND_MUSIC)
            self._end_session(EventKind.GAME_OVER)

    def _end_session(self, reason: EventKind):
        self.clock.finish()
        self.final_score = self.score
        logger.info("Session over (%s): score %d", reason.value, self.score)
        self._emit(reason, score=self.score)

    # ----------------------------
    # Output collaborators
    # ----------------------------

    def _emit(self, kind: EventKind, score: Optional[int] = None):
        self._events.append(GameEvent(kind, score))

    def drain_events(self) -> List[GameEvent]:
        events, self._events = self._events, []
        return events

    def hud(self) -> HudSnapshot:
        return HudSnapshot(
            score=self.score,
            health=self.player.health,
            timer=self.clock.display,
            paused=self.paused,
            game_over=self.game_over,
            final_score=self.final_score,
        )

    def draw_calls(self) -> List[DrawCall]:
        p = self.player
        calls = [DrawCall("player", p.x, p.y, p.width, p.height, GREEN, image=self.player_sprite)]

        for b in self.bullets:
            calls.append(DrawCall("bullet", b.x, b.y, b.width, b.height, RED))

        for e in self.enemies:
            calls.append(DrawCall("enemy", e.x, e.y, e.width, e.height, ENEMY_COLORS.get(e.health, RED)))

        for pu in self.powerups:
            calls.append(DrawCall("powerup", pu.x, pu.y, pu.width, pu.height, POWERUP_COLORS[pu.kind]))
            cx, cy = pu.center
            calls.append(DrawCall("powerup", cx, cy, color=BLACK, shape="text",
                                  text=POWERUP_LETTERS[pu.kind], font_size=20))

        for pa in self.particles:
            calls.append(DrawCall("particle", pa.x, pa.y, pa.size, pa.size, pa.color, shape="circle"))

        if self.paused:
            calls.append(DrawCall("overlay", self.width / 2, self.height / 2, color=WHITE,
                                  shape="text", text="Game Paused", font_size=36))
        return calls
