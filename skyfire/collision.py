"""
Collision detection and the outcome pass of collision resolution

`CollisionDetector.resolve` only reads the world and returns a report;
`GameState` applies the report afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .entities import Bullet, Enemy, Entity, Player, PowerUp
from .utils import aabb_overlap


@dataclass
class BulletHit:
    bullet: Bullet
    enemy: Enemy
    killed: bool


@dataclass
class CollisionReport:
    """Everything that collided this tick, in resolution order"""
    hits: List[BulletHit] = field(default_factory=list)
    rammed: List[Enemy] = field(default_factory=list)
    collected: List[PowerUp] = field(default_factory=list)

    @property
    def kills(self) -> List[Enemy]:
        return [h.enemy for h in self.hits if h.killed]

    @property
    def spent_bullets(self) -> List[Bullet]:
        return [h.bullet for h in self.hits]


class CollisionDetector:
    """AABB collision tests between the player, bullets, enemies and power-ups"""

    @staticmethod
    def overlaps(a: Entity, b: Entity) -> bool:
        return aabb_overlap(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)

    def resolve(
        self,
        player: Player,
        bullets: List[Bullet],
        enemies: List[Enemy],
        powerups: List[PowerUp],
    ) -> CollisionReport:
        report = CollisionReport()

        # Bullets vs enemies: each bullet registers on the first live enemy it touches
        remaining: Dict[int, int] = {id(e): e.health for e in enemies}
        for b in bullets:
            for e in enemies:
                if remaining[id(e)] <= 0:
                    continue
                if self.overlaps(b, e):
                    remaining[id(e)] -= 1
                    report.hits.append(BulletHit(b, e, killed=remaining[id(e)] <= 0))
                    break

        # Player vs surviving enemies
        for e in enemies:
            if remaining[id(e)] <= 0:
                continue
            if self.overlaps(player, e):
                report.rammed.append(e)

        # Player vs power-ups
        for p in powerups:
            if self.overlaps(player, p):
                report.collected.append(p)

        return report
