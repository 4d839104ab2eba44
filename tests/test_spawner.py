import random

import pytest

from skyfire.entities import ENEMY_KINDS, ENEMY_SPEEDS, POWERUP_KINDS
from skyfire.spawner import SpawnController


def test_enemy_every_sixty_ticks():
    spawner = SpawnController(random.Random(0))
    for _ in range(59):
        enemies, _ = spawner.tick()
        assert enemies == []
    enemies, _ = spawner.tick()
    assert len(enemies) == 1
    # Timer reset on fire
    for _ in range(59):
        assert spawner.tick()[0] == []
    assert len(spawner.tick()[0]) == 1


def test_powerup_every_three_hundred_ticks():
    spawner = SpawnController(random.Random(0))
    counts = [len(spawner.tick()[1]) for _ in range(900)]
    assert sum(counts) == 3
    assert [i for i, c in enumerate(counts) if c] == [299, 599, 899]


def test_spawned_enemies_follow_kind_rules():
    spawner = SpawnController(random.Random(42), width=800)
    enemies = [spawner.spawn_enemy() for _ in range(300)]
    assert {e.kind for e in enemies} == set(ENEMY_KINDS)
    for e in enemies:
        assert 0 <= e.x < 750
        assert e.y == -50
        assert e.speed == ENEMY_SPEEDS[e.kind]
        assert 1 <= e.health <= 3
        if e.kind == "strong":
            assert e.health == 3


def test_spawned_powerups():
    spawner = SpawnController(random.Random(42), width=800)
    powerups = [spawner.spawn_powerup() for _ in range(100)]
    assert {p.kind for p in powerups} == set(POWERUP_KINDS)
    for p in powerups:
        assert 0 <= p.x < 770
        assert p.y == -30
        assert p.speed == 2


def test_same_seed_same_spawns():
    a = SpawnController(random.Random(9))
    b = SpawnController(random.Random(9))
    assert [a.spawn_enemy() for _ in range(10)] == [b.spawn_enemy() for _ in range(10)]


def test_reset_restarts_timers():
    spawner = SpawnController(random.Random(0))
    for _ in range(50):
        spawner.tick()
    spawner.reset()
    for _ in range(59):
        assert spawner.tick()[0] == []
    assert len(spawner.tick()[0]) == 1


def test_invalid_interval():
    with pytest.raises(ValueError):
        SpawnController(random.Random(0), enemy_spawn_interval=0)
