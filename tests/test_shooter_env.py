import numpy as np

from skyfire.entities import Enemy
from skyfire.shooter_env import SkyfireEnv, run_random_episode


def test_reset_observation():
    env = SkyfireEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["health"] == 100
    assert info["time_remaining"] == 3600


def test_step_moves_player():
    env = SkyfireEnv()
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(np.array([1, 0, 0, 0]))
    assert env.game.player.y == 495
    assert env.observation_space.contains(obs)
    assert isinstance(reward, float)
    assert not terminated and not truncated
    assert info["time_remaining"] == 3599


def test_reset_with_seed_is_reproducible():
    env = SkyfireEnv()
    env.reset(seed=5)
    first = [env.step(np.array([0, 0, 1, 0]))[0] for _ in range(200)]
    env.reset(seed=5)
    second = [env.step(np.array([0, 0, 1, 0]))[0] for _ in range(200)]
    for a, b in zip(first, second):
        np.testing.assert_array_equal(a, b)


def test_short_session_truncates():
    env = SkyfireEnv(session_ticks=100)
    env.reset(seed=1)
    steps = 0
    terminated = truncated = False
    while not (terminated or truncated):
        _, _, terminated, truncated, _ = env.step(env.action_space.sample())
        steps += 1
    assert truncated and not terminated
    assert steps == 100


def test_death_terminates():
    env = SkyfireEnv(enemy_spawn_interval=10 ** 9)
    env.reset(seed=1)
    env.game.player.health = 20
    env.game.enemies.append(Enemy.spawned(400, 480, "basic", health=1))
    _, reward, terminated, truncated, _ = env.step(np.array([0, 0, 0, 0]))
    assert terminated and not truncated
    assert reward < 0


def test_random_episode_headless():
    info = run_random_episode(render=False, seed=3)
    assert info["score"] % 100 == 0
    assert "return" in info


def test_no_reward_after_episode_ends():
    env = SkyfireEnv(enemy_spawn_interval=10 ** 9)
    env.reset(seed=1)
    env.game.player.health = 20
    env.game.enemies.append(Enemy.spawned(400, 480, "basic", health=1))
    _, reward, terminated, _, _ = env.step(np.array([0, 0, 0, 0]))
    assert terminated and reward < 0

    _, reward, terminated, truncated, _ = env.step(np.array([1, 0, 0, 0]))
    assert reward == 0.0
    assert terminated and not truncated
