"""
SkyfireEnv - gymnasium wrapper around a Skyfire session
-------------------------------------------------------
- One GameState per episode, one logical tick per step
- MultiDiscrete action space: [up(2), down(2), left(2), right(2)]
- Vector observation: player state + top-K nearest enemies + top-M nearest power-ups
- Episode terminates when health runs out and truncates when the clock does

Quick test:
    python -m skyfire.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .configs.game_config import ENV_CONFIG, GAME_CONFIG, REWARD_CONFIG
from .entities import MAX_ENEMY_HEALTH, MAX_PLAYER_HEALTH, POWERUP_KINDS, InputIntent
from .game_state import GameState
from .utils import clamp


class SkyfireEnv(gym.Env):
    """Headless-by-default agent harness for the shooter"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_powerups: int = ENV_CONFIG["m_powerups"],
        reward_config: Optional[Dict[str, float]] = None,
        **game_config,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.k_enemies = k_enemies
        self.m_powerups = m_powerups
        self.reward_config = dict(REWARD_CONFIG if reward_config is None else reward_config)
        self.game_config = {**GAME_CONFIG, **game_config}

        # up, down, left, right
        self.action_space = spaces.MultiDiscrete([2, 2, 2, 2])

        # Player: pos(2) health(1) bullet speed(1) bullet power(1) fire timer(1)
        # Each enemy: rel pos(2) health(1)
        # Each power-up: rel pos(2) kind(1)
        obs_dim = 6 + (self.k_enemies * 3) + (self.m_powerups * 3)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.game: GameState = None  # type: ignore

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = GameState(seed=game_seed, **self.game_config)
        if self._window is not None:
            self._window.game = self.game
        return self._get_obs(), self._get_info()

    def step(self, action):
        was_over = self.game.game_over
        up, down, left, right = (bool(a) for a in action)
        self.game.set_input_intent(InputIntent(up=up, down=down, left=left, right=right))

        self.game.tick()
        self.game.drain_events()

        if was_over:
            # Nothing happens once the session has ended
            reward = 0.0
        else:
            report = self.game.last_report
            reward = self._compute_reward(len(report.kills), len(report.rammed), len(report.collected))

        terminated = self.game.game_over and self.game.player.health <= 0
        truncated = self.game.game_over and not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _compute_reward(self, kills: float, damage: float, collected: float) -> float:
        rc = self.reward_config
        reward = 0.0
        reward += rc["R_KILL"] * kills
        reward += rc["R_POWERUP"] * collected
        reward -= rc["R_DAMAGE"] * damage
        reward -= rc["R_TIME"]
        if self.game.player.health <= 0:
            reward -= rc["R_DEATH"]
        return float(reward)

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        game = self.game
        p = game.player
        w, h = game.width, game.height
        px, py = p.center

        obs_parts = [
            (p.x / max(1, w - p.width)) * 2 - 1,
            (p.y / max(1, h - p.height)) * 2 - 1,
            (p.health / MAX_PLAYER_HEALTH) * 2 - 1,
            clamp(p.bullet_speed / 20.0, 0, 1) * 2 - 1,
            clamp(p.bullet_power / 5.0, 0, 1) * 2 - 1,
            (p.shoot_timer / max(1, p.fire_interval)) * 2 - 1,
        ]

        enemies_sorted = sorted(
            game.enemies,
            key=lambda e: (e.center[0] - px) ** 2 + (e.center[1] - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                ex, ey = e.center
                obs_parts += [
                    clamp((ex - px) / w, -1, 1),
                    clamp((ey - py) / h, -1, 1),
                    e.health / MAX_ENEMY_HEALTH,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        powerups_sorted = sorted(
            game.powerups,
            key=lambda u: (u.center[0] - px) ** 2 + (u.center[1] - py) ** 2
        )
        for i in range(self.m_powerups):
            if i < len(powerups_sorted):
                u = powerups_sorted[i]
                ux, uy = u.center
                kind = (POWERUP_KINDS.index(u.kind) + 1) / len(POWERUP_KINDS)
                obs_parts += [clamp((ux - px) / w, -1, 1), clamp((uy - py) / h, -1, 1), kind]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "health": self.game.player.health,
            "time_remaining": self.game.time_remaining,
            "num_enemies": len(self.game.enemies),
            "num_powerups": len(self.game.powerups),
            "num_bullets": len(self.game.bullets),
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode != "human":
            return None
        if self._window is None:
            from .window import SkyfireWindow
            self._window = SkyfireWindow(self.game)
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(render: bool = False, seed: Optional[int] = 42) -> Dict[str, Any]:
    """Play one episode with random actions and return the final info"""
    env = SkyfireEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    info["return"] = total
    env.close()
    return info


if __name__ == "__main__":
    result = run_random_episode(render=True)
    print(f"Random episode score: {result['score']}  return: {result['return']:.2f}")
