"""
Play Skyfire in an arcade window, or run a headless random-input session

Usage:
    python -m skyfire.play
    python -m skyfire.play --headless --ticks 3600 --seed 42
"""

import argparse
import logging
import random
from typing import Optional

from skyfire.configs.game_config import CLOCK_CONFIG, GAME_CONFIG, WINDOW_CONFIG
from skyfire.entities import InputIntent
from skyfire.game_state import GameState
from skyfire.utils import seed_everything

logger = logging.getLogger(__name__)


def run_headless_session(ticks: Optional[int] = None, seed: Optional[int] = None,
                         hold_ticks: int = 15) -> GameState:
    """
    Drive a session with random movement until it ends or `ticks` run out

    Args:
        ticks: Maximum number of ticks to simulate (None = until game over)
        seed: Seed for both the session and the random input
        hold_ticks: How long each random input is held
    """
    seed_everything(seed)
    game = GameState(seed=seed, **GAME_CONFIG, **CLOCK_CONFIG)
    limit = ticks if ticks is not None else game.clock.session_ticks

    for t in range(limit):
        if game.game_over:
            break
        if t % hold_ticks == 0:
            game.set_input_intent(InputIntent(
                up=random.random() < 0.3,
                down=random.random() < 0.3,
                left=random.random() < 0.5,
                right=random.random() < 0.5,
            ))
        game.tick()
        for event in game.drain_events():
            if event.message:
                logger.info(event.message)

    return game


def main(argv=None):
    parser = argparse.ArgumentParser(description="Skyfire arcade shooter")
    parser.add_argument("--headless", action="store_true",
                        help="Run a random-input session without a window")
    parser.add_argument("--ticks", type=int, default=None,
                        help="Tick limit for --headless (default: full session)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--fps", type=int, default=WINDOW_CONFIG["render_fps"],
                        help="Render rate of the window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.headless:
        game = run_headless_session(ticks=args.ticks, seed=args.seed)
        hud = game.hud()
        print(f"Score: {hud.score}  Health: {hud.health}  Time left: {hud.timer}"
              f"  Game over: {hud.game_over}")
        return 0

    # Imported here so headless runs never need a display
    from skyfire.window import run_window
    run_window(GameState(seed=args.seed, **GAME_CONFIG, **CLOCK_CONFIG), render_fps=args.fps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
