import pytest

from skyfire.game_state import GameState

NEVER = 10 ** 9


@pytest.fixture
def game():
    """Seeded session with the default spawn cadence"""
    return GameState(seed=1234)


@pytest.fixture
def quiet_game():
    """Seeded session where nothing spawns on its own"""
    return GameState(seed=1234, enemy_spawn_interval=NEVER, powerup_spawn_interval=NEVER)
