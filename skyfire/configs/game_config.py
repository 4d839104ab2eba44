"""
Session configuration for the Skyfire shooter
Plain dicts so they can be splatted into GameState / SkyfireWindow / SkyfireEnv
"""

# Simulation parameters
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "session_ticks": 60 * 60,  # 60 seconds at 60 ticks/sec
    "enemy_spawn_interval": 60,  # ticks
    "powerup_spawn_interval": 300,  # ticks
}

# Clock parameters
CLOCK_CONFIG = {
    "ticks_per_second": 60,
    "max_ticks_per_frame": 5,
}

# ==============================================================================
# HOST WINDOW
# ==============================================================================

WINDOW_CONFIG = {
    "title": "Skyfire",
    "render_fps": 100,
    "player_sprite": "assets/sprites/player_plane.png",
    "explosion_sound": "assets/sounds/explosion.mp3",
    "music": "assets/sounds/music.mp3",
    "explosion_volume": 0.5,
    "music_volume": 0.3,
}

# ==============================================================================
# AGENT HARNESS
# ==============================================================================

ENV_CONFIG = {
    "k_enemies": 5,
    "m_powerups": 2,
}

# Reward shaping for the agent harness
REWARD_CONFIG = {
    "R_KILL": 1.0,       # per 100 score points
    "R_DAMAGE": 1.0,     # per 20 health lost
    "R_POWERUP": 0.5,    # per power-up collected
    "R_TIME": 0.001,     # small per-tick penalty
    "R_DEATH": 5.0,      # health game over
}
