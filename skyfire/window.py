"""
Arcade host for a Skyfire session

Turns key presses into input intents, frame time into logical ticks, draw
calls into arcade primitives and audio events into sound playback.
"""

from __future__ import annotations

import logging
from typing import Optional, Set

import arcade

from .configs.game_config import CLOCK_CONFIG, GAME_CONFIG, WINDOW_CONFIG
from .entities import InputIntent
from .events import DrawCall, EventKind, GameEvent
from .game_state import GameState

logger = logging.getLogger(__name__)

UP_KEYS = {arcade.key.UP, arcade.key.W}
DOWN_KEYS = {arcade.key.DOWN, arcade.key.S}
LEFT_KEYS = {arcade.key.LEFT, arcade.key.A}
RIGHT_KEYS = {arcade.key.RIGHT, arcade.key.D}
RESTART_KEYS = {arcade.key.R, arcade.key.ENTER}


class AudioPlayer:
    """Plays sound events. Failures are logged and swallowed."""

    def __init__(
        self,
        explosion_path: Optional[str],
        music_path: Optional[str],
        explosion_volume: float = 0.5,
        music_volume: float = 0.3,
    ):
        self.explosion_volume = explosion_volume
        self.music_volume = music_volume
        self._explosion = self._load(explosion_path)
        self._music = self._load(music_path, streaming=True)
        self._music_player = None

    @staticmethod
    def _load(path: Optional[str], streaming: bool = False):
        if not path:
            return None
        try:
            return arcade.load_sound(path, streaming=streaming)
        except Exception as exc:
            logger.warning("Could not load sound %s: %s", path, exc)
            return None

    def handle(self, event: GameEvent):
        try:
            if event.kind is EventKind.PLAY_EXPLOSION:
                if self._explosion is not None:
                    arcade.play_sound(self._explosion, volume=self.explosion_volume)
            elif event.kind is EventKind.START_MUSIC:
                self._start_music()
            elif event.kind is EventKind.PAUSE_MUSIC:
                if self._music_player is not None:
                    self._music_player.pause()
            elif event.kind is EventKind.STOP_AND_REWIND_MUSIC:
                if self._music_player is not None:
                    arcade.stop_sound(self._music_player)
                    self._music_player = None
        except Exception as exc:
            logger.warning("Audio playback failed for %s: %s", event.kind.value, exc)

    def _start_music(self):
        if self._music is None:
            return
        if self._music_player is not None:
            self._music_player.play()
            return
        self._music_player = arcade.play_sound(self._music, volume=self.music_volume, loop=True)


class SkyfireWindow(arcade.Window):
    """Arcade window driving a GameState at a fixed logical tick rate"""

    def __init__(self, game: Optional[GameState] = None, title: str = WINDOW_CONFIG["title"],
                 render_fps: int = WINDOW_CONFIG["render_fps"]):
        self.game = game if game is not None else GameState(**GAME_CONFIG, **CLOCK_CONFIG)
        super().__init__(self.game.width, self.game.height, title,
                         update_rate=1 / render_fps, draw_rate=1 / render_fps)
        self.background_color = arcade.color.BLACK

        self._held: Set[int] = set()
        self._player_texture = self._load_texture(self.game.player_sprite)
        self.audio = AudioPlayer(
            WINDOW_CONFIG["explosion_sound"],
            WINDOW_CONFIG["music"],
            explosion_volume=WINDOW_CONFIG["explosion_volume"],
            music_volume=WINDOW_CONFIG["music_volume"],
        )
        self.banner: Optional[str] = None

        # Colors
        self.HUD_C = (220, 220, 220)
        self.BANNER_C = (255, 80, 80)

    @staticmethod
    def _load_texture(path: Optional[str]):
        if not path:
            return None
        try:
            return arcade.load_texture(path)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load player image %s (%s); drawing placeholder", path, exc)
            return None

    # ----------------------------
    # Input
    # ----------------------------

    def _intent(self) -> InputIntent:
        held = self._held
        return InputIntent(
            up=bool(held & UP_KEYS),
            down=bool(held & DOWN_KEYS),
            left=bool(held & LEFT_KEYS),
            right=bool(held & RIGHT_KEYS),
        )

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.game.request_pause_toggle()
            return
        if symbol in RESTART_KEYS and (self.game.paused or self.game.game_over):
            self._held.clear()
            self.banner = None
            self.game.request_restart()
            return
        self._held.add(symbol)
        self.game.set_input_intent(self._intent())

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)
        self.game.set_input_intent(self._intent())

    # ----------------------------
    # Simulation
    # ----------------------------

    def on_update(self, delta_time: float):
        self.game.advance_time(delta_time)
        for event in self.game.drain_events():
            if event.is_audio:
                self.audio.handle(event)
            elif event.message:
                logger.info(event.message)
                self.banner = event.message

    # ----------------------------
    # Rendering
    # ----------------------------

    def _draw(self, call: DrawCall):
        # Flip from top-left/y-down to arcade's bottom-left/y-up
        if call.shape == "circle":
            arcade.draw_circle_filled(call.x, self.height - call.y, call.width, call.color)
        elif call.shape == "text":
            arcade.draw_text(call.text or "", call.x, self.height - call.y, call.color,
                             call.font_size, anchor_x="center", anchor_y="center")
        elif call.image is not None and self._player_texture is not None:
            rect = arcade.LBWH(call.x, self.height - call.y - call.height, call.width, call.height)
            arcade.draw_texture_rect(self._player_texture, rect)
        else:
            bottom = self.height - call.y - call.height
            arcade.draw_lrbt_rectangle_filled(call.x, call.x + call.width, bottom,
                                              bottom + call.height, call.color)
            if call.image is not None:
                arcade.draw_text("Loading...", call.x + 5, self.height - call.y - 15,
                                 arcade.color.RED, 12)

    def on_draw(self):
        self.clear()
        for call in self.game.draw_calls():
            self._draw(call)

        hud = self.game.hud()
        txt = f"Score: {hud.score}  Health: {hud.health}  Time: {hud.timer}"
        arcade.draw_text(txt, 12, self.height - 24, self.HUD_C, 14)
        if hud.game_over and self.banner:
            arcade.draw_text(self.banner, self.width / 2, self.height / 2, self.BANNER_C, 28,
                             anchor_x="center", anchor_y="center")
            arcade.draw_text("Press R to restart", self.width / 2, self.height / 2 - 40,
                             self.HUD_C, 16, anchor_x="center", anchor_y="center")


def run_window(game: Optional[GameState] = None, render_fps: int = WINDOW_CONFIG["render_fps"]):
    """Open the window and block until it is closed"""
    window = SkyfireWindow(game, render_fps=render_fps)
    arcade.run()
    return window
