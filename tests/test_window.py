import logging

import pytest

arcade = pytest.importorskip("arcade")

from skyfire.events import EventKind, GameEvent
from skyfire.game_state import GameState
from skyfire.window import AudioPlayer, SkyfireWindow


def _raise(exc):
    def _fail(*args, **kwargs):
        raise exc
    return _fail


def test_sound_load_failure_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(arcade, "load_sound", _raise(FileNotFoundError("boom.wav")))
    with caplog.at_level(logging.WARNING, logger="skyfire.window"):
        audio = AudioPlayer("boom.wav", "music.mp3")
    assert audio._explosion is None and audio._music is None
    assert sum(r.levelno == logging.WARNING for r in caplog.records) == 2

    # Nothing loaded, so events are no-ops
    audio.handle(GameEvent(EventKind.PLAY_EXPLOSION))
    audio.handle(GameEvent(EventKind.START_MUSIC))


def test_playback_failure_stays_out_of_the_loop(monkeypatch, caplog):
    monkeypatch.setattr(arcade, "load_sound", lambda *args, **kwargs: object())
    monkeypatch.setattr(arcade, "play_sound", _raise(RuntimeError("no audio device")))
    audio = AudioPlayer("boom.wav", "music.mp3")
    with caplog.at_level(logging.WARNING, logger="skyfire.window"):
        audio.handle(GameEvent(EventKind.PLAY_EXPLOSION))
        audio.handle(GameEvent(EventKind.START_MUSIC))
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "play_explosion" in warnings[0].getMessage()


def test_missing_sprite_falls_back_to_placeholder(monkeypatch, caplog):
    monkeypatch.setattr(arcade, "load_texture", _raise(FileNotFoundError("player_plane.png")))
    with caplog.at_level(logging.WARNING, logger="skyfire.window"):
        assert SkyfireWindow._load_texture("assets/sprites/player_plane.png") is None
    assert any("placeholder" in r.getMessage() for r in caplog.records)
    assert SkyfireWindow._load_texture(None) is None


def test_window_renders_at_requested_rate(monkeypatch):
    captured = {}

    def fake_init(self, *args, **kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(arcade.Window, "__init__", fake_init)
    monkeypatch.setattr(SkyfireWindow, "background_color", None, raising=False)
    monkeypatch.setattr(arcade, "load_texture", _raise(FileNotFoundError("player_plane.png")))
    monkeypatch.setattr(arcade, "load_sound", _raise(FileNotFoundError("sound")))

    SkyfireWindow(GameState(seed=0), render_fps=100)
    assert captured["draw_rate"] == pytest.approx(1 / 100)
    assert captured["update_rate"] == pytest.approx(1 / 100)
