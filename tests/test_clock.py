import pytest

from skyfire.clock import Phase, SimulationClock
from skyfire.utils import format_countdown


@pytest.mark.parametrize("ticks,text", [
    (3600, "01:00"),
    (3599, "00:59"),
    (1830, "00:30"),
    (59, "00:00"),
    (0, "00:00"),
    (7260, "02:01"),
])
def test_format_countdown(ticks, text):
    assert format_countdown(ticks) == text


def test_countdown_runs_out_on_last_tick():
    clock = SimulationClock(session_ticks=3600)
    for _ in range(3599):
        assert clock.countdown() is False
    assert clock.time_remaining == 1
    assert clock.countdown() is True
    assert clock.time_remaining == 0
    assert clock.countdown() is False
    assert clock.time_remaining == 0


def test_pause_toggle():
    clock = SimulationClock()
    assert clock.phase is Phase.RUNNING
    assert clock.toggle_pause()
    assert clock.paused
    assert clock.toggle_pause()
    assert clock.running


def test_game_over_is_terminal_until_reset():
    clock = SimulationClock()
    clock.finish()
    assert clock.toggle_pause() is False
    assert clock.game_over
    clock.reset()
    assert clock.running
    assert clock.time_remaining == 3600


def test_consume_whole_ticks():
    clock = SimulationClock(ticks_per_second=60)
    assert clock.consume(1 / 60) == 1
    assert clock.consume(1 / 120) == 0
    assert clock.consume(1 / 120) == 1


def test_consume_caps_slow_frames():
    clock = SimulationClock(max_ticks_per_frame=5)
    assert clock.consume(10.0) == 5
    assert clock.consume(0.0) == 0


def test_consume_while_paused():
    clock = SimulationClock()
    clock.toggle_pause()
    assert clock.consume(1.0) == 0
    clock.toggle_pause()
    assert clock.consume(0.0) == 0


def test_invalid_session_length():
    with pytest.raises(ValueError):
        SimulationClock(session_ticks=0)
