from skyfire.play import main, run_headless_session


def test_headless_session_respects_tick_limit():
    game = run_headless_session(ticks=300, seed=1)
    assert not game.game_over
    assert game.time_remaining == 3600 - 300


def test_headless_session_is_reproducible():
    a = run_headless_session(ticks=600, seed=11)
    b = run_headless_session(ticks=600, seed=11)
    assert (a.score, a.player.health, a.player.x, a.player.y) == \
        (b.score, b.player.health, b.player.x, b.player.y)


def test_cli_headless(capsys):
    assert main(["--headless", "--ticks", "10", "--seed", "3", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "Score: 0" in out
    assert "Time left: 00:59" in out
