import logging

from blockfall.__main__ import main, simulate
from blockfall.game_state import GameSession


def test_headless_demo_prints_board(capsys):
    main(["--ticks", "100", "--seed", "3", "--log-level", "WARNING"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 20
    assert all(len(line) == 10 and set(line) <= {"#", "."} for line in lines)


def test_headless_demo_honours_geometry(capsys):
    main(["--ticks", "0", "--width", "128", "--height", "160", "--log-level", "WARNING"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(len(line) == 4 for line in lines)


def test_simulate_stops_at_game_over(caplog):
    session = GameSession(seed=0)
    session.scheduler.frames = 0
    with caplog.at_level(logging.INFO, logger="blockfall.placement"):
        processed = simulate(session, 5000)
    assert session.game_over
    assert processed < 5000
    assert any("Game over" in message for message in caplog.messages)
