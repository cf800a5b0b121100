from __future__ import annotations

import logging
import random

from eltetris import Engine
from eltetris.__main__ import main, run


def test_run_stops_after_piece_budget() -> None:
    engine = Engine()
    ended = run(engine, 30, random.Random(0))
    assert ended is False
    assert engine.moves == 30


def test_main_logs_summary_and_prints_board(caplog, capsys) -> None:
    with caplog.at_level(logging.INFO, logger="eltetris"):
        main(["--pieces", "25", "--seed", "1", "--show-board"])

    assert "Stopped after 25 moves" in caplog.text
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 20
    assert all(len(line) == 10 and set(line) <= {"#", "."} for line in lines)
