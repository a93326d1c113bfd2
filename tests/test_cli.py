"""Smoke tests for the command-line interface."""

import logging

import pytest

from game_solver.cli.main import build_game, main
from game_solver.games import Chomp, Domineering, Nim, TicTacToe


def test_solve_nim(capsys):
    """Solving Nim prints the value and the move table."""
    assert main(["--log-level", "WARNING", "nim", "--heaps", "1", "2"]) == 0

    out = capsys.readouterr().out
    assert "Position value" in out
    assert "Move scores" in out


def test_solve_parallel_threads(capsys):
    """Thread workers sharing a locked table work end to end."""
    argv = ["--log-level", "WARNING", "chomp", "--width", "3", "--height", "2",
            "--parallel", "--threads", "--workers", "2", "--no-progress"]

    assert main(argv) == 0
    assert "winning" in capsys.readouterr().out


def test_solve_parallel_processes(capsys, caplog):
    """Worker processes work end to end; only the root table size is reported."""
    caplog.set_level(logging.INFO, logger="game_solver.utils.memory")
    argv = ["--log-level", "WARNING", "domineering", "--width", "2", "--height", "3",
            "--parallel", "--workers", "2", "--no-progress"]

    assert main(argv) == 0
    assert "Move scores" in capsys.readouterr().out
    assert "root table entries=" in caplog.text


def test_solve_reports_table_size(caplog):
    """A sequential run reports the size of the table every move shared."""
    caplog.set_level(logging.INFO, logger="game_solver.utils.memory")

    assert main(["--log-level", "WARNING", "nim", "--heaps", "1", "2"]) == 0
    assert "table entries=" in caplog.text
    assert "root table entries" not in caplog.text


def test_invalid_game_parameters():
    """Bad game parameters exit through argparse."""
    with pytest.raises(SystemExit) as exc:
        main(["chomp", "--width", "1", "--height", "1"])
    assert exc.value.code == 2


def test_empty_nim_is_rejected():
    """Nim without objects has no winner and is refused."""
    with pytest.raises(SystemExit) as exc:
        main(["nim", "--heaps", "0"])
    assert exc.value.code == 2


def test_no_game_prints_help(capsys):
    """Running without a game shows usage."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_build_game_defaults():
    """Each subcommand builds its game from parsed arguments."""

    class Args:
        pass

    args = Args()
    args.game = "nim"
    args.heaps = [3, 5, 7]
    assert build_game(args) == Nim([3, 5, 7])

    args.game = "tic-tac-toe"
    args.size = 3
    args.win_length = None
    assert build_game(args) == TicTacToe()

    args.game = "chomp"
    args.width = 4
    args.height = 3
    assert build_game(args) == Chomp(4, 3)

    args.game = "domineering"
    args.width = 4
    args.height = 4
    assert build_game(args) == Domineering(4, 4)
