"""Tests for sequential and parallel move scoring."""

import pytest

from game_solver import HashMapTable, LockedTable, NullTable, move_scores, par_move_scores, solve
from game_solver.games import Chomp, Domineering, Nim, TicTacToe


def test_nim_single_object_scores():
    """The only move takes the last object and wins."""
    game = Nim([1])

    assert list(game.possible_moves()) == [(0, 1)]

    scores = list(move_scores(game, HashMapTable()))
    assert len(scores) == 1
    move, score = scores[0]
    assert move == (0, 1)
    assert score > 0


def test_move_scores_is_lazy():
    """Nothing is solved until the generator is consumed."""
    table = HashMapTable()
    scores = move_scores(Nim([2, 3]), table)

    assert len(table) == 0
    next(scores)
    assert len(table) > 0


@pytest.mark.parametrize(
    "game",
    [Nim([1, 2, 3]), Chomp(3, 2), Domineering(3, 3), TicTacToe(3, 2)],
)
def test_move_scores_cardinality_and_order(game):
    """One pair per legal move, in possible_moves() order."""
    scores = list(move_scores(game, HashMapTable()))

    assert [move for move, _ in scores] == list(game.possible_moves())


@pytest.mark.parametrize("game", [Nim([1, 2, 3]), Chomp(3, 2), Domineering(2, 4)])
def test_move_scores_consistent_with_solve(game):
    """Each score is minus the value of the position after the move."""
    for move, score in move_scores(game, HashMapTable()):
        board = game.clone()
        assert board.make_move(move)
        assert score == -solve(board, HashMapTable())


def test_best_move_score_equals_value():
    """The best move scores exactly the value of the position."""
    game = Chomp(3, 3)
    scores = list(move_scores(game, HashMapTable()))

    assert max(score for _, score in scores) == solve(game, HashMapTable())


def test_nim_winning_moves_reach_zero_nim_sum():
    """Winning Nim moves are exactly those leaving a zero nim-sum."""
    game = Nim([1, 2, 4])

    for (heap, amount), score in move_scores(game, HashMapTable()):
        heaps = list(game.heaps)
        heaps[heap] -= amount
        nim_sum = heaps[0] ^ heaps[1] ^ heaps[2]
        assert (score > 0) == (nim_sum == 0)


@pytest.mark.parametrize("game", [Nim([1, 2, 3]), Chomp(3, 2), Domineering(3, 3)])
def test_parallel_matches_sequential(game):
    """Worker processes produce the same pairs, in any order."""
    sequential = sorted(move_scores(game, HashMapTable()))
    parallel = sorted(par_move_scores(game, num_workers=2))

    assert parallel == sequential


def test_parallel_threads_with_shared_table():
    """Thread workers can share a locked table."""
    game = Domineering(3, 3)
    table = LockedTable()

    parallel = sorted(par_move_scores(game, num_workers=3, table=table, use_threads=True))
    sequential = sorted(move_scores(game, HashMapTable()))

    assert parallel == sequential
    assert len(table) > 0


def test_parallel_threads_with_private_tables():
    """Without a shared table every thread task builds its own."""
    game = Chomp(3, 2)

    parallel = sorted(par_move_scores(game, table_factory=NullTable, use_threads=True))

    assert parallel == sorted(move_scores(game, HashMapTable()))


def test_parallel_rejects_unsafe_shared_table():
    """A plain dict table must not be shared between threads."""
    with pytest.raises(ValueError, match="not thread-safe"):
        par_move_scores(Nim([2]), table=HashMapTable(), use_threads=True)


def test_parallel_rejects_shared_table_for_processes():
    """Worker processes cannot share a table at all."""
    with pytest.raises(ValueError, match="thread workers"):
        par_move_scores(Nim([2]), table=LockedTable())


def test_parallel_no_moves():
    """A finished game yields no scores and starts no pool."""
    game = Nim([1])
    game.make_move((0, 1))

    assert par_move_scores(game) == []
    assert list(move_scores(game, HashMapTable())) == []


def test_parallel_with_progress_bar():
    """The progress bar does not change the results."""
    game = Nim([2, 2])

    scores = par_move_scores(game, num_workers=2, progress=True)

    assert len(scores) == 4
    # Nim-sum is zero: every move loses
    assert all(score < 0 for _, score in scores)
