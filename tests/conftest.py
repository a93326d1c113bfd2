"""Shared test fixtures."""

import pytest

from game_solver import HashMapTable


def minimax(game) -> int:
    """Plain minimax: no pruning, no table."""
    if game.is_draw():
        return 0

    player = game.player()
    outcomes = [(move, game.is_winning_move(move)) for move in game.possible_moves()]

    for move, winner in outcomes:
        if winner == player:
            board = game.clone()
            board.make_move(move)
            return board.score()

    if not outcomes:
        return 0

    best = None
    for move, winner in outcomes:
        board = game.clone()
        board.make_move(move)
        value = -board.score() if winner is not None else -minimax(board)
        if best is None or value > best:
            best = value
    return best


@pytest.fixture
def brute_force():
    """Exhaustive minimax reference solver."""
    return minimax


@pytest.fixture
def table() -> HashMapTable:
    """Fresh default transposition table."""
    return HashMapTable()
