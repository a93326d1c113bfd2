"""Tests for players and the game contract."""

import pickle

import pytest

from game_solver import Game, Player
from game_solver.games import Nim


def test_opposite_is_involution():
    """Flipping twice returns the same player."""
    for player in Player:
        assert player.opposite() != player
        assert player.opposite().opposite() == player


def test_player_from_move_count():
    """P1 moves on even move counts."""
    assert Player.from_move_count(0) == Player.P1
    assert Player.from_move_count(1) == Player.P2
    assert Player.from_move_count(6) == Player.P1


def test_game_is_abstract():
    """The contract cannot be instantiated directly."""
    with pytest.raises(TypeError):
        Game()


def test_default_clone_is_deep_copy():
    """Game.clone() falls back to a deep copy."""

    class Counter(Game):
        def __init__(self):
            self.moves = []

        def player(self):
            return Player.from_move_count(len(self.moves))

        def score(self):
            return 1

        def max_score(self):
            return 1

        def min_score(self):
            return -1

        def make_move(self, move):
            self.moves.append(move)
            return True

        def possible_moves(self):
            return []

        def is_winning_move(self, move):
            return None

        def is_draw(self):
            return False

    game = Counter()
    copy = game.clone()
    copy.make_move("a")

    assert game.moves == []
    assert copy.moves == ["a"]


def test_states_are_picklable():
    """Parallel workers receive states by pickling."""
    game = Nim([2, 3])
    game.make_move((0, 1))

    restored = pickle.loads(pickle.dumps(game))

    assert restored == game
    assert hash(restored) == hash(game)
