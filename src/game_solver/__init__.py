"""
Generic two-player game solver.

Games implement :class:`Game`; the solver computes exact values with
negamax, alpha-beta pruning and a pluggable transposition table.
"""

from .core import Game, Player
from .storage import TranspositionTable, HashMapTable, NullTable, LockedTable
from .solver import solve, move_scores, par_move_scores

__version__ = "0.1.0"

__all__ = [
    "Game",
    "Player",
    "TranspositionTable",
    "HashMapTable",
    "NullTable",
    "LockedTable",
    "solve",
    "move_scores",
    "par_move_scores",
]
