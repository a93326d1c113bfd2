"""Negamax search, exact solver and move scoring."""

from .negamax import negamax, solve
from .scores import move_scores, par_move_scores

__all__ = [
    "negamax",
    "solve",
    "move_scores",
    "par_move_scores",
]
