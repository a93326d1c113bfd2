"""Example games implementing the solver's game contract."""

from .nim import Nim
from .tic_tac_toe import TicTacToe
from .chomp import Chomp
from .domineering import Domineering

__all__ = [
    "Nim",
    "TicTacToe",
    "Chomp",
    "Domineering",
]
