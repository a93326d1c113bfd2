"""Game contract and player representation."""

from .player import Player
from .game import Game, Move

__all__ = [
    "Player",
    "Game",
    "Move",
]
