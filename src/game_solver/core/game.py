"""
Abstract game contract.

Every game the solver can analyse implements :class:`Game`. The engine only
ever talks to a game through these methods:

- ``player()`` / ``is_draw()`` describe the current position
- ``possible_moves()`` / ``make_move()`` walk the game tree
- ``is_winning_move()`` detects the last ply without recursing
- ``score()`` / ``max_score()`` / ``min_score()`` bound the values searched

Game states double as transposition table keys, so implementations must
provide ``__eq__`` and ``__hash__`` such that two equal states always have the
same value. States handed to the parallel evaluator must also be picklable.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from .player import Player

Move = Any


class Game(ABC):
    """Abstract interface for a two-player, perfect-information game."""

    @abstractmethod
    def player(self) -> Player:
        """Return the player whose turn it is."""
        pass

    @abstractmethod
    def score(self) -> int:
        """
        Score the current position.

        Called on the position right after a winning move, and interpreted
        from the point of view of the player who made that move.
        """
        pass

    @abstractmethod
    def max_score(self) -> int:
        """Upper bound on any reachable score (non-negative)."""
        pass

    @abstractmethod
    def min_score(self) -> int:
        """Lower bound on any reachable score (zero or negative)."""
        pass

    @abstractmethod
    def make_move(self, move: Move) -> bool:
        """
        Apply a move in place.

        Args:
            move: Move to play

        Returns:
            True if the move was legal and applied, False otherwise (no-op)
        """
        pass

    @abstractmethod
    def possible_moves(self) -> Iterable[Move]:
        """
        Return all legal moves from the current position.

        If possible, the most promising moves should come first: the engine
        does not reorder them, and good ordering speeds up pruning.
        """
        pass

    @abstractmethod
    def is_winning_move(self, move: Move) -> Optional[Player]:
        """
        Check whether a move immediately ends the game in a win.

        Must not mutate the current state.

        Returns:
            The winning player, or None if the game goes on
        """
        pass

    @abstractmethod
    def is_draw(self) -> bool:
        """Return True if the current position is a terminal draw."""
        pass

    def clone(self) -> "Game":
        """Return an independent copy of this state."""
        return copy.deepcopy(self)
