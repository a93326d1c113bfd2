"""Abstract base class for transposition tables."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core import Game


class TranspositionTable(ABC):
    """
    Memoization interface over game states.

    Stores one integer bound per state. There is no eviction and no ordering
    guarantee; an implementation that never remembers anything is still
    correct, only slower.
    """

    # Set to True only if concurrent get/insert from several threads is safe
    thread_safe = False

    @abstractmethod
    def get(self, state: Game) -> Optional[int]:
        """
        Retrieve the stored bound for a state.

        Args:
            state: Game state (used as key)

        Returns:
            Stored bound, or None if the state is unknown
        """
        pass

    @abstractmethod
    def insert(self, state: Game, score: int) -> None:
        """
        Store a bound for a state, replacing any previous value.

        Args:
            state: Game state (used as key)
            score: Bound learned during search
        """
        pass

    @abstractmethod
    def has(self, state: Game) -> bool:
        """
        Check if a state has an entry.

        Args:
            state: Game state

        Returns:
            True if exists
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored entries."""
        pass
