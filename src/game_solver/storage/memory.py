"""In-memory transposition table backends."""

from typing import Dict, Optional

from ..core import Game
from .base import TranspositionTable


class HashMapTable(TranspositionTable):
    """
    Default transposition table: a plain dict keyed by game state.

    Grows without bound for the lifetime of the instance. Not safe to share
    between threads; wrap it in :class:`~game_solver.storage.locked.LockedTable`
    for that.
    """

    def __init__(self):
        self._entries: Dict[Game, int] = {}

    def get(self, state: Game) -> Optional[int]:
        return self._entries.get(state)

    def insert(self, state: Game, score: int) -> None:
        self._entries[state] = score

    def has(self, state: Game) -> bool:
        return state in self._entries

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NullTable(TranspositionTable):
    """Table that never remembers anything. Forces a full search."""

    thread_safe = True

    def get(self, state: Game) -> Optional[int]:
        return None

    def insert(self, state: Game, score: int) -> None:
        pass

    def has(self, state: Game) -> bool:
        return False

    def __len__(self) -> int:
        return 0
