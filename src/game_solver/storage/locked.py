"""Thread-safe wrapper for sharing one table between worker threads."""

import threading
from typing import Optional

from ..core import Game
from .base import TranspositionTable
from .memory import HashMapTable


class LockedTable(TranspositionTable):
    """
    Serializes every access to an inner table behind a single lock.

    Lets thread-pool workers share memoized bounds across root moves.
    """

    thread_safe = True

    def __init__(self, inner: Optional[TranspositionTable] = None):
        """
        Initialize locked table.

        Args:
            inner: Table to protect (default: a fresh HashMapTable)
        """
        self.inner = inner if inner is not None else HashMapTable()
        self._lock = threading.Lock()

    def get(self, state: Game) -> Optional[int]:
        with self._lock:
            return self.inner.get(state)

    def insert(self, state: Game, score: int) -> None:
        with self._lock:
            self.inner.insert(state, score)

    def has(self, state: Game) -> bool:
        with self._lock:
            return self.inner.has(state)

    def __len__(self) -> int:
        with self._lock:
            return len(self.inner)
