"""Transposition table backends."""

from .base import TranspositionTable
from .memory import HashMapTable, NullTable
from .locked import LockedTable

__all__ = ["TranspositionTable", "HashMapTable", "NullTable", "LockedTable"]
