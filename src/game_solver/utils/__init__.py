"""Utility modules for the game solver."""

from .memory import MemoryStats, get_memory_stats, log_memory_status
from .rich_display import SolverDisplay

__all__ = [
    "MemoryStats",
    "get_memory_stats",
    "log_memory_status",
    "SolverDisplay",
]
