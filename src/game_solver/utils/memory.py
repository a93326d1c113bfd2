"""
Memory usage reporting.

Transposition tables grow without bound, so long solves are worth watching.
"""

import logging
import os
from dataclasses import dataclass

import psutil

logger = logging.getLogger(__name__)


@dataclass
class MemoryStats:
    """Memory usage statistics."""

    process_rss_mb: float  # Resident Set Size (actual RAM used by process)
    system_total_gb: float  # Total system RAM
    system_available_gb: float  # Available RAM for new allocations
    system_percent: float  # Percentage of RAM in use


def get_memory_stats() -> MemoryStats:
    """
    Get current memory usage statistics.

    Returns:
        MemoryStats for this process and the whole system
    """
    process = psutil.Process(os.getpid())
    sys_mem = psutil.virtual_memory()

    return MemoryStats(
        process_rss_mb=process.memory_info().rss / (1024**2),
        system_total_gb=sys_mem.total / (1024**3),
        system_available_gb=sys_mem.available / (1024**3),
        system_percent=sys_mem.percent,
    )


def log_memory_status(table_entries: int, label: str = "table entries") -> MemoryStats:
    """
    Log current memory status alongside the transposition table size.

    Args:
        table_entries: Number of entries in the table being reported
        label: Name for the count in the log line
    """
    stats = get_memory_stats()
    logger.info(
        f"Memory: Process={stats.process_rss_mb:.0f}MB, "
        f"System={stats.system_available_gb:.1f}GB available "
        f"({stats.system_percent:.0f}% used), "
        f"{label}={table_entries:,}"
    )
    return stats
