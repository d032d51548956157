"""
Utility functions and configuration for the graph algorithms.
"""

import gc
import logging
import os
import time
from dataclasses import dataclass
from typing import Optional

import psutil

from ..exceptions import ConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

# Constants
DEFAULT_MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two RSS samples
BYTES_PER_MB = 1024 * 1024


@dataclass
class SearchConfig:
    """
    Configuration shared by every algorithm invocation.

    Attributes:
        max_memory_mb: Abort with MemoryError once the process grows by more
            than this many megabytes during a run. None disables the limit.
        memory_check_interval: Minimum number of seconds between two memory
            samples.
    """

    max_memory_mb: Optional[float] = None
    memory_check_interval: float = DEFAULT_MEMORY_CHECK_INTERVAL

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_memory_mb is not None:
            if isinstance(self.max_memory_mb, bool) or not isinstance(
                self.max_memory_mb, (int, float)
            ):
                raise ConfigurationError("max_memory_mb must be a number or None")
            if self.max_memory_mb <= 0:
                raise ConfigurationError("max_memory_mb must be positive")
        if not isinstance(self.memory_check_interval, (int, float)):
            raise ConfigurationError("memory_check_interval must be a number")
        if self.memory_check_interval < 0:
            raise ConfigurationError("memory_check_interval cannot be negative")


class MemoryManager:
    """Memory management utilities for graph algorithms."""

    def __init__(
        self,
        max_memory_mb: Optional[float] = None,
        check_interval: float = DEFAULT_MEMORY_CHECK_INTERVAL,
    ):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * BYTES_PER_MB if max_memory_mb else None
        if self.max_memory:
            # Start from a clean baseline when a limit is enforced
            gc.collect()
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    f"Memory limit exceeded: {current / BYTES_PER_MB:.1f}MB in use, "
                    f"limit {self.max_memory / BYTES_PER_MB:.1f}MB above baseline"
                )
                raise MemoryError(
                    f"Memory usage {current / BYTES_PER_MB:.1f}MB exceeds "
                    f"limit of {self.max_memory / BYTES_PER_MB:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Get peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / BYTES_PER_MB


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
