#!/usr/bin/env python3
"""
Memory limit checks for buffer allocations
"""

import os
import threading
from dataclasses import dataclass
from typing import Any

import psutil

from .logger import get_logger

logger = get_logger(__name__)


@dataclass
class MemoryLimits:
    """Memory limit configuration"""

    max_buffer_mb: int = 512  # Largest single buffer the accessor allocates
    system_headroom: float = 0.8  # Fraction of available memory a buffer may use


class MemoryMonitor:
    """Thread-safe memory checks for buffer allocation"""

    def __init__(self, limits: MemoryLimits | None = None):
        self.limits = limits or MemoryLimits()
        self.lock = threading.Lock()
        self.process = psutil.Process(os.getpid())

    def check_memory(self) -> dict[str, Any]:
        """
        Snapshot process and system memory

        Returns:
            Dictionary with memory information in megabytes
        """
        with self.lock:
            try:
                memory_mb = self.process.memory_info().rss / 1024 / 1024
                system_memory = psutil.virtual_memory()
                return {
                    "process_memory_mb": memory_mb,
                    "system_memory_total_mb": system_memory.total / 1024 / 1024,
                    "system_memory_available_mb": system_memory.available / 1024 / 1024,
                    "status": "normal",
                }
            except psutil.Error as e:
                logger.error(f"Error checking memory: {e}")
                return {
                    "process_memory_mb": 0.0,
                    "system_memory_total_mb": 0.0,
                    "system_memory_available_mb": 0.0,
                    "status": "error",
                }

    def validate_buffer_size(self, size_bytes: int) -> bool:
        """
        Validate a buffer size against the configured limit and free memory

        Args:
            size_bytes: Requested buffer size in bytes

        Returns:
            True if the buffer may be allocated
        """
        size_mb = size_bytes / 1024 / 1024

        if size_mb > self.limits.max_buffer_mb:
            logger.warning(
                f"Buffer too large: {size_mb:.1f}MB (limit: {self.limits.max_buffer_mb}MB)"
            )
            return False

        stats = self.check_memory()
        if stats["status"] == "error":
            # No figures to compare against; the configured limit already passed
            return True

        available_mb = float(stats["system_memory_available_mb"])
        if size_mb > available_mb * self.limits.system_headroom:
            logger.warning(
                f"Buffer of {size_mb:.1f}MB exceeds available memory ({available_mb:.1f}MB)"
            )
            return False

        return True


global_memory_monitor = MemoryMonitor()


def check_memory_limits(size_bytes: int = 0) -> bool:
    """
    Check if a buffer allocation is within memory limits

    Args:
        size_bytes: Buffer size in bytes

    Returns:
        True if within limits
    """
    if size_bytes <= 0:
        return True
    return global_memory_monitor.validate_buffer_size(size_bytes)


def configure_memory_limits(**kwargs):
    """Configure global memory limits"""
    for key, value in kwargs.items():
        if hasattr(global_memory_monitor.limits, key):
            setattr(global_memory_monitor.limits, key, value)
            logger.info(f"Updated memory limit {key} = {value}")
        else:
            logger.warning(f"Unknown memory limit: {key}")
