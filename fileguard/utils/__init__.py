#!/usr/bin/env python3
"""
fileguard Utilities
"""

from .logger import get_logger, set_level, setup_logger
from .memory import check_memory_limits, configure_memory_limits

__all__ = [
    "get_logger",
    "set_level",
    "setup_logger",
    "check_memory_limits",
    "configure_memory_limits",
]
