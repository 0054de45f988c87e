#!/usr/bin/env python3
"""
fileguard - Validated offset-based binary file access

Read, write and print at arbitrary offsets, extract whole files and pad
files to sector boundaries, with guardrails against read-only, compressed,
encrypted, offline and directory targets.

License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Validated offset-based binary file access"

from .config import Config
from .core import (
    AccessError,
    AccessResult,
    ErrorCategory,
    ErrorKind,
    FileAccessor,
    FileAttributes,
    GuardVerdict,
    TextEncoding,
)

__all__ = [
    "AccessError",
    "AccessResult",
    "Config",
    "ErrorCategory",
    "ErrorKind",
    "FileAccessor",
    "FileAttributes",
    "GuardVerdict",
    "TextEncoding",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
