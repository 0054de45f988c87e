#!/usr/bin/env python3
"""
fileguard Core Module

Core components of the validated file accessor:

- FileAccessor: offset-based read/write/print/align operations
- GuardVerdict / check_handle: pre-flight handle validation
- AccessResult / AccessError / ErrorKind: typed failure reporting
- TextEncoding: codec dispatch for GetString and Print

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .attributes import FileAttributes
from .codecs import TextEncoding
from .constants import DEFAULT_SECTOR_SIZE
from .errors import AccessError, ErrorCategory, ErrorKind, classify_exception
from .results import AccessResult
from .guard import GuardVerdict, check_handle
from .accessor import FileAccessor

__all__ = [
    "AccessError",
    "AccessResult",
    "DEFAULT_SECTOR_SIZE",
    "ErrorCategory",
    "ErrorKind",
    "FileAccessor",
    "FileAttributes",
    "GuardVerdict",
    "TextEncoding",
    "check_handle",
    "classify_exception",
]
