#!/usr/bin/env python3
"""
fileguard Adapters Module

Adapters stand between the accessor and the operating system. The accessor
only talks to FileSystemAdapter, so attribute inspection and file creation
can be substituted in tests or by callers with special storage.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Example:
    >>> from fileguard.adapters import FileSystemAdapter
    >>> from fileguard.core import FileAccessor
    >>>
    >>> accessor = FileAccessor(file_system=FileSystemAdapter())
"""

from .file_system import FileSystemAdapter, default_file_system
from .magic_adapter import MagicAdapter

__all__ = ["FileSystemAdapter", "MagicAdapter", "default_file_system"]
