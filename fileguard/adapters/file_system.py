#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from ..core.attributes import FileAttributes, attributes_from_stat


class FileSystemAdapter:
    """Provide the open, create, attribute and length primitives the accessor relies on."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def open_existing(self, path: str | Path) -> BinaryIO:
        return Path(path).open("r+b")

    def open_readonly(self, path: str | Path) -> BinaryIO:
        return Path(path).open("rb")

    def create(self, path: str | Path) -> BinaryIO:
        return Path(path).open("w+b")

    def read_all(self, path: str | Path) -> bytes:
        return Path(path).read_bytes()

    def query_attributes(self, handle: BinaryIO) -> FileAttributes:
        return attributes_from_stat(os.fstat(handle.fileno()))

    def length(self, handle: BinaryIO) -> int:
        try:
            fd = handle.fileno()
        except OSError:
            # In-memory streams have no descriptor
            position = handle.tell()
            end = handle.seek(0, os.SEEK_END)
            handle.seek(position)
            return end
        if handle.writable():
            handle.flush()
        return os.fstat(fd).st_size


default_file_system = FileSystemAdapter()
