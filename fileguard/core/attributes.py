#!/usr/bin/env python3
"""
File attribute flags inspected by the guard check.

Windows reports the attributes directly in st_file_attributes. BSD and macOS
expose compression through st_flags. Elsewhere only the mode bits are
available, which cover the read-only and directory flags.
"""

import os
import stat
from enum import Flag, auto


class FileAttributes(Flag):
    """Attribute bits relevant to byte-level I/O"""

    NONE = 0
    READ_ONLY = auto()
    COMPRESSED = auto()
    DIRECTORY = auto()
    ENCRYPTED = auto()
    OFFLINE = auto()


_WINDOWS_ATTRIBUTES = (
    (stat.FILE_ATTRIBUTE_READONLY, FileAttributes.READ_ONLY),
    (stat.FILE_ATTRIBUTE_COMPRESSED, FileAttributes.COMPRESSED),
    (stat.FILE_ATTRIBUTE_DIRECTORY, FileAttributes.DIRECTORY),
    (stat.FILE_ATTRIBUTE_ENCRYPTED, FileAttributes.ENCRYPTED),
    (stat.FILE_ATTRIBUTE_OFFLINE, FileAttributes.OFFLINE),
)

_ANY_WRITE_BIT = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def attributes_from_stat(st: os.stat_result) -> FileAttributes:
    """Translate a stat result into FileAttributes"""
    attributes = FileAttributes.NONE

    windows_bits = getattr(st, "st_file_attributes", None)
    if windows_bits is not None:
        for bit, flag in _WINDOWS_ATTRIBUTES:
            if windows_bits & bit:
                attributes |= flag

    if getattr(st, "st_flags", 0) & stat.UF_COMPRESSED:
        attributes |= FileAttributes.COMPRESSED

    if stat.S_ISDIR(st.st_mode):
        attributes |= FileAttributes.DIRECTORY

    if not st.st_mode & _ANY_WRITE_BIT:
        attributes |= FileAttributes.READ_ONLY

    return attributes


def describe(attributes: FileAttributes) -> list[str]:
    """Names of the set flags, lowercase, in declaration order"""
    return [flag.name.lower() for flag in FileAttributes if flag.value and flag in attributes]


__all__ = ["FileAttributes", "attributes_from_stat", "describe"]
