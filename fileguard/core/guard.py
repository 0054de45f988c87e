#!/usr/bin/env python3
"""
fileguard Guard Check - Pre-flight validation of an open file handle

The guard check runs before every I/O operation. It fails on handles that
are missing or closed and on files whose attributes make raw byte access
unsafe (compressed, directory, encrypted, offline). The read-only bit is not
a failure: it is reported on the verdict so that Write can refuse while
reads stay possible.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from dataclasses import dataclass
from typing import BinaryIO

from ..adapters.file_system import FileSystemAdapter
from ..utils.logger import get_logger
from .attributes import FileAttributes
from .errors import AccessError, ErrorKind, classify_exception

logger = get_logger(__name__)

# Checked in this order after the read-only bit is recorded
BLOCKING_ATTRIBUTES = (
    (FileAttributes.COMPRESSED, ErrorKind.COMPRESSED, "is compressed"),
    (FileAttributes.DIRECTORY, ErrorKind.DIRECTORY, "is a directory"),
    (FileAttributes.ENCRYPTED, ErrorKind.ENCRYPTED, "is encrypted"),
    (FileAttributes.OFFLINE, ErrorKind.OFFLINE, "is offline"),
)


@dataclass(frozen=True)
class GuardVerdict:
    """
    Result of one guard check.

    Attributes:
        read_only: Read-only bit of the checked handle, valid once attributes were read
        attributes: Attributes reported by the filesystem service
        error: The blocking condition, None when I/O may proceed
    """

    read_only: bool = False
    attributes: FileAttributes = FileAttributes.NONE
    error: AccessError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def handle_name(handle: BinaryIO | None) -> str:
    """Best-effort display name of a handle"""
    name = getattr(handle, "name", None)
    return str(name) if name is not None else repr(handle)


def check_handle(handle: BinaryIO | None, file_system: FileSystemAdapter) -> GuardVerdict:
    """
    Test an open handle for conditions under which I/O must not continue.

    Args:
        handle: The handle to test
        file_system: Service used to query the handle's attributes

    Returns:
        GuardVerdict carrying the read-only bit and the first blocking error
    """
    if handle is None or getattr(handle, "closed", False):
        message = "Attempting I/O operations with an uninitialized file stream, aborting..."
        logger.error(message)
        return GuardVerdict(error=AccessError(ErrorKind.UNINITIALIZED, message))

    name = handle_name(handle)
    try:
        attributes = file_system.query_attributes(handle)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot query attributes of {name}: {e}")
        return GuardVerdict(error=AccessError(classify_exception(e), str(e)))

    read_only = FileAttributes.READ_ONLY in attributes

    for flag, kind, reason in BLOCKING_ATTRIBUTES:
        if flag in attributes:
            message = f"{name} {reason}, aborting..."
            logger.error(message)
            return GuardVerdict(
                read_only=read_only,
                attributes=attributes,
                error=AccessError(kind, message),
            )

    return GuardVerdict(read_only=read_only, attributes=attributes)


__all__ = ["GuardVerdict", "check_handle", "handle_name"]
