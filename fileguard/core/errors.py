#!/usr/bin/env python3
"""
fileguard Error Taxonomy - Failure kinds reported by the file accessor

Every accessor failure is described by an ErrorKind, and every kind belongs
to one ErrorCategory. Exceptions raised by the filesystem or codec services
are mapped to kinds by classify_exception() so they can be absorbed into a
typed result instead of escaping to the caller.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(Enum):
    """Error categories for classification"""

    PRECONDITION = "precondition"  # Bad handle, empty buffer, missing file
    ATTRIBUTE_GUARD = "attribute_guard"  # File attributes forbid byte-level I/O
    PERMISSION = "permission"  # Write attempted on a read-only file
    IO = "io"  # Underlying storage failure


class ErrorKind(Enum):
    """Specific failure kinds"""

    UNINITIALIZED = "uninitialized"
    NOT_FOUND = "not_found"
    EMPTY_BUFFER = "empty_buffer"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_READABLE = "not_readable"
    NOT_WRITABLE = "not_writable"
    NOT_SEEKABLE = "not_seekable"
    ENCODING = "encoding"
    MEMORY = "memory"
    COMPRESSED = "compressed"
    DIRECTORY = "directory"
    ENCRYPTED = "encrypted"
    OFFLINE = "offline"
    READ_ONLY = "read_only"
    IO = "io"

    @property
    def category(self) -> ErrorCategory:
        return _KIND_CATEGORIES[self]


_KIND_CATEGORIES = {
    ErrorKind.UNINITIALIZED: ErrorCategory.PRECONDITION,
    ErrorKind.NOT_FOUND: ErrorCategory.PRECONDITION,
    ErrorKind.EMPTY_BUFFER: ErrorCategory.PRECONDITION,
    ErrorKind.INVALID_ARGUMENT: ErrorCategory.PRECONDITION,
    ErrorKind.NOT_READABLE: ErrorCategory.PRECONDITION,
    ErrorKind.NOT_WRITABLE: ErrorCategory.PRECONDITION,
    ErrorKind.NOT_SEEKABLE: ErrorCategory.PRECONDITION,
    ErrorKind.ENCODING: ErrorCategory.PRECONDITION,
    ErrorKind.MEMORY: ErrorCategory.PRECONDITION,
    ErrorKind.COMPRESSED: ErrorCategory.ATTRIBUTE_GUARD,
    ErrorKind.DIRECTORY: ErrorCategory.ATTRIBUTE_GUARD,
    ErrorKind.ENCRYPTED: ErrorCategory.ATTRIBUTE_GUARD,
    ErrorKind.OFFLINE: ErrorCategory.ATTRIBUTE_GUARD,
    ErrorKind.READ_ONLY: ErrorCategory.PERMISSION,
    ErrorKind.IO: ErrorCategory.IO,
}


@dataclass(frozen=True)
class AccessError:
    """A failure kind plus the diagnostic that was logged for it"""

    kind: ErrorKind
    message: str

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "category": self.category.value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


# Order matters: subclasses are listed before OSError
EXCEPTION_MAPPING: tuple[tuple[type[BaseException], ErrorKind], ...] = (
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (IsADirectoryError, ErrorKind.DIRECTORY),
    (PermissionError, ErrorKind.READ_ONLY),
    (UnicodeError, ErrorKind.ENCODING),
    (MemoryError, ErrorKind.MEMORY),
    (OSError, ErrorKind.IO),
    (ValueError, ErrorKind.INVALID_ARGUMENT),
)


def classify_exception(exception: BaseException) -> ErrorKind:
    """
    Map an exception raised by a collaborator to a failure kind.

    Args:
        exception: The exception to classify

    Returns:
        The matching ErrorKind, IO when nothing more specific applies
    """
    for exc_type, kind in EXCEPTION_MAPPING:
        if isinstance(exception, exc_type):
            return kind
    return ErrorKind.IO


__all__ = [
    "AccessError",
    "ErrorCategory",
    "ErrorKind",
    "classify_exception",
]
