#!/usr/bin/env python3
"""
fileguard File Accessor - Validated offset-based file I/O

This module provides the FileAccessor class, which treats a file as a
randomly addressable byte store. Every handle operation runs the guard check
first, and no operation raises: failures are logged and returned as an
AccessResult naming the ErrorKind.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)

Example:
    >>> from fileguard import FileAccessor, TextEncoding
    >>>
    >>> accessor = FileAccessor()
    >>> with accessor.opened("image.iso") as opened:
    ...     if opened:
    ...         accessor.print_text(opened.value, "VOLUME", offset=0x8028)
    >>> accessor.align(2048, "image.iso")
"""

import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..utils.logger import get_logger
from ..utils.memory import MemoryLimits, MemoryMonitor, check_memory_limits
from . import codecs
from .codecs import TextEncoding
from .constants import (
    MSG_EMPTY_DESTINATION,
    MSG_EMPTY_SOURCE,
    MSG_NOT_READABLE,
    MSG_NOT_SEEKABLE,
    MSG_NOT_WRITABLE,
    MSG_READ_ONLY,
    PAD_BYTE,
)
from .errors import ErrorKind, classify_exception
from .guard import GuardVerdict, check_handle
from .results import AccessResult

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger(__name__)

PathLike = str | Path
Buffer = bytes | bytearray | memoryview


class FileAccessor:
    """
    Validated read/write/print/align operations over open file handles.

    The accessor keeps no per-handle state. The read-only bit that gates
    Write comes from the guard verdict computed within the same call, so one
    accessor may serve any number of handles.

    Attributes:
        file_system: Service providing open, create, attribute and length primitives
        memory_check: Predicate deciding whether a buffer of N bytes may be allocated
        default_encoding: Encoding used by print_text and get_string when none is given
    """

    def __init__(
        self,
        file_system: FileSystemAdapter | None = None,
        memory_check: Callable[[int], bool] | None = None,
        default_encoding: TextEncoding = TextEncoding.ASCII,
    ):
        self.file_system = file_system or default_file_system
        self.memory_check = memory_check or check_memory_limits
        self.default_encoding = default_encoding

    @classmethod
    def from_config(
        cls, config: "Config", file_system: FileSystemAdapter | None = None
    ) -> "FileAccessor":
        """Build an accessor using the accessor and memory sections of a Config"""
        monitor = MemoryMonitor(MemoryLimits(max_buffer_mb=config.get_max_buffer_mb()))
        return cls(
            file_system=file_system,
            memory_check=monitor.validate_buffer_size,
            default_encoding=config.get_default_encoding(),
        )

    # ------------------------------------------------------------------
    # Failure helpers
    # ------------------------------------------------------------------

    def _fail(self, kind: ErrorKind, message: str, value: Any = None) -> AccessResult:
        logger.error(message)
        return AccessResult.failure(kind, message, value)

    def _absorb(self, error: BaseException, value: Any = None) -> AccessResult:
        return self._fail(classify_exception(error), str(error), value)

    def _resolve_encoding(self, encoding: TextEncoding | str | None) -> TextEncoding:
        if encoding is None:
            return self.default_encoding
        return TextEncoding.from_name(encoding)

    # ------------------------------------------------------------------
    # Guard check and handle lifecycle
    # ------------------------------------------------------------------

    def check(self, handle: BinaryIO | None) -> GuardVerdict:
        """
        Run the guard check against a handle.

        Returns:
            GuardVerdict; falsy when I/O must not proceed
        """
        return check_handle(handle, self.file_system)

    def open(self, name: PathLike) -> AccessResult[BinaryIO]:
        """
        Open an existing file for reading and writing.

        The handle is closed again if the guard check rejects it, so a failed
        result never leaves an open handle behind.

        Returns:
            AccessResult holding the open handle
        """
        if not self.file_system.exists(name):
            return self._fail(ErrorKind.NOT_FOUND, f"{name} doesn't exist!")

        try:
            handle = self.file_system.open_existing(name)
        except OSError as e:
            return self._absorb(e)

        verdict = self.check(handle)
        if not verdict:
            handle.close()
            return AccessResult.from_error(verdict.error)

        return AccessResult.success(handle)

    @contextmanager
    def opened(self, name: PathLike) -> Iterator[AccessResult[BinaryIO]]:
        """
        Scoped form of open(); the handle is closed when the block exits.

        Yields the AccessResult of open(), which the block must test.
        """
        result = self.open(name)
        try:
            yield result
        finally:
            if result.ok:
                result.value.close()

    # ------------------------------------------------------------------
    # Length
    # ------------------------------------------------------------------

    def length(self, handle: BinaryIO) -> int:
        """Size of the file behind an open handle in bytes; zero (0) otherwise"""
        try:
            return self.file_system.length(handle)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot determine length: {e}")
            return 0

    def length_of(self, name: PathLike) -> AccessResult[int]:
        """Size of a file by name"""
        with self.opened(name) as result:
            if not result:
                return AccessResult.from_error(result.error, value=0)
            return AccessResult.success(self.length(result.value))

    # ------------------------------------------------------------------
    # Create / Dummy
    # ------------------------------------------------------------------

    def create(self, buffer: Buffer, clear: bool, name: PathLike) -> AccessResult[BinaryIO]:
        """
        Create (or truncate) a file holding the contents of buffer.

        When clear is set the buffer is zeroed afterwards whether or not the
        write succeeded.

        Returns:
            AccessResult holding the new open handle, owned by the caller
        """
        if len(buffer) == 0:
            return self._fail(ErrorKind.EMPTY_BUFFER, MSG_EMPTY_SOURCE)
        if clear and memoryview(buffer).readonly:
            return self._fail(
                ErrorKind.INVALID_ARGUMENT, "Cannot clear an immutable buffer, aborting..."
            )

        handle = None
        try:
            handle = self.file_system.create(name)
            handle.write(buffer)
            handle.flush()
        except (OSError, ValueError) as e:
            if handle is not None:
                handle.close()
            return self._absorb(e)
        finally:
            if clear:
                _zero(buffer)

        return AccessResult.success(handle, count=len(buffer))

    def dummy(self, size: int, name: PathLike) -> AccessResult[int]:
        """Create a pad file of size bytes, all zero"""
        if not self.memory_check(size):
            return self._fail(
                ErrorKind.MEMORY, f"Cannot allocate {size} bytes for {name}, aborting...", 0
            )

        result = self.create(bytearray(max(size, 0)), True, name)
        if not result:
            return AccessResult.from_error(result.error, value=0)

        result.value.close()
        return AccessResult.success(size, count=size)

    # ------------------------------------------------------------------
    # Read / Write
    # ------------------------------------------------------------------

    def read(
        self,
        handle: BinaryIO,
        offset: int,
        buffer: bytearray,
        element_size: int | None = None,
    ) -> AccessResult[bytearray]:
        """
        Read element_size bytes at an absolute offset into buffer[0:element_size].

        Args:
            handle: Any open, readable, seekable handle
            offset: Absolute position to read from
            buffer: Destination, must be mutable and non-empty
            element_size: Bytes to read, defaults to len(buffer)

        Returns:
            AccessResult holding buffer; count is the number of bytes read,
            short when EOF is reached first
        """
        verdict = self.check(handle)
        if not verdict:
            return AccessResult.from_error(verdict.error)
        if not handle.readable():
            return self._fail(ErrorKind.NOT_READABLE, MSG_NOT_READABLE)
        if not handle.seekable():
            return self._fail(ErrorKind.NOT_SEEKABLE, MSG_NOT_SEEKABLE)
        if len(buffer) == 0:
            return self._fail(ErrorKind.EMPTY_BUFFER, MSG_EMPTY_DESTINATION)

        size = len(buffer) if element_size is None else element_size
        if not 0 <= size <= len(buffer):
            return self._fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Element size {size} does not fit a buffer of {len(buffer)} bytes, aborting...",
            )

        try:
            with memoryview(buffer) as view:
                if view.readonly:
                    return self._fail(
                        ErrorKind.INVALID_ARGUMENT, "Destination buffer is read-only, aborting..."
                    )
                handle.seek(offset, os.SEEK_SET)
                count = 0
                while count < size:
                    chunk = handle.readinto(view[count:size])
                    if not chunk:
                        break
                    count += chunk
        except (OSError, ValueError) as e:
            return self._absorb(e)

        return AccessResult.success(buffer, count=count)

    def write(
        self,
        handle: BinaryIO,
        offset: int,
        buffer: Buffer,
        element_size: int | None = None,
    ) -> AccessResult[int]:
        """
        Write buffer[0:element_size] at an absolute offset.

        Writing past the end of the file extends it; the gap reads as zero
        bytes. Nothing is ever truncated.

        Args:
            handle: Any open, writable, seekable handle
            offset: Absolute position to write to
            buffer: Source bytes, non-empty
            element_size: Bytes to write, defaults to len(buffer)

        Returns:
            AccessResult holding the number of bytes written (0 on failure)
        """
        verdict = self.check(handle)
        if not verdict:
            return AccessResult.from_error(verdict.error, value=0)
        if not handle.writable():
            return self._fail(ErrorKind.NOT_WRITABLE, MSG_NOT_WRITABLE, 0)
        if not handle.seekable():
            return self._fail(ErrorKind.NOT_SEEKABLE, MSG_NOT_SEEKABLE, 0)
        if len(buffer) == 0:
            return self._fail(ErrorKind.EMPTY_BUFFER, MSG_EMPTY_SOURCE, 0)
        if verdict.read_only:
            return self._fail(ErrorKind.READ_ONLY, MSG_READ_ONLY, 0)

        size = len(buffer) if element_size is None else element_size
        if not 0 <= size <= len(buffer):
            return self._fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Element size {size} does not fit a buffer of {len(buffer)} bytes, aborting...",
                0,
            )

        try:
            handle.seek(offset, os.SEEK_SET)
            with memoryview(buffer) as view:
                handle.write(view[:size])
            handle.flush()
        except (OSError, ValueError) as e:
            return self._absorb(e, value=0)

        return AccessResult.success(size, count=size)

    # ------------------------------------------------------------------
    # Whole-file extraction
    # ------------------------------------------------------------------

    def get_bytes(self, handle: BinaryIO) -> AccessResult[bytes]:
        """Remaining unread contents of an open handle"""
        verdict = self.check(handle)
        if not verdict:
            return AccessResult.from_error(verdict.error)
        try:
            data = handle.read()
        except (OSError, ValueError) as e:
            return self._absorb(e)
        return AccessResult.success(data, count=len(data))

    def get_bytes_from(self, name: PathLike) -> AccessResult[bytes]:
        """Entire contents of a file by name"""
        try:
            data = self.file_system.read_all(name)
        except (OSError, ValueError) as e:
            return self._absorb(e)
        return AccessResult.success(data, count=len(data))

    def get_string(
        self, name: PathLike, encoding: TextEncoding | str | None = None
    ) -> AccessResult[str]:
        """Load a text file and decode it with the given encoding"""
        try:
            codec = self._resolve_encoding(encoding)
        except ValueError as e:
            return self._fail(ErrorKind.INVALID_ARGUMENT, str(e))

        loaded = self.get_bytes_from(name)
        if not loaded:
            return AccessResult.from_error(loaded.error)
        if len(loaded.value) == 0:
            return self._fail(ErrorKind.EMPTY_BUFFER, MSG_EMPTY_SOURCE)

        try:
            text = codecs.decode(loaded.value, codec)
        except UnicodeError as e:
            return self._absorb(e)
        return AccessResult.success(text, count=loaded.count)

    # ------------------------------------------------------------------
    # Print / Align
    # ------------------------------------------------------------------

    def print_text(
        self,
        handle: BinaryIO,
        text: str,
        offset: int | None = None,
        encoding: TextEncoding | str | None = None,
    ) -> AccessResult[int]:
        """
        Write an encoded string into a binary file. No terminator is added.

        The encoded bytes overwrite the region at offset; if that runs past
        the end of the file the file grows to hold the whole string.

        Args:
            handle: Any open, writable, seekable handle
            text: String to encode
            offset: Absolute position, defaults to the end of the file at call time
            encoding: Target encoding, defaults to the accessor's default (ASCII)

        Returns:
            The result of the underlying write(): bytes written, or the failure
            of the encode or the write
        """
        verdict = self.check(handle)
        if not verdict:
            return AccessResult.from_error(verdict.error, value=0)

        try:
            codec = self._resolve_encoding(encoding)
        except ValueError as e:
            return self._fail(ErrorKind.INVALID_ARGUMENT, str(e), 0)

        if offset is None:
            offset = self.length(handle)

        try:
            data = codecs.encode(text, codec)
        except UnicodeError as e:
            return self._absorb(e, value=0)

        return self.write(handle, offset, data, len(data))

    def align(self, sector: int, name: PathLike) -> AccessResult[int]:
        """
        Pad a file with zero bytes up to the next multiple of sector.

        A file whose length is already a multiple of sector is left untouched,
        so aligning twice gives the same length as aligning once.

        Returns:
            AccessResult holding the final file length
        """
        if sector <= 0:
            return self._fail(
                ErrorKind.INVALID_ARGUMENT, f"Sector size must be positive, got {sector}", 0
            )

        with self.opened(name) as result:
            if not result:
                return AccessResult.from_error(result.error, value=0)
            handle = result.value

            length = self.length(handle)
            new_length = (length + sector - 1) // sector * sector
            if new_length == length:
                logger.debug(f"{name} is already aligned to {sector} bytes")
                return AccessResult.success(length)

            written = self.write(handle, new_length - len(PAD_BYTE), PAD_BYTE, len(PAD_BYTE))
            if not written:
                return AccessResult.from_error(written.error, value=length)

        logger.info(f"Aligned {name} from {length} to {new_length} bytes")
        return AccessResult.success(new_length, count=new_length - length)


def _zero(buffer: Buffer) -> None:
    with memoryview(buffer) as view, view.cast("B") as raw:
        raw[:] = bytes(raw.nbytes)


__all__ = ["FileAccessor"]
