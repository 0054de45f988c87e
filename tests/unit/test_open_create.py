"""Open, Length, Create and Dummy."""

from __future__ import annotations

from pathlib import Path

import pytest

from fileguard.core.accessor import FileAccessor
from fileguard.core.attributes import FileAttributes
from fileguard.core.errors import ErrorCategory, ErrorKind


def test_open_missing_file_fails(accessor: FileAccessor, tmp_path: Path) -> None:
    result = accessor.open(tmp_path / "missing.bin")
    assert not result
    assert result.value is None
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.kind.category is ErrorCategory.PRECONDITION


def test_open_returns_read_write_handle(accessor: FileAccessor, sample_file: Path) -> None:
    result = accessor.open(sample_file)
    assert result.ok
    with result.value as fh:
        assert fh.readable()
        assert fh.writable()
        assert fh.seekable()


def test_open_closes_handle_rejected_by_guard(sample_file: Path, override_fs) -> None:
    fs = override_fs(FileAttributes.ENCRYPTED)
    result = FileAccessor(file_system=fs).open(sample_file)
    assert result.kind is ErrorKind.ENCRYPTED
    assert result.value is None
    assert len(fs.opened) == 1
    assert fs.opened[0].closed


def test_open_directory_fails(accessor: FileAccessor, tmp_path: Path) -> None:
    result = accessor.open(tmp_path)
    assert not result
    assert result.value is None


def test_opened_closes_on_exit(accessor: FileAccessor, sample_file: Path) -> None:
    with accessor.opened(sample_file) as opened:
        assert opened.ok
        fh = opened.value
        assert not fh.closed
    assert fh.closed


def test_opened_yields_failure(accessor: FileAccessor, tmp_path: Path) -> None:
    with accessor.opened(tmp_path / "nope") as opened:
        assert opened.kind is ErrorKind.NOT_FOUND


def test_length_of_handle_includes_pending_writes(accessor: FileAccessor, handle) -> None:
    handle.seek(40)
    handle.write(b"z")
    assert accessor.length(handle) == 41


def test_length_of_closed_handle_is_zero(accessor: FileAccessor, sample_file: Path) -> None:
    fh = sample_file.open("rb")
    fh.close()
    assert accessor.length(fh) == 0


def test_length_by_name(accessor: FileAccessor, sample_file: Path) -> None:
    result = accessor.length_of(sample_file)
    assert result.ok
    assert result.value == 32


def test_length_by_name_missing(accessor: FileAccessor, tmp_path: Path) -> None:
    result = accessor.length_of(tmp_path / "missing.bin")
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.value == 0


def test_create_writes_buffer_and_clears(accessor: FileAccessor, tmp_path: Path) -> None:
    target = tmp_path / "created.bin"
    buffer = bytearray(b"payload")

    result = accessor.create(buffer, True, target)

    assert result.ok
    assert result.count == 7
    result.value.close()
    assert target.read_bytes() == b"payload"
    assert buffer == bytearray(7)


def test_create_keeps_buffer_without_clear(accessor: FileAccessor, tmp_path: Path) -> None:
    buffer = bytearray(b"keep")
    result = accessor.create(buffer, False, tmp_path / "kept.bin")
    result.value.close()
    assert buffer == bytearray(b"keep")


def test_create_returns_open_handle(accessor: FileAccessor, tmp_path: Path) -> None:
    result = accessor.create(b"abc", False, tmp_path / "handle.bin")
    with result.value as fh:
        fh.seek(0)
        assert fh.read() == b"abc"


def test_create_truncates_existing(accessor: FileAccessor, sample_file: Path) -> None:
    result = accessor.create(b"xy", False, sample_file)
    result.value.close()
    assert sample_file.read_bytes() == b"xy"


def test_create_rejects_empty_buffer(accessor: FileAccessor, tmp_path: Path) -> None:
    target = tmp_path / "never.bin"
    result = accessor.create(bytearray(), True, target)
    assert result.kind is ErrorKind.EMPTY_BUFFER
    assert not target.exists()


def test_create_clear_requires_mutable_buffer(accessor: FileAccessor, tmp_path: Path) -> None:
    target = tmp_path / "never.bin"
    result = accessor.create(b"immutable", True, target)
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert not target.exists()


def test_create_clears_buffer_even_on_failure(accessor: FileAccessor, tmp_path: Path) -> None:
    buffer = bytearray(b"secret")
    result = accessor.create(buffer, True, tmp_path / "missing-dir" / "file.bin")
    assert not result
    assert result.kind is ErrorKind.NOT_FOUND
    assert buffer == bytearray(6)


def test_create_rejects_null_byte_name(accessor: FileAccessor, tmp_path: Path) -> None:
    buffer = bytearray(b"ab")
    result = accessor.create(buffer, True, str(tmp_path / "bad\0name"))
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert result.value is None
    assert buffer == bytearray(2)


def test_open_rejects_null_byte_name(accessor: FileAccessor, tmp_path: Path) -> None:
    result = accessor.open(str(tmp_path / "bad\0name"))
    assert not result
    assert result.value is None


@pytest.mark.parametrize("size", [1, 7, 2048, 5000])
def test_dummy_creates_zero_file(accessor: FileAccessor, tmp_path: Path, size: int) -> None:
    target = tmp_path / "pad.bin"
    result = accessor.dummy(size, target)
    assert result.ok
    assert result.value == size
    assert accessor.length_of(target).value == size
    assert target.read_bytes() == bytes(size)


def test_dummy_zero_size_fails(accessor: FileAccessor, tmp_path: Path) -> None:
    target = tmp_path / "pad.bin"
    result = accessor.dummy(0, target)
    assert result.kind is ErrorKind.EMPTY_BUFFER
    assert not target.exists()


def test_dummy_respects_memory_check(tmp_path: Path) -> None:
    requested: list[int] = []

    def refuse(size: int) -> bool:
        requested.append(size)
        return False

    target = tmp_path / "huge.bin"
    result = FileAccessor(memory_check=refuse).dummy(4096, target)
    assert result.kind is ErrorKind.MEMORY
    assert requested == [4096]
    assert not target.exists()
