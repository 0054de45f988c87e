"""Guard check ordering and verdicts."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fileguard.core.accessor import FileAccessor
from fileguard.core.attributes import FileAttributes
from fileguard.core.errors import ErrorCategory, ErrorKind
from fileguard.core.guard import check_handle


def test_guard_rejects_missing_handle(accessor: FileAccessor, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="fileguard"):
        verdict = accessor.check(None)
    assert not verdict
    assert verdict.error.kind is ErrorKind.UNINITIALIZED
    assert "uninitialized file stream" in caplog.text


def test_guard_rejects_closed_handle(accessor: FileAccessor, sample_file: Path) -> None:
    fh = sample_file.open("r+b")
    fh.close()
    verdict = accessor.check(fh)
    assert verdict.error.kind is ErrorKind.UNINITIALIZED


def test_guard_passes_plain_file(accessor: FileAccessor, handle) -> None:
    verdict = accessor.check(handle)
    assert verdict.ok
    assert verdict.read_only is False
    assert verdict.error is None


def test_guard_reports_read_only_without_failing(accessor: FileAccessor, read_only_handle) -> None:
    verdict = accessor.check(read_only_handle)
    assert verdict.ok
    assert verdict.read_only is True
    assert FileAttributes.READ_ONLY in verdict.attributes


@pytest.mark.parametrize(
    ("attributes", "kind"),
    [
        (FileAttributes.COMPRESSED, ErrorKind.COMPRESSED),
        (FileAttributes.DIRECTORY, ErrorKind.DIRECTORY),
        (FileAttributes.ENCRYPTED, ErrorKind.ENCRYPTED),
        (FileAttributes.OFFLINE, ErrorKind.OFFLINE),
    ],
)
def test_guard_blocking_attributes(
    handle, override_fs, attributes: FileAttributes, kind: ErrorKind
) -> None:
    verdict = check_handle(handle, override_fs(attributes))
    assert not verdict
    assert verdict.error.kind is kind
    assert verdict.error.category is ErrorCategory.ATTRIBUTE_GUARD


@pytest.mark.parametrize(
    ("attributes", "kind"),
    [
        (FileAttributes.COMPRESSED | FileAttributes.ENCRYPTED, ErrorKind.COMPRESSED),
        (FileAttributes.DIRECTORY | FileAttributes.OFFLINE, ErrorKind.DIRECTORY),
        (FileAttributes.ENCRYPTED | FileAttributes.OFFLINE, ErrorKind.ENCRYPTED),
    ],
)
def test_guard_stops_at_first_blocking_attribute(handle, override_fs, attributes, kind) -> None:
    verdict = check_handle(handle, override_fs(attributes))
    assert verdict.error.kind is kind


def test_guard_records_read_only_before_blocking(handle, override_fs) -> None:
    fs = override_fs(FileAttributes.READ_ONLY | FileAttributes.OFFLINE)
    verdict = check_handle(handle, fs)
    assert verdict.read_only is True
    assert verdict.error.kind is ErrorKind.OFFLINE


def test_guard_attribute_query_failure_is_io(handle, failing_fs) -> None:
    verdict = check_handle(handle, failing_fs)
    assert verdict.error.kind is ErrorKind.IO
    assert "attribute query failed" in verdict.error.message


@pytest.mark.parametrize(
    "attributes",
    [
        FileAttributes.COMPRESSED,
        FileAttributes.DIRECTORY,
        FileAttributes.ENCRYPTED,
        FileAttributes.OFFLINE,
    ],
)
def test_guard_failure_blocks_every_operation(sample_file: Path, override_fs, attributes) -> None:
    accessor = FileAccessor(file_system=override_fs(attributes))
    original = sample_file.read_bytes()

    with sample_file.open("r+b") as fh:
        read = accessor.read(fh, 0, bytearray(4), 4)
        written = accessor.write(fh, 0, b"\xff\xff", 2)
        extracted = accessor.get_bytes(fh)
        printed = accessor.print_text(fh, "XY", 0)

    for result in (read, written, extracted, printed):
        assert not result
        assert result.kind.category is ErrorCategory.ATTRIBUTE_GUARD
    assert written.value == 0
    assert sample_file.read_bytes() == original


def test_verdict_is_per_call(accessor: FileAccessor, read_only_handle, tmp_path: Path) -> None:
    other = tmp_path / "other.bin"
    other.write_bytes(b"\x00" * 4)

    assert accessor.check(read_only_handle).read_only is True
    with other.open("r+b") as fh:
        result = accessor.write(fh, 0, b"ok", 2)
    assert result.ok
    assert other.read_bytes() == b"ok\x00\x00"
