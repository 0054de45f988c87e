"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

import pytest

from fileguard.adapters.file_system import FileSystemAdapter
from fileguard.core.accessor import FileAccessor
from fileguard.core.attributes import FileAttributes


class AttributeOverrideFileSystem(FileSystemAdapter):
    """Filesystem service reporting fixed attributes and recording opened handles."""

    def __init__(self, attributes: FileAttributes = FileAttributes.NONE) -> None:
        self.attributes = attributes
        self.opened: list[BinaryIO] = []

    def open_existing(self, path):
        handle = super().open_existing(path)
        self.opened.append(handle)
        return handle

    def query_attributes(self, handle: BinaryIO) -> FileAttributes:
        return self.attributes


class FailingAttributeFileSystem(FileSystemAdapter):
    def query_attributes(self, handle: BinaryIO) -> FileAttributes:
        raise OSError("attribute query failed")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Keep config and log files out of the real home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def accessor() -> FileAccessor:
    return FileAccessor()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.bin"
    path.write_bytes(bytes(range(32)))
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def handle(sample_file: Path):
    with sample_file.open("r+b") as fh:
        yield fh


def make_read_only(path: Path) -> None:
    os.chmod(path, stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)


def make_writable(path: Path) -> None:
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)


@pytest.fixture
def read_only_handle(sample_file: Path):
    """A read/write handle on a file whose read-only attribute is set after opening."""
    with sample_file.open("r+b") as fh:
        make_read_only(sample_file)
        try:
            yield fh
        finally:
            make_writable(sample_file)


@pytest.fixture
def override_fs():
    """Factory for a filesystem service reporting fixed attributes."""
    return AttributeOverrideFileSystem


@pytest.fixture
def failing_fs() -> FailingAttributeFileSystem:
    return FailingAttributeFileSystem()


@pytest.fixture
def read_only():
    """Callable setting the read-only attribute on a path; restored on teardown."""
    touched: list[Path] = []

    def _apply(path: Path) -> None:
        make_read_only(path)
        touched.append(path)

    yield _apply
    for path in touched:
        if path.exists():
            make_writable(path)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a test's stdout and restore the package log level."""
    logger = logging.getLogger("fileguard")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external services")
