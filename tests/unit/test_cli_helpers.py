from __future__ import annotations

import io

import click
import pytest
from rich.console import Console

from fileguard.cli.commands.base import CommandContext
from fileguard.cli.commands.pad_command import AlignCommand
from fileguard.cli.display import display_error, display_hexdump, format_hex_row
from fileguard.cli.validators import (
    encoding_callback,
    parse_hex_payload,
    validate_offset,
    validate_size,
)
from fileguard.config import Config
from fileguard.core.codecs import TextEncoding
from fileguard.core.errors import AccessError, ErrorKind


@pytest.mark.parametrize(("value", "expected"), [(0, 0), ("16", 16), ("0x8000", 32768), (" 0X10 ", 16)])
def test_validate_offset(value, expected: int) -> None:
    assert validate_offset(value) == expected


@pytest.mark.parametrize("value", [-1, "-1", "abc", "0xzz", 1.5])
def test_validate_offset_rejects(value) -> None:
    with pytest.raises(ValueError):
        validate_offset(value)


def test_validate_size_rejects_zero() -> None:
    with pytest.raises(ValueError, match="positive"):
        validate_size("0")


@pytest.mark.parametrize(
    ("payload", "expected"),
    [("deadbeef", b"\xde\xad\xbe\xef"), ("0xDEAD", b"\xde\xad"), ("de ad", b"\xde\xad")],
)
def test_parse_hex_payload(payload: str, expected: bytes) -> None:
    assert parse_hex_payload(payload) == bytearray(expected)


@pytest.mark.parametrize("payload", ["", "0x", "abc", "zz"])
def test_parse_hex_payload_rejects(payload: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_payload(payload)


def test_encoding_callback() -> None:
    assert encoding_callback(None, None, None) is None
    assert encoding_callback(None, None, "utf-8") is TextEncoding.UTF8
    with pytest.raises(click.BadParameter):
        encoding_callback(None, None, "ebcdic")


def _console() -> tuple[Console, io.StringIO]:
    out = io.StringIO()
    return Console(file=out, width=120, color_system=None), out


def test_format_hex_row() -> None:
    assert format_hex_row(b"A\x00[") == ("41 00 5b", "A.[")


def test_display_hexdump_offsets_rows() -> None:
    console, out = _console()
    display_hexdump(console, bytes(range(0x41, 0x41 + 20)), base_offset=0x100)
    text = out.getvalue()
    assert "00000100" in text
    assert "00000110" in text
    assert "ABCDEFGHIJKLMNOP" in text


def test_display_error() -> None:
    console, out = _console()
    display_error(console, AccessError(ErrorKind.READ_ONLY, "file is read-only"))
    assert "Error (read_only): file is read-only" in out.getvalue()


def test_align_command_uses_configured_sector(tmp_path) -> None:
    config = Config(str(tmp_path / "absent.json"))
    config.set("accessor", "sector_size", 32)
    console, out = _console()
    context = CommandContext.create(config=config, quiet=True, console=console)
    target = tmp_path / "image.bin"
    target.write_bytes(b"abc")

    code = AlignCommand(context).execute({"filename": str(target), "sector": None})

    assert code == 0
    assert target.stat().st_size == 32
    assert out.getvalue() == ""
