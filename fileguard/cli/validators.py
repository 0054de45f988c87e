#!/usr/bin/env python3
"""
fileguard CLI Input Validation Module

Click callbacks converting offsets, sizes and hex payloads given on the
command line. Offsets and sizes accept decimal or 0x-prefixed hexadecimal.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

import click

from ..core.codecs import TextEncoding


def validate_offset(offset: Any) -> int:
    """
    Validate and convert an offset value to integer.

    Raises:
        ValueError: If offset cannot be converted to a non-negative integer

    Example:
        >>> validate_offset("0x8000") == validate_offset(32768) == 32768
        True
    """
    if isinstance(offset, int):
        if offset < 0:
            raise ValueError(f"Offset cannot be negative: {offset}")
        return offset
    if isinstance(offset, str):
        offset = offset.strip()
        try:
            result = int(offset, 16) if offset.lower().startswith("0x") else int(offset)
        except ValueError as e:
            raise ValueError(f"Invalid offset format: {offset}") from e
        if result < 0:
            raise ValueError(f"Offset cannot be negative: {result}")
        return result
    raise ValueError(f"Offset must be int or str, got {type(offset).__name__}")


def validate_size(size: Any) -> int:
    """
    Validate and convert a size value to a positive integer.

    Raises:
        ValueError: If size cannot be converted to a positive integer
    """
    result = validate_offset(size)
    if result <= 0:
        raise ValueError(f"Size must be positive: {result}")
    return result


def parse_hex_payload(payload: str) -> bytearray:
    """
    Parse a hex string such as "de ad be ef" or "0xdeadbeef" into bytes.

    Raises:
        ValueError: If the payload is empty or not valid hex
    """
    text = payload.strip()
    if text.lower().startswith("0x"):
        text = text[2:]
    text = "".join(text.split())
    if not text:
        raise ValueError("Hex payload is empty")
    try:
        return bytearray.fromhex(text)
    except ValueError as e:
        raise ValueError(f"Invalid hex payload: {payload}") from e


def offset_callback(_ctx: click.Context, _param: click.Parameter, value: Any) -> int | None:
    if value is None:
        return None
    try:
        return validate_offset(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def size_callback(_ctx: click.Context, _param: click.Parameter, value: Any) -> int | None:
    if value is None:
        return None
    try:
        return validate_size(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def hex_callback(_ctx: click.Context, _param: click.Parameter, value: str) -> bytearray:
    try:
        return parse_hex_payload(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def encoding_callback(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> TextEncoding | None:
    if value is None:
        return None
    try:
        return TextEncoding.from_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e))
