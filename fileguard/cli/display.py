#!/usr/bin/env python3
"""
fileguard CLI Display Module

Rich rendering of accessor results: info tables, hex dumps and errors.
"""

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.errors import AccessError

console = Console()

BYTES_PER_ROW = 16
NOT_AVAILABLE = "Not Available"


def create_info_table(title: str, prop_width: int = 15, value_min_width: int = 50) -> Table:
    """Create a standardized info table with proper sizing"""
    table = Table(title=title, show_header=True, expand=True)
    table.add_column("Property", style="cyan", width=prop_width, no_wrap=True)
    table.add_column("Value", style="green", min_width=value_min_width, overflow="fold")
    return table


def display_error(out: Console, error: AccessError | None) -> None:
    if error is None:
        out.print("[red]Error: unknown failure[/red]")
        return
    out.print(f"[red]Error ({error.kind.value}): {error.message}[/red]")


def display_info(out: Console, info: dict[str, Any]) -> None:
    table = create_info_table(f"File Information: {info['name']}")
    table.add_row("Size", f"{info['size']} bytes ({info['size']:#x})")
    table.add_row("Attributes", ", ".join(info["attributes"]) or "none")
    table.add_row("Read-only", "yes" if info["read_only"] else "no")
    guard = info.get("guard_error")
    table.add_row("Guard", f"[red]{guard}[/red]" if guard else "passes")
    table.add_row("MIME type", info.get("mime") or NOT_AVAILABLE)
    table.add_row("Description", info.get("description") or NOT_AVAILABLE)
    out.print(table)


def format_hex_row(data: bytes | bytearray) -> tuple[str, str]:
    """Hex and printable-ASCII columns of one dump row"""
    hex_part = " ".join(f"{b:02x}" for b in data)
    text_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in data)
    return hex_part, text_part


def display_hexdump(out: Console, data: bytes | bytearray, base_offset: int = 0) -> None:
    table = Table(show_header=True, box=None)
    table.add_column("Offset", style="cyan", no_wrap=True)
    table.add_column("Hex", style="green", no_wrap=True)
    table.add_column("ASCII", style="yellow", no_wrap=True)
    for start in range(0, len(data), BYTES_PER_ROW):
        row = data[start : start + BYTES_PER_ROW]
        hex_part, text_part = format_hex_row(row)
        table.add_row(f"{base_offset + start:08x}", hex_part, Text(text_part))
    out.print(table)
