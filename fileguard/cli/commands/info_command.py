#!/usr/bin/env python3
"""
fileguard CLI Commands - Info and Read

Read-only inspection commands. Files are opened read-only so that they can
be inspected even when the read-only attribute would block writes.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from ...adapters.magic_adapter import MagicAdapter
from ...core.attributes import describe
from ...core.errors import AccessError, classify_exception
from ..display import display_error, display_hexdump, display_info
from .base import Command, CommandContext


class InfoCommand(Command):
    """Show length, attributes, guard verdict and file type of a file."""

    def __init__(self, context: CommandContext | None = None, magic: MagicAdapter | None = None):
        super().__init__(context)
        self.magic = magic or MagicAdapter()

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        try:
            handle = self.accessor.file_system.open_readonly(filename)
        except OSError as e:
            display_error(self.context.console, AccessError(classify_exception(e), str(e)))
            return 1

        with handle:
            verdict = self.accessor.check(handle)
            info: dict[str, Any] = {
                "name": filename,
                "size": self.accessor.length(handle),
                "attributes": describe(verdict.attributes),
                "read_only": verdict.read_only,
                "guard_error": str(verdict.error) if verdict.error else None,
            }

        detected = self.magic.describe(filename)
        if detected:
            info.update(detected)

        display_info(self.context.console, info)
        return 0 if verdict else 1


class ReadCommand(Command):
    """Dump bytes at an offset as a hex table."""

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        offset = args["offset"]
        size = args["size"]

        try:
            handle = self.accessor.file_system.open_readonly(filename)
        except OSError as e:
            display_error(self.context.console, AccessError(classify_exception(e), str(e)))
            return 1

        with handle:
            result = self.accessor.read(handle, offset, bytearray(size), size)

        if not result:
            return self._report(result)

        data = result.value[: result.count]
        if not data:
            self.context.console.print(f"[yellow]No data at offset {offset:#x}[/yellow]")
            return 0
        display_hexdump(self.context.console, data, base_offset=offset)
        return 0
