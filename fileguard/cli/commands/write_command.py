#!/usr/bin/env python3
"""
fileguard CLI Commands - Write and Print

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from .base import Command


class WriteCommand(Command):
    """Write raw bytes at an offset."""

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        offset = args["offset"]
        payload = args["payload"]

        with self.accessor.opened(filename) as opened:
            if not opened:
                return self._report(opened)
            result = self.accessor.write(opened.value, offset, payload, len(payload))

        return self._report(result, f"Wrote {result.count} byte(s) at {offset:#x}")


class PrintCommand(Command):
    """Write encoded text at an offset, appending when no offset is given."""

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        offset = args.get("offset")
        encoding = args.get("encoding")

        with self.accessor.opened(filename) as opened:
            if not opened:
                return self._report(opened)
            result = self.accessor.print_text(opened.value, args["text"], offset, encoding)

        where = "end of file" if offset is None else f"{offset:#x}"
        return self._report(result, f"Printed {result.count} byte(s) at {where}")
