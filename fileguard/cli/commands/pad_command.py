#!/usr/bin/env python3
"""
fileguard CLI Commands - Dummy and Align

Commands producing zero padding: whole pad files and sector alignment.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from .base import Command


class DummyCommand(Command):
    """Create a zero-filled file of a given size."""

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        result = self.accessor.dummy(args["size"], filename)
        return self._report(result, f"Created {filename} ({result.count} bytes)")


class AlignCommand(Command):
    """Pad a file up to a multiple of the sector size."""

    def execute(self, args: dict[str, Any]) -> int:
        filename = args["filename"]
        sector = args.get("sector") or self.context.config.get_sector_size()
        result = self.accessor.align(sector, filename)
        return self._report(
            result, f"{filename} is {result.value} bytes ({sector}-byte sectors, +{result.count})"
        )
