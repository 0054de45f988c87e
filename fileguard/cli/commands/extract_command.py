#!/usr/bin/env python3
"""
fileguard CLI Commands - Cat

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from .base import Command


class CatCommand(Command):
    """Decode a whole file and print it."""

    def execute(self, args: dict[str, Any]) -> int:
        result = self.accessor.get_string(args["filename"], args.get("encoding"))
        if not result:
            return self._report(result)
        self.context.console.print(result.value, markup=False, highlight=False, end="")
        return 0
