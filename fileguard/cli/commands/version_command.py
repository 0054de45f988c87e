#!/usr/bin/env python3
"""
fileguard CLI Commands - Version Command

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from ...__version__ import __license__, __version__
from .base import Command


class VersionCommand(Command):
    """Command for displaying version information."""

    def execute(self, _args: dict[str, Any]) -> int:
        self.context.console.print(
            f"[bold cyan]fileguard[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        self.context.console.print(f"License: {__license__}")
        return 0
