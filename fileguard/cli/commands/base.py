#!/usr/bin/env python3
"""
fileguard CLI Commands - Base Abstractions

Command Pattern implementation for fileguard CLI commands.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...core.accessor import FileAccessor
from ...core.results import AccessResult
from ...utils.logger import set_level, setup_logger
from ..display import display_error


def configure_logging_levels(verbose: bool, quiet: bool, config: Config | None = None) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        set_level(logging.CRITICAL)
        return
    if verbose:
        set_level(logging.DEBUG)
        return
    set_level(config.get_log_level() if config else logging.WARNING)


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for formatted output
        logger: Logger instance for command execution logging
        config: Application configuration object
        accessor: File accessor configured from config
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
    """

    console: Console
    logger: Any
    config: Config
    accessor: FileAccessor
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
        console: Console | None = None,
    ) -> "CommandContext":
        """Factory method to create a CommandContext with proper initialization."""
        config = config or Config()
        verbose = verbose or bool(config.get("general", "verbose", False))
        logger = setup_logger()
        configure_logging_levels(verbose, quiet, config)

        return cls(
            console=console or Console(),
            logger=logger,
            config=config,
            accessor=FileAccessor.from_config(config),
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command wraps one accessor operation, renders its result and maps
    it to an exit code.
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code (0 for success, non-zero for failure)
        """

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    @property
    def accessor(self) -> FileAccessor:
        return self.context.accessor

    def _report(self, result: AccessResult, success_message: str | None = None) -> int:
        """Print the outcome of an accessor result and return the exit code."""
        if not result:
            display_error(self.context.console, result.error)
            return 1
        if success_message and not self.context.quiet:
            self.context.console.print(f"[green]{success_message}[/green]")
        return 0
