#!/usr/bin/env python3
"""
fileguard CLI Commands

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import Command, CommandContext
from .extract_command import CatCommand
from .info_command import InfoCommand, ReadCommand
from .pad_command import AlignCommand, DummyCommand
from .version_command import VersionCommand
from .write_command import PrintCommand, WriteCommand

__all__ = [
    "Command",
    "CommandContext",
    "AlignCommand",
    "CatCommand",
    "DummyCommand",
    "InfoCommand",
    "PrintCommand",
    "ReadCommand",
    "VersionCommand",
    "WriteCommand",
]
