#!/usr/bin/env python3
"""
fileguard CLI - Command Line Interface

This module provides the Click-based CLI entry point for fileguard. Each
subcommand delegates to a Command class operating through the shared
CommandContext.

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

from typing import Any

import click

from .cli.commands import (
    AlignCommand,
    CatCommand,
    Command,
    CommandContext,
    DummyCommand,
    InfoCommand,
    PrintCommand,
    ReadCommand,
    VersionCommand,
    WriteCommand,
)
from .cli.validators import encoding_callback, hex_callback, offset_callback, size_callback
from .config import Config

ENCODING_HELP = "Text encoding: ascii, unicode (utf-16), utf-32, utf-7, utf-8"


def _run(ctx: click.Context, command_cls: type[Command], **args: Any) -> None:
    command = command_cls(ctx.obj)
    ctx.exit(command.execute(args))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Suppress non-critical output")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False), help="Custom config file path"
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, config_path: str | None):
    """fileguard - validated offset-based file access."""
    ctx.obj = CommandContext.create(config=Config(config_path), verbose=verbose, quiet=quiet)


@cli.command()
@click.argument("filename", type=click.Path())
@click.pass_context
def info(ctx: click.Context, filename: str):
    """Show size, attributes and guard verdict of FILENAME."""
    _run(ctx, InfoCommand, filename=filename)


@cli.command()
@click.argument("filename", type=click.Path())
@click.option("-o", "--offset", default="0", callback=offset_callback, help="Absolute offset")
@click.option("-n", "--size", default="256", callback=size_callback, help="Bytes to read")
@click.pass_context
def read(ctx: click.Context, filename: str, offset: int, size: int):
    """Hex dump SIZE bytes of FILENAME at OFFSET."""
    _run(ctx, ReadCommand, filename=filename, offset=offset, size=size)


@cli.command()
@click.argument("filename", type=click.Path())
@click.argument("offset", callback=offset_callback)
@click.argument("payload", callback=hex_callback)
@click.pass_context
def write(ctx: click.Context, filename: str, offset: int, payload: bytearray):
    """Write hex PAYLOAD into FILENAME at OFFSET."""
    _run(ctx, WriteCommand, filename=filename, offset=offset, payload=payload)


@cli.command(name="print")
@click.argument("filename", type=click.Path())
@click.argument("text")
@click.option("-o", "--offset", default=None, callback=offset_callback, help="Absolute offset")
@click.option("-e", "--encoding", default=None, callback=encoding_callback, help=ENCODING_HELP)
@click.pass_context
def print_cmd(ctx: click.Context, filename: str, text: str, offset: int | None, encoding):
    """Write TEXT into FILENAME, at end of file unless OFFSET is given."""
    _run(ctx, PrintCommand, filename=filename, text=text, offset=offset, encoding=encoding)


@cli.command()
@click.argument("filename", type=click.Path())
@click.option("-e", "--encoding", default=None, callback=encoding_callback, help=ENCODING_HELP)
@click.pass_context
def cat(ctx: click.Context, filename: str, encoding):
    """Decode FILENAME and print it."""
    _run(ctx, CatCommand, filename=filename, encoding=encoding)


@cli.command()
@click.argument("filename", type=click.Path())
@click.argument("size", callback=size_callback)
@click.pass_context
def dummy(ctx: click.Context, filename: str, size: int):
    """Create FILENAME as SIZE zero bytes."""
    _run(ctx, DummyCommand, filename=filename, size=size)


@cli.command()
@click.argument("filename", type=click.Path())
@click.option("-s", "--sector", default=None, callback=size_callback, help="Sector size in bytes")
@click.pass_context
def align(ctx: click.Context, filename: str, sector: int | None):
    """Pad FILENAME with zeros to a multiple of the sector size."""
    _run(ctx, AlignCommand, filename=filename, sector=sector)


@cli.command()
@click.pass_context
def version(ctx: click.Context):
    """Show version information."""
    _run(ctx, VersionCommand)


def main() -> None:
    """Console script entry point."""
    cli()
