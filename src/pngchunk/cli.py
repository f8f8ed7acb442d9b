"""Command-line interface for building and inspecting single chunks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import ChunkCodecError
from .utils import configure_logging

console = Console()


def _flag(value: bool, yes: str, no: str) -> str:
    return f"[green]{yes}[/green]" if value else f"[yellow]{no}[/yellow]"


def _read_blob(hex_data: Optional[str], input_path: Optional[Path]) -> bytes:
    if input_path is not None:
        if hex_data is not None:
            raise click.UsageError("pass either HEX_DATA or --input, not both")
        return input_path.read_bytes()
    if hex_data is None:
        raise click.UsageError("missing HEX_DATA or --input")
    try:
        return bytes.fromhex(hex_data)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="HEX_DATA") from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: Optional[str]) -> None:
    """pngchunk command-line interface."""
    configure_logging(log_level)


@main.command()
@click.argument("chunk_type")
@click.argument("message")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the raw chunk bytes to this file instead of printing hex.",
)
def build(chunk_type: str, message: str, output_path: Optional[Path]) -> None:
    """Build a chunk of CHUNK_TYPE carrying MESSAGE."""
    try:
        data = message.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise click.BadParameter("message is not valid UTF-8", param_hint="MESSAGE") from exc
    try:
        chunk = Chunk(ChunkType.from_str(chunk_type), data)
    except ChunkCodecError as exc:
        raise click.ClickException(str(exc)) from exc

    blob = chunk.to_bytes()
    if output_path is None:
        click.echo(blob.hex())
    else:
        output_path.write_bytes(blob)
        click.echo(f"wrote {len(blob)} bytes to {output_path}", err=True)


@main.command()
@click.argument("hex_data", required=False)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the chunk bytes from a file.",
)
def inspect(hex_data: Optional[str], input_path: Optional[Path]) -> None:
    """Parse one chunk and print its fields."""
    blob = _read_blob(hex_data, input_path)
    try:
        chunk = Chunk.parse(blob)
    except ChunkCodecError as exc:
        raise click.ClickException(str(exc)) from exc

    chunk_type = chunk.chunk_type
    console.print(f"type      {escape(str(chunk_type))}", highlight=False)
    console.print(f"critical  {_flag(chunk_type.is_critical, 'critical', 'ancillary')}", highlight=False)
    console.print(f"public    {_flag(chunk_type.is_public, 'public', 'private')}", highlight=False)
    console.print(f"copy      {_flag(chunk_type.is_safe_to_copy, 'safe', 'unsafe')}", highlight=False)
    console.print(f"length    {chunk.length}", highlight=False)
    console.print(f"crc       {chunk.crc} (0x{chunk.crc:08x})", highlight=False)
    console.print(escape(str(chunk)), highlight=False, soft_wrap=True)
    if len(blob) > chunk.wire_length:
        console.print(
            f"[yellow]{len(blob) - chunk.wire_length} trailing bytes ignored[/yellow]",
            highlight=False,
        )


__all__ = ["main"]
