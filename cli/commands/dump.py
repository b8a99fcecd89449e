"""
Dump command - annotated hex dump of the messages in a .syx file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gx700.errors import DecodeError
from gx700.reader import split_messages
from gx700.sysex.envelope import validate_envelope
from cli.display.hex_view import display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help=".syx file to dump"),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="Only dump message N (0-based)"),
    section: Optional[int] = typer.Option(None, "--section", "-s", help="Only dump section id (0-13)"),
) -> None:
    """
    Show an annotated hex dump of each message.

    Examples:

        gx700 dump patches.syx

        gx700 dump patches.syx --section 9
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        messages = split_messages(f.read())

    if index is not None:
        if not 0 <= index < len(messages):
            console.print(f"[red]Error: Message index {index} out of range (0-{len(messages) - 1})[/red]")
            raise typer.Exit(1)
        selected = [(index, messages[index])]
    else:
        selected = list(enumerate(messages))

    for i, message in selected:
        try:
            envelope = validate_envelope(message)
            title = f"#{i} Patch {envelope.patch_number} - {envelope.section_name} ({len(message)} bytes)"
            section_id = envelope.section_id
        except DecodeError as e:
            title = f"#{i} [red]{type(e).__name__}[/red] ({len(message)} bytes)"
            section_id = None

        if section is not None and section_id != section:
            continue

        display_hex_dump(message, title=title)
