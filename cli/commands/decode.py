"""
Decode command - decode a single message given as hex.
"""

from typing import List

import typer
from rich.console import Console

from gx700.sysex.decoder import decode as decode_message
from cli.display.tables import display_error, display_record

console = Console()
app = typer.Typer()


def parse_hex(tokens: List[str]) -> bytes:
    """
    Parse hex bytes given as separate tokens or one run.

    Accepts "F0 41 00", "F0,41,00", "0xF0 0x41" and "F04100".
    """
    text = " ".join(tokens).replace(",", " ").replace("0x", "").replace("0X", "")
    return bytes.fromhex(text)


@app.command()
def decode(
    message: List[str] = typer.Argument(..., help="Message bytes in hex, e.g. F0 41 00 79 12 00 ..."),
) -> None:
    """
    Decode one GX-700 patch message.

    Examples:

        gx700 decode F0 41 00 79 12 00 00 03 00 01 02 32 3C 32 46 00 F7
    """
    try:
        data = parse_hex(message)
    except ValueError as e:
        console.print(f"[red]Error: Invalid hex input: {e}[/red]")
        raise typer.Exit(2)

    result = decode_message(data)
    if not result.ok:
        display_error(result.error)
        raise typer.Exit(1)

    display_record(result.record)
