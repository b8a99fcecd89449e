"""
Info command - decode a .syx patch dump and display its patches.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from gx700.reader import GX700Reader
from gx700.utils.diagnostics import UnmappedCollector
from gx700.utils.tables import get_section_name
from cli.display.tables import display_bank_summary, display_error, display_patch

console = Console()
app = typer.Typer()


def display_unmapped_summary(collector: UnmappedCollector) -> None:
    """Show every unmapped byte offset with the values observed there."""
    grouped = collector.values_by_offset()
    if not grouped:
        console.print("[dim]No unmapped bytes observed.[/dim]")
        return

    table = Table(title="Unmapped Bytes", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Section", style="cyan", width=22)
    table.add_column("Byte", width=5, justify="right")
    table.add_column("Observed values", width=48)

    for (section_id, offset), values in sorted(grouped.items()):
        observed = ", ".join(f"0x{v:02X}x{n}" for v, n in sorted(values.items()))
        table.add_row(get_section_name(section_id), str(offset), observed)

    console.print(table)


@app.command()
def info(
    file: Path = typer.Argument(..., help="GX-700 .syx patch dump"),
    patch: Optional[int] = typer.Option(None, "--patch", "-p", help="Show all sections of one patch (1-100)"),
    unmapped: bool = typer.Option(False, "--unmapped", "-u", help="Summarize unmapped bytes"),
) -> None:
    """
    Display patches in a GX-700 SysEx dump.

    Examples:

        gx700 info patches.syx

        gx700 info patches.syx --patch 12

        gx700 info patches.syx --unmapped
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    collector = UnmappedCollector() if unmapped else None
    reader = GX700Reader(sink=collector)
    bank = reader.parse_file(file)

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Messages:[/bold] {len(reader.messages)}\n"
            f"[bold]Patches:[/bold] {len(bank)}\n"
            f"[bold]Errors:[/bold] {len(bank.errors)}",
            title="[bold blue]GX-700 Dump[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if patch is not None:
        selected = bank.get(patch)
        if selected is None:
            console.print(f"[red]Error: Patch {patch} not found in dump[/red]")
            raise typer.Exit(1)
        display_patch(selected)
    elif len(bank):
        display_bank_summary(bank)

    for index, error in bank.errors:
        display_error(error, index)

    if collector is not None:
        display_unmapped_summary(collector)
