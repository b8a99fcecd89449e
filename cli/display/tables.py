"""
Rich table displays for decoded patches.

Provides formatted output for single section records, whole patches and
patch bank summaries.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich.panel import Panel
from rich import box

from gx700.errors import DecodeError
from gx700.models.patch import NUM_SECTIONS, Patch, PatchBank
from gx700.models.sections import Disabled, Header, SectionRecord
from gx700.utils.tables import get_section_name
from cli.display.formatters import hex_bytes, record_rows

console = Console()


def section_table(record: SectionRecord, title: Optional[str] = None) -> Table:
    """Build a two-column table for one section record."""
    if title is None:
        title = f"[bold]{record.section_name}[/bold]"

    table = Table(title=title, box=box.SIMPLE, show_header=False, title_justify="left")
    table.add_column("Parameter", style="cyan", width=24)
    table.add_column("Value", width=44)

    if isinstance(record, Disabled):
        table.add_row("Status", "[dim]Off[/dim]")
        return table

    for name, value in record_rows(record):
        table.add_row(name, value)

    return table


def display_record(record: SectionRecord) -> None:
    """Display one decoded message."""
    if isinstance(record, Header):
        display_header(record)
        return

    status = "[green]On[/green]" if record.enabled else "[dim]Off[/dim]"
    console.print(
        f"[bold]Patch {record.patch_number}[/bold] - {record.section_name} - {status}"
    )
    console.print(section_table(record, title=""))


def display_header(header: Header) -> None:
    """Display a patch header record."""
    content = f"""[bold]Patch:[/bold] {header.patch_number}
[bold]Name:[/bold] {escape(header.name) or "(unnamed)"}
[bold]Reserved:[/bold] [dim]{hex_bytes(header.reserved[:20])}[/dim]
          [dim]{hex_bytes(header.reserved[20:])}[/dim]
[bold]Checksum:[/bold] 0x{header.checksum:02X} [dim](not verified)[/dim]"""

    console.print(
        Panel(
            content,
            title="[bold blue]Patch Header[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_patch(patch: Patch) -> None:
    """Display every section of one patch."""
    if patch.header is not None:
        display_header(patch.header)
    else:
        console.print(f"[bold]Patch {patch.number}[/bold] [dim](no header message)[/dim]")

    for section_id in range(1, NUM_SECTIONS):
        record = patch.sections.get(section_id)
        if record is None:
            console.print(f"[dim]{get_section_name(section_id)}: not received[/dim]")
            continue
        if not record.enabled:
            console.print(f"[dim]{record.section_name}: Off[/dim]")
            continue
        console.print(section_table(record))


def display_bank_summary(bank: PatchBank) -> None:
    """Display one row per patch with the on/off state of each section."""
    table = Table(title="Patches", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Name", style="cyan", width=14)

    # Section short labels: first three letters
    for section_id in range(1, NUM_SECTIONS):
        table.add_column(get_section_name(section_id)[:3], width=3, justify="center")

    for patch in bank:
        cells = []
        for section_id in range(1, NUM_SECTIONS):
            record = patch.sections.get(section_id)
            if record is None:
                cells.append("[dim]-[/dim]")
            elif record.enabled:
                cells.append("[green]●[/green]")
            else:
                cells.append("[dim]○[/dim]")
        table.add_row(str(patch.number), escape(patch.name) or "[dim](none)[/dim]", *cells)

    console.print(table)


def display_error(error: DecodeError, index: Optional[int] = None) -> None:
    """Display a decode error."""
    where = f"Message {index}: " if index is not None else ""
    console.print(f"[red]{where}{type(error).__name__}[/red] - {error}")
