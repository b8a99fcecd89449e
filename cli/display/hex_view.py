"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from gx700.sysex.envelope import ENABLE_OFFSET, PATCH_OFFSET, SECTION_OFFSET, SIGNATURE

console = Console()


def byte_style(offset: int, length: int, section_id: int) -> str:
    """Rich style for a byte by its role in the message."""
    if offset < len(SIGNATURE) or offset == length - 1:
        return "dim"
    if offset in (PATCH_OFFSET, SECTION_OFFSET):
        return "bold yellow"
    if offset == length - 2:
        return "magenta"
    if section_id != 0 and offset in (ENABLE_OFFSET - 1, ENABLE_OFFSET):
        return "green"
    return "cyan"


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    bytes_per_line: int = 16,
) -> None:
    """Display a message as a hex dump colored by byte role."""
    section_id = data[SECTION_OFFSET] if len(data) > SECTION_OFFSET else 0
    lines = []

    for offset in range(0, len(data), bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append(" ")  # Extra space at midpoint
            style = byte_style(offset + i, len(data), section_id)
            hex_parts.append(f"[{style}]{b:02X}[/{style}]")
        hex_str = " ".join(hex_parts)

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        # Markup tags do not take up columns; pad by visible width
        padding = " " * ((bytes_per_line - len(chunk)) * 3 + (2 if len(chunk) <= 8 else 0))

        lines.append(f"[dim]{offset:04d}[/dim]  {hex_str}{padding}  [cyan]{escape(ascii_str)}[/cyan]")

    legend = (
        "[dim]header/F7[/dim]  [bold yellow]patch/section[/bold yellow]  "
        "[green]reserved/enable[/green]  [cyan]fields[/cyan]  [magenta]checksum[/magenta]"
    )
    content = "\n".join(lines + ["", legend])
    console.print(Panel(content, title=title, border_style="blue", expand=False))
