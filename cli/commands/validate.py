"""
Validate command - check every message in a GX-700 .syx dump.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from gx700.errors import DecodeError
from gx700.reader import split_messages
from gx700.sysex.decoder import parse_message
from gx700.sysex.envelope import validate_envelope

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    index: int
    area: str
    message: str


@dataclass
class ValidationResult:
    """Result of validating a .syx dump."""

    filepath: str
    message_count: int
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class DumpValidator:
    """Validate every framed message in a GX-700 dump."""

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []
        messages = split_messages(self.data)

        if not messages:
            self._add_issue("error", 0, "File", "No SysEx messages found")

        for index, message in enumerate(messages):
            self._validate_message(index, message)

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            message_count=len(messages),
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, index: int, area: str, message: str) -> None:
        self.issues.append(ValidationIssue(severity, index, area, message))

    def _validate_message(self, index: int, message: bytes) -> None:
        try:
            envelope = validate_envelope(message)
        except DecodeError as e:
            self._add_issue("error", index, "Envelope", f"{type(e).__name__}: {e}")
            return

        area = f"P{envelope.patch_number:03d} {envelope.section_name}"

        try:
            parse_message(message)
        except DecodeError as e:
            self._add_issue("error", index, area, f"{type(e).__name__}: {e}")
            return

        if not envelope.is_header and not envelope.checksum_matches:
            self._add_issue(
                "warning", index, area, f"Checksum 0x{envelope.checksum:02X} does not match"
            )
        else:
            self._add_issue("info", index, area, "OK")


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Messages:[/bold] {result.message_count}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"OK: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=8)
        table.add_column("Msg", style="dim", width=5, justify="right")
        table.add_column("Area", style="cyan", width=28)
        table.add_column("Message", width=50)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", str(issue.index), issue.area, issue.message)

        for issue in result.warnings:
            table.add_row("[yellow]WARN[/yellow]", str(issue.index), issue.area, issue.message)

        console.print(table)

    if verbose and result.info:
        info_table = Table(title="Decoded Messages", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] #{issue.index} {issue.area}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help=".syx file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every message that decoded"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat checksum warnings as errors"),
) -> None:
    """
    Validate every message in a GX-700 SysEx dump.

    Checks for:

    - Roland GX-700 header signature
    - Known section id and matching message length
    - F7 terminator, reserved byte and enable flag
    - Table-indexed fields within range
    - Roland checksum (reported as a warning)

    Examples:

        gx700 validate patches.syx

        gx700 validate patches.syx --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    validator = DumpValidator(data, str(file))
    result = validator.validate()

    # In strict mode, treat warnings as errors
    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose)

    if not result.valid:
        raise typer.Exit(1)
