"""
GX700 - Decoder for Boss GX-700 patch SysEx dumps.

A CLI tool for inspecting and validating GX-700 patch messages.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from gx700 import __version__
from cli.commands.info import info
from cli.commands.decode import decode
from cli.commands.validate import validate
from cli.commands.dump import dump
from cli.commands.monitor import monitor, ports

console = Console()

# Main app
app = typer.Typer(
    name="gx700",
    help="Decode and validate Boss GX-700 patch SysEx dumps.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="decode")(decode)
app.command(name="validate")(validate)
app.command(name="dump")(dump)
app.command(name="ports")(ports)
app.command(name="monitor")(monitor)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]gx700[/bold] version {__version__}")
    console.print("[dim]Decoder for Boss GX-700 patch SysEx dumps[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Show decoder debug logging"),
) -> None:
    """
    GX700 - Decode Boss GX-700 patch SysEx messages.

    [bold]Files:[/bold]

        gx700 info patches.syx             # Patch overview
        gx700 info patches.syx --patch 12  # All sections of one patch
        gx700 validate patches.syx         # Check every message
        gx700 dump patches.syx             # Annotated hex dump

    [bold]Single messages:[/bold]

        gx700 decode F0 41 00 79 12 00 ... F7

    [bold]Live:[/bold]

        gx700 ports                        # List MIDI ports
        gx700 monitor                      # Decode messages as they arrive

    Use --help with any command for more details.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
