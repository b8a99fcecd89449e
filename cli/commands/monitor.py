"""
MIDI commands - list ports and decode patch messages as they arrive.

Use ``monitor`` while sending a bulk dump from the GX-700
(UTILITY > BULK DUMP) to see every patch message decoded live.
"""

import time
from pathlib import Path
from typing import Optional

import mido
import typer
from rich.console import Console

from gx700.sysex.decoder import decode
from cli.display.tables import display_error, display_record

console = Console()
app = typer.Typer()


def find_input_port(port_name: Optional[str]) -> Optional[str]:
    """
    Pick an input port.

    Uses port_name if given, else the first port that looks like a USB/MIDI
    interface, else the first port.
    """
    ports = mido.get_input_names()
    if not ports:
        return None
    if port_name is not None:
        return port_name
    for p in ports:
        if "midi" in p.lower() or "usb" in p.lower():
            return p
    return ports[0]


@app.command()
def ports() -> None:
    """List available MIDI input and output ports."""
    inputs = mido.get_input_names()
    outputs = mido.get_output_names()

    console.print(f"\n[bold]Input ports[/bold] ({len(inputs)}):")
    if inputs:
        for i, name in enumerate(inputs):
            console.print(f"  [{i}] {name}")
    else:
        console.print("  [dim](none found)[/dim]")

    console.print(f"\n[bold]Output ports[/bold] ({len(outputs)}):")
    if outputs:
        for i, name in enumerate(outputs):
            console.print(f"  [{i}] {name}")
    else:
        console.print("  [dim](none found)[/dim]")


@app.command()
def monitor(
    port: Optional[str] = typer.Option(
        None, "--port", "-p", envvar="GX700_MIDI_PORT", help="MIDI input port name"
    ),
    timeout: int = typer.Option(
        60, "--timeout", "-t", envvar="GX700_MONITOR_TIMEOUT", help="Listen duration in seconds"
    ),
    save: Optional[Path] = typer.Option(None, "--save", help="Append received messages to a .syx file"),
) -> None:
    """
    Listen on a MIDI input and decode GX-700 patch messages.

    Examples:

        gx700 monitor

        gx700 monitor --port "USB Midi" --timeout 120 --save dump.syx
    """
    port_name = find_input_port(port)
    if port_name is None:
        console.print("[red]Error: No MIDI input ports found.[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Port:[/bold] {port_name}")
    console.print(f"[bold]Duration:[/bold] {timeout}s")
    console.print("[dim]Waiting for SysEx... start a bulk dump on the GX-700.[/dim]")

    count = 0
    out = open(save, "ab") if save is not None else None
    try:
        with mido.open_input(port_name) as inport:
            # Flush
            for _ in inport.iter_pending():
                pass

            start = time.time()
            while time.time() - start < timeout:
                msg = inport.poll()
                if msg is None:
                    time.sleep(0.002)
                    continue
                if msg.type != "sysex":
                    continue

                count += 1
                data = bytes([0xF0, *msg.data, 0xF7])
                if out is not None:
                    out.write(data)

                result = decode(data)
                if result.ok:
                    display_record(result.record)
                else:
                    display_error(result.error, count)
    finally:
        if out is not None:
            out.close()

    console.print(f"\nTotal SysEx messages received: {count}")
    if count == 0:
        raise typer.Exit(1)
