import time
from typing import List, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text

from fbrest.registry import DeviceRegistry
from fbrest.utils.constants import DEFAULT_DEVICE_PATH, STATUS_OK, MAX_DEVICES
from fbrest.utils.exceptions import RegistryError
from ..helpers import OutputHelper
from ..helpers.output import describe_status
from ..connection import _create_client
from ..app import app


def _build_registry(names: List[str]) -> DeviceRegistry:
    registry = DeviceRegistry(capacity=MAX_DEVICES)
    for name in names:
        registry.register(name)
    return registry


@app.command(name="poll", rich_help_panel="Devices")
def poll(
    path: str = typer.Argument(DEFAULT_DEVICE_PATH, help="Store path holding the device document"),
    devices: List[str] = typer.Option([], "--device", "-d", help="Device name to track (repeatable)"),
    interval: float = typer.Option(0.0, "--interval", "-i", help="Seconds between polls (0: poll once)"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Stop after N polls"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Poll a device document and show the tracked devices.
    """
    if show_help:
        OutputHelper.print_help("""\
Poll a device document and show the tracked devices.

[bold cyan]Usage:[/bold cyan]
  fbrest poll [yellow]PATH[/yellow] -d [yellow]NAME[/yellow] [-d [yellow]NAME[/yellow] ...]
  fbrest poll -d lamp -i 5 -n 10      [dim]# Every 5 s, 10 times[/dim]

[bold cyan]Options:[/bold cyan]
  [yellow]-d, --device NAME[/yellow]     Device to track, repeatable [dim](up to 16)[/dim]
  [yellow]-i, --interval S[/yellow]      Seconds between polls [dim](default: 0, poll once)[/dim]
  [yellow]-n, --count N[/yellow]         Stop after N polls

[bold cyan]Examples:[/bold cyan]
  fbrest poll webnest -d lamp -d fan""")

    if not devices:
        typer.echo("Error: at least one --device is required.", err=True)
        raise typer.Exit(1)

    try:
        registry = _build_registry(devices)
    except RegistryError as e:
        OutputHelper.handle_error(e, "Device Registry")
        raise typer.Exit(1)

    client = _create_client()
    console = Console()
    polls = 0
    status = 0

    while True:
        spinner = Spinner("dots", text=Text(f" Polling /{path}...", style="bright_cyan"))
        with Live(spinner, console=console, refresh_per_second=10, transient=True):
            status = registry.sync(client, path)
        polls += 1

        if status == STATUS_OK:
            OutputHelper.print_table(OutputHelper.create_device_table(registry))
        else:
            OutputHelper.print_panel(
                f"[red]/{path}[/red]  {describe_status(status)}",
                title="Poll Failed",
                border_style="red"
            )

        if interval <= 0 or (count is not None and polls >= count):
            break
        time.sleep(interval)

    if status != STATUS_OK:
        raise typer.Exit(1)
