import os
from typing import Optional

import typer

from fbrest import __version__
from fbrest.client import normalize_host
from fbrest.utils.constants import CONFIG_FILE_NAME
from ..helpers import OutputHelper
from ..config import ConfigManager
from ..app import app


@app.command(name="version", rich_help_panel="Utility")
def version_cmd(
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Show fbrest version information.
    """
    if show_help:
        OutputHelper.print_help("""\
Show fbrest version information.

[bold cyan]Usage:[/bold cyan]
  fbrest version
  fbrest --version        [dim]# Same as above[/dim]""")

    OutputHelper.print_panel(
        f"fbrest [green]{__version__}[/green]",
        title="Version",
        border_style="cyan"
    )


@app.command(name="setup", rich_help_panel="Utility")
def setup(
    url: str = typer.Argument("", help="Store URL, e.g. https://your-db.firebaseio.com/"),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Auth token"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Save the store URL and token to .fbrest in the current directory.
    """
    if show_help:
        OutputHelper.print_help(f"""\
Save the store URL and token to {CONFIG_FILE_NAME} in the current directory.

[bold cyan]Usage:[/bold cyan]
  fbrest setup [yellow]URL[/yellow]
  fbrest setup [yellow]URL[/yellow] -t [yellow]TOKEN[/yellow]

[bold cyan]Options:[/bold cyan]
  [yellow]-t, --token TOKEN[/yellow]     Auth token sent as ?auth=

[bold cyan]Examples:[/bold cyan]
  fbrest setup https://your-db.firebaseio.com/ -t secret""")

    if not url:
        typer.echo("Error: Missing required argument 'URL'.", err=True)
        raise typer.Exit(1)

    path = os.path.join(os.getcwd(), CONFIG_FILE_NAME)
    ConfigManager.write(path, url, token)

    lines = [f"Store  [bright_green]{normalize_host(url)}[/bright_green]"]
    lines.append(f"Token  {'[dim]set[/dim]' if token else '[dim]none[/dim]'}")
    lines.append(f"[dim]Saved to {path}[/dim]")
    OutputHelper.print_panel(
        "\n".join(lines),
        title="Setup",
        border_style="green"
    )
