import sys
from typing import Optional

import click
import typer

from fbrest import __version__
from .helpers import OutputHelper, configure_logging
from .config import GLOBAL_OPTIONS


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    help="REST client for Firebase-style realtime stores."
)


def _print_main_help():
    lines = []
    lines.append("[bold]REST client for Firebase-style realtime stores[/bold]")
    lines.append("[dim]Read, write, push and remove values over HTTPS[/dim]")
    lines.append("")
    lines.append("[bold cyan]Usage:[/bold cyan]")
    lines.append("  fbrest [yellow][OPTIONS][/yellow] [green]COMMAND[/green] [[dim]ARGS[/dim]]...")
    lines.append("")
    lines.append("[bold cyan]Global Options:[/bold cyan]")
    lines.append("  [yellow]-u, --url[/yellow] [cyan]URL[/cyan]         Store URL [dim](https://db.firebaseio.com/)[/dim]")
    lines.append("  [yellow]-t, --token[/yellow] [cyan]TOKEN[/cyan]     Auth token sent as ?auth=")
    lines.append("  [yellow]-k, --insecure[/yellow]        Skip TLS certificate verification")
    lines.append("  [yellow]-v, --verbose[/yellow]         Debug logging")

    command_groups = [
        ("Values", [
            ("get", "Read a value from the store"),
            ("set", "Write a value to the store (PUT)"),
            ("push", "Append a value under a generated key (POST)"),
            ("remove", "Delete a value from the store"),
        ]),
        ("Devices", [
            ("poll", "Poll a device document and show device states"),
        ]),
        ("Utility", [
            ("setup", "Save the store URL and token to .fbrest"),
            ("version", "Show fbrest version"),
        ]),
    ]

    for group_name, commands in command_groups:
        lines.append("")
        lines.append(f"[bold cyan]{group_name}:[/bold cyan]")
        for cmd, desc in commands:
            lines.append(f"  [green]{cmd:<12}[/green] {desc}")

    lines.append("")
    lines.append("[dim]Use 'fbrest COMMAND --help' for detailed help on each command.[/dim]")

    OutputHelper.print_panel(
        "\n".join(lines),
        title="fbrest",
        border_style="bright_blue"
    )


# =============================================================================
# App Callback
# =============================================================================

@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Store URL"),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Auth token"),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Skip TLS certificate verification"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    show_help: bool = typer.Option(
        False,
        "--help",
        is_eager=True,
        expose_value=True,
        help="Show this message and exit."
    )
):
    """
    REST client for Firebase-style realtime stores.
    """
    GLOBAL_OPTIONS.set(url, token, insecure, verbose)
    configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj.update(GLOBAL_OPTIONS.get())

    if show_help or ctx.invoked_subcommand is None:
        _print_main_help()
        raise typer.Exit()


# =============================================================================
# Import all commands to register them with the app
# =============================================================================
from .commands import store, device, utility

# These imports are for side-effect (command registration)
_command_modules = (store, device, utility)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    if len(sys.argv) == 1:
        OutputHelper.print_panel(
            "Use [bright_blue]fbrest --help[/bright_blue] to see available commands.",
            title="fbrest",
            border_style="green"
        )
        raise SystemExit()

    if len(sys.argv) == 2 and sys.argv[1] == '--version':
        OutputHelper.print_panel(
            f"[bright_blue]fbrest[/bright_blue] version [bright_green]{__version__}[/bright_green]",
            title="Version",
            border_style="green"
        )
        sys.exit(0)

    try:
        exit_code = app(standalone_mode=False) or 0
    except click.exceptions.UsageError as e:
        OutputHelper.print_panel(
            f"[red]{e.format_message()}[/red]\n\n"
            "[bold cyan]Usage:[/bold cyan] fbrest [OPTIONS] COMMAND [ARGS]...",
            title="Error",
            border_style="red"
        )
        exit_code = 2
    except click.exceptions.Exit as e:
        exit_code = e.exit_code
    except click.exceptions.Abort:
        print()
        exit_code = 1
    except KeyboardInterrupt:
        print()
        exit_code = 130
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
