"""Output formatting and display utilities."""
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from fbrest.utils.constants import STATUS_OK
from fbrest.utils.exceptions import FbrestException
from . import get_panel_box, CONSOLE_WIDTH


def configure_logging(verbose: bool = False):
    """Route library logging through rich on stderr."""
    handler = RichHandler(
        console=Console(stderr=True, width=CONSOLE_WIDTH),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def describe_status(status: int) -> str:
    if status == 0:
        return "no response (connection failed or status line unreadable)"
    if status == STATUS_OK:
        return "OK"
    return f"HTTP {status}"


class OutputHelper:
    """Output formatting and display utilities."""

    _console = Console()
    PANEL_WIDTH = None

    @staticmethod
    def _get_panel_width():
        """Get panel width."""
        if OutputHelper.PANEL_WIDTH is None:
            OutputHelper.PANEL_WIDTH = CONSOLE_WIDTH
        return OutputHelper.PANEL_WIDTH

    @staticmethod
    def print_panel(content: str, title: str = "", border_style: str = "blue"):
        """Print content in a rich panel box."""
        width = OutputHelper._get_panel_width()
        OutputHelper._console.print(Panel(content, title=title, title_align="left", border_style=border_style, box=get_panel_box(), expand=True, width=width))

    @staticmethod
    def print_help(text: str):
        """Print a command help panel and exit."""
        console = Console(width=CONSOLE_WIDTH)
        console.print(Panel(text, border_style="dim", box=get_panel_box(), width=CONSOLE_WIDTH))
        console.print()
        raise typer.Exit()

    @staticmethod
    def print_status(status: int, path: str, title: str):
        """Print the outcome of a write/remove call."""
        if status == STATUS_OK:
            OutputHelper.print_panel(
                f"[bright_green]/{path}[/bright_green]  {describe_status(status)}",
                title=title,
                border_style="green"
            )
        else:
            OutputHelper.print_panel(
                f"[red]/{path}[/red]  {describe_status(status)}",
                title=f"{title} Failed",
                border_style="red"
            )

    @staticmethod
    def create_device_table(registry) -> Table:
        table = Table(box=get_panel_box(), width=OutputHelper._get_panel_width(), title_justify="left")
        table.add_column("Device", style="bright_cyan")
        table.add_column("State")
        table.add_column("Icon", style="dim")
        table.add_column("Slider", justify="right")
        table.add_column("Order", justify="right")

        for record in sorted(registry, key=lambda r: (r.order, r.name)):
            state = "[bright_green]on[/bright_green]" if record.state else "[dim]off[/dim]"
            slider = str(record.slider_value) if record.slider_enabled else "[dim]-[/dim]"
            table.add_row(record.name, state, record.icon, slider, str(record.order))
        return table

    @staticmethod
    def print_table(table: Table):
        OutputHelper._console.print(table)

    @staticmethod
    def handle_error(error: Exception, context: str = "Error") -> bool:
        """
        Handle fbrest errors with user-friendly messages.

        Args:
            error: The exception to handle
            context: Context string for the error (e.g., "Configuration")

        Returns:
            True if error was handled, False if it should be re-raised
        """
        if isinstance(error, FbrestException):
            OutputHelper.print_panel(
                f"[red]{error.message}[/red]",
                title=context,
                border_style="red"
            )
            return True
        return False
