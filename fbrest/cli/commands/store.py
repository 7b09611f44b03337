import json
from typing import Optional

import typer

from fbrest.utils.constants import VALUE_TYPES, STATUS_OK
from fbrest.utils.exceptions import ValidationError
from ..helpers import OutputHelper
from ..helpers.output import describe_status
from ..connection import _create_client
from ..app import app


_TRUE_WORDS = {'true', '1', 'yes', 'on'}
_FALSE_WORDS = {'false', '0', 'no', 'off'}


def _check_type(value_type: str) -> str:
    value_type = value_type.lower()
    if value_type not in VALUE_TYPES:
        raise ValidationError(f"unknown type '{value_type}' (choose from {', '.join(VALUE_TYPES)})")
    return value_type


def _parse_value(raw: str, value_type: str):
    """Convert a command-line VALUE into the Python value for *value_type*."""
    try:
        if value_type == 'int':
            return int(raw)
        if value_type == 'float':
            return float(raw)
    except ValueError as e:
        raise ValidationError(f"'{raw}' is not a valid {value_type}") from e

    if value_type == 'bool':
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValidationError(f"'{raw}' is not a valid bool (use true/false)")

    if value_type == 'json':
        try:
            json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(f"VALUE is not valid JSON: {e}") from e
    return raw


def _missing(name: str):
    typer.echo(f"Error: Missing required argument '{name}'.", err=True)
    raise typer.Exit(1)


def _write(verb: str, path: str, value: Optional[str], value_type: str):
    if not path:
        _missing('PATH')
    if value is None:
        _missing('VALUE')
    try:
        value_type = _check_type(value_type)
        parsed = _parse_value(value, value_type)
    except ValidationError as e:
        OutputHelper.handle_error(e, "Invalid Value")
        raise typer.Exit(1)

    client = _create_client()
    if verb == 'set':
        status = client.set_value(path, parsed, value_type)
        title = "Set"
    else:
        status = client.push_value(path, parsed, value_type)
        title = "Push"

    OutputHelper.print_status(status, path, title)
    if status != STATUS_OK:
        raise typer.Exit(1)


@app.command(name="get", rich_help_panel="Values")
def get(
    path: str = typer.Argument("", help="Store path (without .json)"),
    value_type: str = typer.Option("string", "--type", "-T", help="string, int, float, bool or json"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print the value only"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Read a value from the store.
    """
    if show_help:
        OutputHelper.print_help("""\
Read a value from the store.

[bold cyan]Usage:[/bold cyan]
  fbrest get [yellow]PATH[/yellow]
  fbrest get -T int [yellow]PATH[/yellow]      [dim]# Decode as integer[/dim]
  fbrest get -r [yellow]PATH[/yellow]          [dim]# Value only, for scripts[/dim]

[bold cyan]Options:[/bold cyan]
  [yellow]-T, --type TYPE[/yellow]       string, int, float, bool, json [dim](default: string)[/dim]
  [yellow]-r, --raw[/yellow]             Print the value without a panel

[bold cyan]Examples:[/bold cyan]
  fbrest get sensors/temp -T float
  fbrest get webnest -T json""")

    if not path:
        _missing('PATH')

    try:
        value_type = _check_type(value_type)
    except ValidationError as e:
        OutputHelper.handle_error(e, "Invalid Type")
        raise typer.Exit(1)

    client = _create_client()
    status, value = client.get_value(path, value_type)

    if status != STATUS_OK:
        OutputHelper.print_panel(
            f"[red]/{path}[/red]  {describe_status(status)}",
            title="Read Failed",
            border_style="red"
        )
        raise typer.Exit(1)

    text = value if isinstance(value, str) else json.dumps(value)
    if raw:
        typer.echo(text)
    else:
        OutputHelper.print_panel(
            text,
            title=f"/{path} ({value_type})",
            border_style="cyan"
        )


@app.command(name="set", rich_help_panel="Values")
def set_(
    path: str = typer.Argument("", help="Store path (without .json)"),
    value: Optional[str] = typer.Argument(None, help="Value to store"),
    value_type: str = typer.Option("string", "--type", "-T", help="string, int, float, bool or json"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Write a value to the store (PUT).
    """
    if show_help:
        OutputHelper.print_help("""\
Write a value to the store, replacing what is there (PUT).

[bold cyan]Usage:[/bold cyan]
  fbrest set [yellow]PATH VALUE[/yellow]
  fbrest set -T int [yellow]PATH VALUE[/yellow]

[bold cyan]Options:[/bold cyan]
  [yellow]-T, --type TYPE[/yellow]       string, int, float, bool, json [dim](default: string)[/dim]

[bold cyan]Examples:[/bold cyan]
  fbrest set sensors/temp 21.5 -T float
  fbrest set webnest/lamp '{"state":true}' -T json""")

    _write('set', path, value, value_type)


@app.command(name="push", rich_help_panel="Values")
def push(
    path: str = typer.Argument("", help="Store path (without .json)"),
    value: Optional[str] = typer.Argument(None, help="Value to append"),
    value_type: str = typer.Option("string", "--type", "-T", help="string, int, float, bool or json"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Append a value under a key generated by the store (POST).
    """
    if show_help:
        OutputHelper.print_help("""\
Append a value under a key generated by the store (POST).

[bold cyan]Usage:[/bold cyan]
  fbrest push [yellow]PATH VALUE[/yellow]
  fbrest push -T bool [yellow]PATH VALUE[/yellow]

[bold cyan]Options:[/bold cyan]
  [yellow]-T, --type TYPE[/yellow]       string, int, float, bool, json [dim](default: string)[/dim]

[bold cyan]Examples:[/bold cyan]
  fbrest push events door-opened
  fbrest push readings 42 -T int""")

    _write('push', path, value, value_type)


@app.command(name="remove", rich_help_panel="Values")
def remove(
    path: str = typer.Argument("", help="Store path (without .json)"),
    show_help: bool = typer.Option(False, "--help", "-h", is_eager=True, hidden=True)
):
    """
    Delete a value from the store.
    """
    if show_help:
        OutputHelper.print_help("""\
Delete a value and everything below it (DELETE).

[bold cyan]Usage:[/bold cyan]
  fbrest remove [yellow]PATH[/yellow]

[bold cyan]Examples:[/bold cyan]
  fbrest remove events/old""")

    if not path:
        _missing('PATH')

    client = _create_client()
    status = client.remove(path)
    OutputHelper.print_status(status, path, "Remove")
    if status != STATUS_OK:
        raise typer.Exit(1)
