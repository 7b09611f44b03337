"""
Store client construction for CLI commands.

Resolves the store URL and token from global options, environment and the
.fbrest file, and builds a StoreClient with the requested TLS settings.
"""

import functools

import typer

from fbrest.client import StoreClient
from fbrest.transport import create_transport
from fbrest.utils.exceptions import CLIError
from .helpers import OutputHelper
from .config import StoreResolver, StoreConfig


def _resolve_store() -> StoreConfig:
    try:
        return StoreResolver.resolve()
    except CLIError as e:
        OutputHelper.handle_error(e, "Configuration")
        raise typer.Exit(1)


def _create_client(config: StoreConfig = None) -> StoreClient:
    """Create a StoreClient for the resolved store."""
    if config is None:
        config = _resolve_store()
    factory = functools.partial(create_transport, verify=not config.insecure)
    return StoreClient(config.url, config.token, transport_factory=factory)
