from . import store
from . import device
from . import utility

from ..connection import _create_client, _resolve_store
from ..helpers import OutputHelper, CONSOLE_WIDTH

__all__ = [
    '_create_client',
    '_resolve_store',
    'OutputHelper',
    'CONSOLE_WIDTH',
]
