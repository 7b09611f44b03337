from .base import Transport
from .tls import TlsTransport
from .connector import Connector
from .memory import MemoryTransport


def create_transport(verify: bool = True, timeout: float = None) -> Transport:
    """Create a TLS transport for one store request.

    Args:
        verify: Verify the server certificate (default: True)
        timeout: Socket timeout in seconds (default: SOCKET_TIMEOUT)

    Returns:
        TlsTransport instance, not yet opened
    """
    if timeout is None:
        return TlsTransport(verify=verify)
    return TlsTransport(verify=verify, timeout=timeout)


__all__ = [
    'Transport',
    'TlsTransport',
    'Connector',
    'MemoryTransport',
    'create_transport',
]
