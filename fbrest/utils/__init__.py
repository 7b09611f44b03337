from .constants import (
    HTTPS_PORT, STATUS_OK, NO_DATA,
    CONNECT_MAX_ATTEMPTS, CONNECT_RETRY_DELAY,
    MAX_DEVICES, VALUE_TYPES,
)
from .exceptions import (
    FbrestException,
    TransportError, TlsError,
    ProtocolError,
    RegistryError, RegistryFullError,
    CLIError, ConfigError, ValidationError,
)

__all__ = [
    'HTTPS_PORT', 'STATUS_OK', 'NO_DATA',
    'CONNECT_MAX_ATTEMPTS', 'CONNECT_RETRY_DELAY',
    'MAX_DEVICES', 'VALUE_TYPES',
    'FbrestException',
    'TransportError', 'TlsError',
    'ProtocolError',
    'RegistryError', 'RegistryFullError',
    'CLIError', 'ConfigError', 'ValidationError',
]
