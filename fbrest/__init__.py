__version__ = "0.1.0"

from .client import StoreClient, StoreResult
from .registry import DeviceRecord, DeviceRegistry

__all__ = [
    '__version__',
    'StoreClient',
    'StoreResult',
    'DeviceRecord',
    'DeviceRegistry',
]
