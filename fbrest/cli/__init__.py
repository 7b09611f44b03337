from .config import (
    GLOBAL_OPTIONS, ConfigManager, StoreConfig, StoreResolver,
)
from .app import app, main

__all__ = [
    'GLOBAL_OPTIONS', 'ConfigManager', 'StoreConfig', 'StoreResolver',
    'app', 'main'
]
