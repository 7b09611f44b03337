"""
Configuration management for fbrest CLI.

Handles:
- .fbrest INI file reading/writing
- Global options (--url, --token, --insecure)
- Store resolution (global option -> environment -> .fbrest)
"""

import os
from dataclasses import dataclass
from typing import Optional, Dict, Any

from fbrest.utils.constants import CONFIG_FILE_NAME, ENV_URL, ENV_TOKEN
from fbrest.utils.exceptions import ConfigError


# ============================================================================
# Global Options (set by CLI callback)
# ============================================================================

class GlobalOptions:
    """Global CLI options storage."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.clear()
        return cls._instance

    def set(self, url: str = None, token: str = None, insecure: bool = False, verbose: bool = False):
        """Set global options."""
        self.url = url
        self.token = token
        self.insecure = insecure
        self.verbose = verbose

    def get(self) -> Dict[str, Any]:
        """Get all global options as dict."""
        return {
            'url': self.url,
            'token': self.token,
            'insecure': self.insecure,
            'verbose': self.verbose,
        }

    def clear(self):
        """Clear all global options."""
        self.set()


# Singleton instance
GLOBAL_OPTIONS = GlobalOptions()


# ============================================================================
# Config File Management
# ============================================================================

class ConfigManager:
    """
    Manages the .fbrest configuration file (INI format).

    File format:
        [DEFAULT]
        URL=https://your-database.firebaseio.com/
        TOKEN=secret
    """

    @staticmethod
    def find_config_file(start: str = None) -> Optional[str]:
        """Find .fbrest by searching up from *start* (default: current directory)."""
        current = os.path.realpath(start or os.getcwd())

        visited = set()
        while current not in visited:
            visited.add(current)
            path = os.path.join(current, CONFIG_FILE_NAME)
            if os.path.isfile(path):
                return path
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return None

    @staticmethod
    def read(path: str) -> dict:
        """
        Read INI-style .fbrest file.

        Returns:
            dict with keys 'url' and 'token' (None when absent)
        """
        result = {'url': None, 'token': None}

        if not path or not os.path.exists(path):
            return result

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}") from e

        section = None
        for line in content.splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith('#'):
                continue

            if line.startswith('[') and line.endswith(']'):
                section = line[1:-1].strip().upper()
                continue

            if '=' in line and section == 'DEFAULT':
                key, value = line.split('=', 1)
                key = key.strip().upper()
                if key == 'URL':
                    result['url'] = value.strip()
                elif key == 'TOKEN':
                    result['token'] = value.strip()

        return result

    @staticmethod
    def write(path: str, url: str, token: Optional[str] = None):
        """Write INI-style .fbrest file."""
        lines = ['[DEFAULT]', f'URL={url}']
        if token:
            lines.append(f'TOKEN={token}')
        lines.append('')

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(lines))


# ============================================================================
# Store Resolution
# ============================================================================

@dataclass
class StoreConfig:
    url: str
    token: str = ""
    insecure: bool = False
    source: str = "default"


class StoreResolver:
    """
    Resolves which store to talk to based on priority:
    1. Global option (--url / --token)
    2. Environment (FBREST_URL / FBREST_TOKEN)
    3. .fbrest DEFAULT
    """

    @staticmethod
    def resolve(options: Dict[str, Any] = None, environ=None, config_path: str = None) -> StoreConfig:
        options = options if options is not None else GLOBAL_OPTIONS.get()
        environ = environ if environ is not None else os.environ

        if config_path is None:
            config_path = ConfigManager.find_config_file()
        file_config = ConfigManager.read(config_path)

        url, source = options.get('url'), 'global'
        if not url:
            url, source = environ.get(ENV_URL), 'env'
        if not url:
            url, source = file_config['url'], 'file'
        if not url:
            raise ConfigError(
                f"no store URL configured; pass --url, set {ENV_URL}, or run 'fbrest setup URL'"
            )

        token = options.get('token') or environ.get(ENV_TOKEN) or file_config['token'] or ""

        return StoreConfig(
            url=url,
            token=token,
            insecure=bool(options.get('insecure')),
            source=source,
        )
