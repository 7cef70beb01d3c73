"""Path utilities for per-user configuration."""

import os
import sys
from pathlib import Path

from hostfacts.constants import APP_NAME, DATA_DIR_ENV_VAR


def get_data_dir() -> Path:
    """Get the user data directory for config.

    The HOSTFACTS_DATA_DIR environment variable takes precedence over
    the platform default.
    """
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override)

    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / APP_NAME
    elif sys.platform == 'win32':
        return Path.home() / 'AppData' / 'Local' / APP_NAME
    return Path.home() / '.config' / APP_NAME


def get_config_path() -> Path:
    """Get the main config file path."""
    return get_data_dir() / 'config.json'
