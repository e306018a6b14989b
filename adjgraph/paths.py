"""
Path utilities for the graph explorer.

Handles path resolution for both development mode and frozen (PyInstaller)
executables. The optional config.json and .env live next to the executable
or, in development, in the project root.
"""

import sys
from pathlib import Path


def get_app_dir() -> Path:
    """
    Get the application directory.

    - In development: the project root (parent of adjgraph/)
    - When frozen: the directory containing the executable
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """Get the path to the optional config file."""
    return get_app_dir() / "config.json"


def get_env_path() -> Path:
    return get_app_dir() / ".env"
