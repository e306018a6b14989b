"""
Configuration management for the graph explorer.

Settings are resolved in priority order:
1. Environment variables (a .env file is loaded by app.py at start-up)
2. config.json next to the executable/project root
3. Built-in defaults

Nothing about the graph itself is stored; the config only shapes the UI
(default and maximum vertex count, server port, log level).
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from adjgraph.paths import get_config_path

logger = logging.getLogger(__name__)

# config key -> environment variable
ENV_VARS = {
    'default_vertices': 'ADJGRAPH_DEFAULT_VERTICES',
    'max_vertices': 'ADJGRAPH_MAX_VERTICES',
    'port': 'ADJGRAPH_PORT',
    'title': 'ADJGRAPH_TITLE',
    'log_level': 'LOG_LEVEL',
    'storage_secret': 'ADJGRAPH_STORAGE_SECRET',
}

_INT_KEYS = {'default_vertices', 'max_vertices', 'port'}
_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass(frozen=True)
class Settings:
    default_vertices: int = 4
    max_vertices: int = 10
    port: int = 8081
    title: str = 'Graph Explorer'
    log_level: str = 'INFO'
    storage_secret: str = 'adjgraph_secret_key_123'


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load config.json. Missing or unreadable files yield an empty dict."""
    path = config_path or get_config_path()
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Could not read {path}, using defaults: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a JSON object")
        return {}
    return data


def load_settings(config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Resolve settings from the environment, config.json and defaults.

    Raises:
        ValueError if a value has the wrong type or is out of range.
    """
    environ = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}

    file_config = load_config(config_path)
    for key in ENV_VARS:
        if key in file_config:
            raw[key] = file_config[key]
    for key, env_var in ENV_VARS.items():
        if environ.get(env_var):
            raw[key] = environ[env_var]

    for key in _INT_KEYS & raw.keys():
        try:
            raw[key] = int(raw[key])
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {raw[key]!r}") from None
    if 'log_level' in raw:
        raw['log_level'] = str(raw['log_level']).upper()

    settings = Settings(**raw)
    validate_settings(settings)
    return settings


def validate_settings(settings: Settings) -> None:
    if settings.max_vertices < 1:
        raise ValueError(f"max_vertices must be >= 1, got {settings.max_vertices}")
    if not 1 <= settings.default_vertices <= settings.max_vertices:
        raise ValueError(
            f"default_vertices must be between 1 and {settings.max_vertices}, "
            f"got {settings.default_vertices}"
        )
    if settings.port <= 0:
        raise ValueError(f"port must be positive, got {settings.port}")
    if settings.log_level not in _LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {settings.log_level!r}")
