# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for themewatch.

Provides a ThemewatchConfig dataclass with the catalog endpoint,
release channel, timeouts and cache lifetime. Loads from
~/.themewatch/config.json if it exists, otherwise uses sensible
defaults.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-02-06
"""

# Standard library
import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".themewatch"
_CONFIG_FILE = _CONFIG_DIR / "config.json"
_DEFAULT_CACHE = _CONFIG_DIR / "cache.db"
_CACHE_ENV_VAR = "THEMEWATCH_CACHE_PATH"

HOUR_IN_SECONDS = 3600


@dataclass
class ThemewatchConfig:
    """Global themewatch configuration with defaults.

    Attributes
    ----------
    api_base : str
        Base URL of the theme catalog service.
    theme_data_path : str
        Path of the theme version call, appended to ``api_base``.
    theme_channel : str
        Release channel requested from the catalog.
    update_timeout : Optional[float]
        HTTP timeout for the catalog call in seconds. None leaves the
        request without a timeout.
    cache_ttl : int
        Lifetime of the cached catalog in seconds.
    run_timeout : Optional[float]
        Longest a scheduled resolution may run before it is abandoned.
    themes_dir : Optional[str]
        Directory holding the installed themes.
    cache_path : Optional[str]
        SQLite file holding the cached catalog.
    """

    api_base: str = "https://api.boldgrid.com"
    theme_data_path: str = "/api/open/getThemeData"
    theme_channel: str = "stable"
    update_timeout: Optional[float] = 10.0
    cache_ttl: int = 8 * HOUR_IN_SECONDS
    run_timeout: Optional[float] = 60.0
    themes_dir: Optional[str] = None
    cache_path: Optional[str] = None

    @property
    def theme_data_url(self) -> str:
        """Full URL of the theme version call."""
        return self.api_base.rstrip('/') + '/' + self.theme_data_path.lstrip('/')

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def load_config(path: Optional[Path] = None) -> ThemewatchConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.themewatch/config.json.

    Returns
    -------
    ThemewatchConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return ThemewatchConfig(**{
                k: v for k, v in data.items()
                if k in ThemewatchConfig.__dataclass_fields__
            })
        except Exception as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return ThemewatchConfig()


def resolve_cache_path(config: ThemewatchConfig) -> Path:
    """Resolve the cache database path.

    Priority:
    1. ``THEMEWATCH_CACHE_PATH`` environment variable
    2. ``config.cache_path``
    3. ``~/.themewatch/cache.db`` (default)

    Parameters
    ----------
    config : ThemewatchConfig

    Returns
    -------
    Path
        Resolved path to the cache database file.
    """
    env_path = os.environ.get(_CACHE_ENV_VAR)
    if env_path:
        return Path(env_path)
    if config.cache_path:
        return Path(config.cache_path).expanduser()
    return _DEFAULT_CACHE
