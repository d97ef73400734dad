"""MyWineCellar configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/mywinecellar/config.toml (user config)
4. /etc/mywinecellar/config.toml (system config)
"""

from mywinecellar.config.schema import (
    CellarConfig,
    DatabaseConfig,
    ServerConfig,
    StorageConfig,
    TaxonomyConfig,
)
from mywinecellar.config.settings import get_settings, reset_settings, settings

__all__ = [
    "CellarConfig",
    "DatabaseConfig",
    "ServerConfig",
    "StorageConfig",
    "TaxonomyConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
