"""Configuration management for zipcast."""

from zipcast.config.config import (
    DEFAULTS,
    Config,
    ConfigError,
    ConfigManager,
    get_config,
    get_config_manager,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigError",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
