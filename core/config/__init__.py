"""
Runtime Configuration Module

Provides configuration loading and management.
"""

from .runtime import (
    DEFAULT_CONFIG_PATHS,
    DisplayConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config_template,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATHS",
    "DisplayConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config_template",
    "load_config",
]
