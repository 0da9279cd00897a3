"""
Configuration management for railpath.

Holds the pydantic configuration models and the manager that persists them.
"""

from .config_manager import (
    ConfigManager, ConfigData, ConfigurationError,
    RoutingConfig, TravelConfig, DataConfig, LoggingConfig
)

__all__ = [
    "ConfigManager",
    "ConfigData",
    "ConfigurationError",
    "RoutingConfig",
    "TravelConfig",
    "DataConfig",
    "LoggingConfig",
]
