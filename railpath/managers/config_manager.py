"""
Configuration management for railpath.

This module handles loading, saving, and validating routing configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class RoutingConfig(BaseModel):
    """Configuration for the route search cost function."""

    prefer_fewer_transfers: bool = True
    # Compare (transfers, distance) as a tuple instead of the weighted sum
    exact_lexicographic: bool = True
    transfer_penalty: float = Field(
        default=100000.0,
        description="Cost of one transfer when transfers are minimised first",
    )
    secondary_penalty: float = Field(
        default=100.0,
        description="Cost of one transfer when distance is minimised first",
    )

    @field_validator('transfer_penalty', 'secondary_penalty')
    @classmethod
    def validate_penalty(cls, v):
        """Validate penalties are not negative."""
        if v < 0:
            raise ValueError('Transfer penalties cannot be negative')
        return v


class TravelConfig(BaseModel):
    """Speeds and time penalties used to estimate journey durations."""

    walk_speed_mps: float = 4.317
    elytra_speed_mps: float = 40.0
    rail_speed_mps: float = 15.0
    transfer_penalty_seconds: float = 15.0
    use_elytra: bool = True

    # Elytra wear
    elytra_max_durability: int = 432
    elytra_drain_per_second: float = 1.0
    unbreaking_multiplier: float = 4.0
    firework_distance_m: float = 50.0

    @field_validator(
        'walk_speed_mps',
        'elytra_speed_mps',
        'rail_speed_mps',
        'elytra_max_durability',
        'unbreaking_multiplier',
        'firework_distance_m',
    )
    @classmethod
    def validate_positive(cls, v):
        """Validate speeds and divisors are positive."""
        if v <= 0:
            raise ValueError('Value must be positive')
        return v

    @field_validator('transfer_penalty_seconds', 'elytra_drain_per_second')
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError('Value cannot be negative')
        return v


class DataConfig(BaseModel):
    """Where to find the railway station listing."""

    data_directory: Optional[str] = None  # None resolves via utils.data_path_resolver
    world_id: str = "zth"

    @field_validator('world_id')
    @classmethod
    def validate_world_id(cls, v):
        """Validate world id is not empty."""
        if not v.strip():
            raise ValueError('World id cannot be empty')
        return v.strip()


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f'Unknown log level: {v}')
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    routing: RoutingConfig = RoutingConfig()
    travel: TravelConfig = TravelConfig()
    data: DataConfig = DataConfig()
    logging: LoggingConfig = LoggingConfig()


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform's per-user configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses %APPDATA%/railpath/config.json
        Elsewhere, uses $XDG_CONFIG_HOME/railpath/config.json or ~/.config/railpath/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "railpath" / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / "railpath"
        else:
            config_dir = Path.home() / ".config" / "railpath"
        return config_dir / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}") from e
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}") from e
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}") from e

        logger.debug(f"Successfully loaded config from: {self.config_path}")
        return self.config

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

        self.config = config
        logger.info(f"Successfully saved config to: {self.config_path}")
        return True

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        if not self.save_config(ConfigData()):
            raise ConfigurationError(f"Could not create default config at {self.config_path}")

    def update_routing(self, **changes) -> ConfigData:
        """
        Update routing settings and persist them.

        Raises:
            ConfigurationError: If the new values fail validation or cannot be saved
        """
        config = self.config or self.load_config()
        try:
            routing = RoutingConfig(**{**config.routing.model_dump(), **changes})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid routing settings: {e}") from e

        updated = config.model_copy(update={"routing": routing})
        if not self.save_config(updated):
            raise ConfigurationError(f"Could not save routing settings to {self.config_path}")
        return updated
