"""
Robotable Configuration Module

Handles all configuration settings for a simulation session.
Supports environment variables, .env files, and programmatic configuration.

Configuration can be set via:
1. Environment variables (ROBOTABLE_WIDTH, ROBOTABLE_MULTIPLE, etc.)
2. .env file in the project root
3. Programmatic configuration via create_config()
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class TableConfig:
    """Dimensions of the table. Fixed for the lifetime of a table."""

    width: int = field(
        default_factory=lambda: int(os.getenv("ROBOTABLE_WIDTH", "5"))
    )

    height: int = field(
        default_factory=lambda: int(os.getenv("ROBOTABLE_HEIGHT", "5"))
    )

    def validate(self) -> None:
        """
        Validate dimensions.

        Raises:
            ValueError: If width or height is not positive
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Table dimensions must be positive, got {self.width}x{self.height}. "
                "Set ROBOTABLE_WIDTH / ROBOTABLE_HEIGHT or pass width/height."
            )


@dataclass
class SessionConfig:
    """
    Main configuration for a simulation session.

    Example usage:
        # From environment variables
        config = SessionConfig()

        # Programmatic configuration
        config = create_config(width=8, height=8, multiple=True)
    """

    table: TableConfig = field(default_factory=TableConfig)

    # Multiple mode: PLACE adds robots instead of relocating the active one
    multiple: bool = field(
        default_factory=lambda: _env_bool("ROBOTABLE_MULTIPLE", "false")
    )

    # Whether outcome messages are collected into the session log
    logging_enabled: bool = field(
        default_factory=lambda: _env_bool("ROBOTABLE_LOGGING", "true")
    )

    # Logging settings
    log_level: str = field(
        default_factory=lambda: os.getenv("ROBOTABLE_LOG_LEVEL", "INFO")
    )
    log_file: Optional[str] = field(
        default_factory=lambda: os.getenv("ROBOTABLE_LOG_FILE")
    )

    def validate(self) -> None:
        """Validate all configuration sections."""
        self.table.validate()

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SessionConfig":
        """
        Create configuration from a dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            SessionConfig instance
        """
        table_cfg = config_dict.get("table", {})

        return cls(
            table=TableConfig(
                width=table_cfg.get("width", int(os.getenv("ROBOTABLE_WIDTH", "5"))),
                height=table_cfg.get("height", int(os.getenv("ROBOTABLE_HEIGHT", "5"))),
            ),
            multiple=config_dict.get("multiple", False),
            logging_enabled=config_dict.get("logging_enabled", True),
            log_level=config_dict.get("log_level", "INFO"),
            log_file=config_dict.get("log_file"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration to dictionary."""
        return {
            "table": {
                "width": self.table.width,
                "height": self.table.height,
            },
            "multiple": self.multiple,
            "logging_enabled": self.logging_enabled,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


def get_default_config() -> SessionConfig:
    """Get the default session configuration from environment."""
    return SessionConfig.from_env()


def create_config(
    width: Optional[int] = None,
    height: Optional[int] = None,
    multiple: Optional[bool] = None,
    **kwargs
) -> SessionConfig:
    """
    Convenience function to create a configuration.

    Args:
        width: Table width
        height: Table height
        multiple: Start in multiple-robot mode
        **kwargs: Additional configuration options
            (logging_enabled, log_level, log_file)

    Returns:
        Configured SessionConfig

    Example:
        config = create_config(width=10, height=10, multiple=True)
    """
    config = SessionConfig()

    if width is not None:
        config.table.width = width
    if height is not None:
        config.table.height = height
    if multiple is not None:
        config.multiple = multiple

    # Handle additional kwargs
    if "logging_enabled" in kwargs:
        config.logging_enabled = kwargs["logging_enabled"]
    if "log_level" in kwargs:
        config.log_level = kwargs["log_level"]
    if "log_file" in kwargs:
        config.log_file = kwargs["log_file"]

    config.validate()
    return config
