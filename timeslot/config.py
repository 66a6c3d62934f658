"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from .domain.exceptions import UnsupportedGranularityError
from .domain.rounding import Granularity

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "timeslot.yaml"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseModel):
    """Application configuration."""
    default_granularity: Granularity = Granularity.FIFTEEN_MINUTES
    datetime_format: str = "YYYY-MM-DD HH:mm"  # pendulum format tokens
    log_level: str = "WARNING"

    @field_validator("default_granularity", mode="before")
    @classmethod
    def validate_granularity(cls, value):
        """Accept granularity names such as 'fifteen-minutes'."""
        if isinstance(value, str):
            try:
                return Granularity.parse(value)
            except UnsupportedGranularityError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @field_validator("datetime_format")
    @classmethod
    def validate_datetime_format(cls, value: str) -> str:
        """Ensure the display format is not blank."""
        if not value.strip():
            raise ValueError("datetime_format must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the level name and ensure logging knows it."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value}")
        return level

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML config file
            
        Returns:
            AppConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)

    @classmethod
    def load_or_default(cls, config_path: Path | None = None) -> "AppConfig":
        """
        Load configuration if a file exists, otherwise return the defaults.

        An explicitly given path must exist.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if not default_path.exists():
            logger.info("No %s found, using default configuration", CONFIG_FILE_NAME)
            return cls()

        return cls.load_from_yaml(default_path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for the config file in the current directory
    current_dir = Path.cwd()
    config_path = current_dir / CONFIG_FILE_NAME
    
    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME
    
    return config_path
