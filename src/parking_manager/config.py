"""Configuration models and loading utilities."""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class ReleasePolicy(str, Enum):
    """Which spot is freed when a vehicle exits."""

    FIRST_OF_CATEGORY = "first_of_category"  # lowest occupied spot of the category
    ASSIGNED_SPOT = "assigned_spot"


class LotConfig(BaseModel):
    """Spot inventory and pricing configuration."""

    categories: dict[str, int] = Field(
        default_factory=lambda: {"Car": 30, "Motorcycle": 20}
    )
    hourly_rate: float = Field(default=2.50, ge=0)
    release_policy: ReleasePolicy = ReleasePolicy.FIRST_OF_CATEGORY
    reject_duplicate_plates: bool = False

    @field_validator("categories")
    @classmethod
    def check_categories(cls, v: dict[str, int]) -> dict[str, int]:
        """Require at least one category, each with a positive spot count."""
        if not v:
            raise ValueError("at least one vehicle category is required")
        for name, count in v.items():
            if count <= 0:
                raise ValueError(f"spot count for {name!r} must be positive")
        return v


class StorageConfig(BaseModel):
    """Persistence configuration."""

    data_file: str = "parking_data.txt"

    @field_validator("data_file", mode="before")
    @classmethod
    def resolve_env_var(cls, v: str) -> str:
        """Resolve environment variable references like ${VAR_NAME}."""
        if isinstance(v, str) and v.startswith("${") and v.endswith("}"):
            env_var = v[2:-1]
            return os.environ.get(env_var, "parking_data.txt")
        return v


class MetricsConfig(BaseModel):
    """Prometheus exporter configuration."""

    enabled: bool = False
    port: int = 9108


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Optional[str] = None  # stderr when unset

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    lot: LotConfig = LotConfig()
    storage: StorageConfig = StorageConfig()
    metrics: MetricsConfig = MetricsConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return AppConfig(**(data or {}))


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path("config/config.yaml")
