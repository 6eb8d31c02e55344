"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for file locations and
logging settings.

Configuration can be overridden via environment variables:
- AIR_GRAPH_DATA_DIR=/path/to/data
- AIR_GRAPH_ROUTES_FILE=routes_2024.csv
- AIR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with AIR_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="AIR_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    airports_file: str = "airports.csv"
    routes_file: str = "routes.csv"

    @property
    def airports_path(self) -> Path:
        """Full path to airports CSV file."""
        return self.data_dir / self.airports_file

    @property
    def routes_path(self) -> Path:
        """Full path to routes CSV file."""
        return self.data_dir / self.routes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with AIR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="AIR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_path)
        print(config.observability.level)

    Environment variables prefixed with AIR_.
    """

    model_config = SettingsConfigDict(env_prefix="AIR_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Args:
        config: Logging settings, defaults to the global configuration.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown logging level: {config.level}",
            setting_name="AIR_LOG_LEVEL",
        )
    logging.basicConfig(level=level, format=config.format, force=True)
