"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where generation requests go, where exported documents land, and how
the package logs.

Configuration can be overridden via environment variables:
- TRIP_GEN_ENDPOINT_URL=https://planner.example.com/api/generate-itinerary
- TRIP_GEN_TIMEOUT_SECONDS=120
- TRIP_EXPORT_OUTPUT_DIR=/tmp/exports
- TRIP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationConfig(BaseSettings):
    """Itinerary generation service configuration.

    Environment variables prefixed with TRIP_GEN_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_GEN_")

    endpoint_url: str = "http://localhost:3000/api/generate-itinerary"
    # None leaves the request unbounded
    timeout_seconds: Optional[float] = 60.0


class ExportConfig(BaseSettings):
    """Document export configuration.

    Environment variables prefixed with TRIP_EXPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_EXPORT_")

    output_dir: Path = Field(default_factory=lambda: Path.cwd() / "exports")
    filename_suffix: str = "_itinerary.pdf"
    page_size: Literal["A4", "letter"] = "A4"
    title: str = "Travel Itinerary"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with TRIP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.generation.endpoint_url)
        print(config.export.output_dir)

    Environment variables prefixed with TRIP_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_")

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
