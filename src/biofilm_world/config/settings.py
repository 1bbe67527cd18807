"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the world.

Usage:
    from biofilm_world.config import WorldSettings

    # Load from environment variables (BIOFILM_WORLD_*)
    settings = WorldSettings()

    # Or override with explicit values
    settings = WorldSettings(log_level="DEBUG")
"""

from __future__ import annotations

import math

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install biofilm-world"
    ) from e


class WorldSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for world construction.

    Attributes:
        bulk_section: Tag of the child sections describing bulks.
        domain_section: Tag of the child sections describing computation domains.
        log_level: Minimum level handed to the loguru handler.
        default_time_constraint: Bound reported by a bulk with no changing solute.

    Environment Variables:
        BIOFILM_WORLD_BULK_SECTION
        BIOFILM_WORLD_DOMAIN_SECTION
        BIOFILM_WORLD_LOG_LEVEL
        BIOFILM_WORLD_DEFAULT_TIME_CONSTRAINT
    """

    model_config = SettingsConfigDict(
        env_prefix="BIOFILM_WORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bulk_section: str = "bulk"
    domain_section: str = "computationDomain"
    log_level: str = "INFO"
    default_time_constraint: float = math.inf
