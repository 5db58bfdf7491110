"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Built-in loguru levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Command-line defaults loaded from GPXGEO_* environment variables.

    The parsing and export functions never read these; they take explicit
    arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="GPXGEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Parsing
    strict_coordinates: bool = False  # raise on bad lat/lon instead of NaN

    # Output
    geojson_indent: Optional[int] = 2

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


settings = Settings()
