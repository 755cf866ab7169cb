"""
Configuration settings for the georef engine.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings with environment variable support.

    Attributes:
        catalog_path: Optional JSON file overriding the built-in CRS catalog
        origin_threshold: Points with |x| and |y| at or below this value are
            ignored by CRS detection (drawing units)
        log_level: Default log level used by ``setup_logging``
        json_logs: Whether file logs are written as JSON
        environment: Deployment environment
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOREF_",
        extra="ignore",
    )

    # Catalog
    catalog_path: Optional[Path] = None

    # Detection
    origin_threshold: float = 1000.0

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @field_validator("origin_threshold")
    @classmethod
    def validate_origin_threshold(cls, v: float) -> float:
        """Reject negative detection thresholds."""
        if v < 0:
            raise ValueError(f"origin_threshold must be non-negative, got {v}")
        return v


# Global settings instance
settings = Settings()
