"""Configuration management for tabstat.

Uses pydantic-settings for type-safe environment variable loading. Every
setting can be overridden with a ``TABSTAT_`` prefixed variable, for example
``TABSTAT_DEFAULT_ALPHA=0.01``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TABSTAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output locations
    result_dir: Path = Field(
        default=Path("result"),
        description="Directory for charts, subsets and samples",
    )
    sample_dir: Path = Field(
        default=Path("sample"),
        description="Directory for generated demo data",
    )

    # Analysis defaults
    default_alpha: float = Field(
        default=0.05,
        gt=0.0,
        lt=1.0,
        description="Significance level offered by the t-test prompts",
    )
    histogram_bins: int = Field(
        default=20,
        ge=1,
        description="Number of histogram bins",
    )
    frequency_bins: int = Field(
        default=10,
        ge=1,
        description="Number of bins for numeric frequency tables",
    )
    frequency_display_limit: int = Field(
        default=10,
        ge=1,
        description="Most frequent values listed in frequency reports",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
