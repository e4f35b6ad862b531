"""Configuration management for numsort."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from numsort.core.constants import DEFAULT_DELIMITER


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NUMSORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output Configuration
    output_dir: Path = Field(
        default=Path("."),
        description="Directory the output file is written to",
    )
    xml_pretty_print: bool = Field(
        default=True,
        description="Indent Number elements in XML output",
    )

    # Input Configuration
    delimiter: str = Field(
        default=DEFAULT_DELIMITER,
        min_length=1,
        max_length=1,
        description="Separator between integers in the number list",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the numsort logger",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit structured JSON log records",
    )

    @field_validator("delimiter")
    @classmethod
    def _delimiter_not_numeric(cls, value: str) -> str:
        if value.isdigit() or value in "+-":
            raise ValueError("delimiter cannot be a digit or a sign")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
