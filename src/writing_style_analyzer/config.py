"""Configuration management for Writing Style Analyzer."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from writing_style_analyzer.logging_conf import LOG_LEVELS


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WSA_",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    # Sample files
    sample_encoding: str = Field(default="utf-8", description="Preferred encoding for sample files")

    # Output
    json_indent: int = Field(default=2, description="Indentation of saved JSON reports")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
