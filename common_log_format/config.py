"""
Application configuration using Pydantic Settings.
Loads from CLF_-prefixed environment variables and .env file.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Common Log Format Parser"
    debug: bool = False
    log_level: str = "INFO"

    # Batch parsing
    skip_invalid_lines: bool = True
    max_batch_lines: int = 10000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
