"""
Configuration management for the VIN Check backend.
Uses pydantic-settings for environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_title: str = "VIN Check API"
    api_version: str = "1.0.0"
    debug: bool = False

    # Validation Configuration
    normalize_input: bool = False  # strip + upper-case before validating; off = case-sensitive
    max_batch_size: int = 100


# Global settings instance
settings = Settings()
