"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_timeout_seconds: float = 15.0
    search_cache_ttl_seconds: int = 3600
    search_cache_max_entries: int = 1000
    food_cache_ttl_seconds: int = 3600
    food_cache_max_entries: int = 500
    candidate_cache_max_entries: int = 200
    lookup_concurrency: int = 6
    retry_attempts: int = 1
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
