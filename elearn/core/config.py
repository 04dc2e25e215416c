from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (unset means the in-memory backend is used)
    database_url: Optional[str] = None

    # App settings
    app_name: str = "E-Learn Marketplace"
    debug: bool = False
    log_level: str = "INFO"

    # In-memory backend
    seed_sample_data: bool = True
    memory_enforce_uniqueness: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
