"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_tracker.domain.pages import DEFAULT_PAGE_SIZE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    default_page_size: int = DEFAULT_PAGE_SIZE

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
