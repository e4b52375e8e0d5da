"""API configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    cors_origins: list[str] = ["http://localhost:3000"]
    airport_search_limit: int = 10

    model_config = SettingsConfigDict(
        env_prefix="API_", env_file=".env", extra="ignore"
    )


settings = ApiSettings()
