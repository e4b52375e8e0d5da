"""Client configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLIENT_", env_file=".env", extra="ignore"
    )

    # Flight Finder API
    api_base_url: str = "http://localhost:8000"
    flights_path: str = "/api/flights"

    # Timeout (seconds)
    request_timeout: int = 30


settings = ClientSettings()
