"""Crawler configuration via environment variables."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CrawlerSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CRAWLER_", env_file=".env", extra="ignore"
    )

    # AviationStack API (the bare variable name is accepted as well)
    aviationstack_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "CRAWLER_AVIATIONSTACK_API_KEY", "AVIATIONSTACK_API_KEY"
        ),
    )
    aviationstack_base_url: str = "https://api.aviationstack.com/v1"

    # Timeout (seconds)
    request_timeout: int = 30

    # Records requested per search
    result_limit: int = 100

    # Currency
    default_currency: str = "USD"


settings = CrawlerSettings()
