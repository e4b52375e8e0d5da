"""Health router."""

from __future__ import annotations

from fastapi import APIRouter

from flight_finder_crawler.config import settings as crawler_settings

from ..schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report whether the provider credential is configured."""
    return HealthResponse(
        provider_configured=bool(crawler_settings.aviationstack_api_key),
    )
