"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error payload."""

    error: str


class HealthResponse(BaseModel):
    """Service status."""

    status: str = "ok"
    provider_configured: bool
