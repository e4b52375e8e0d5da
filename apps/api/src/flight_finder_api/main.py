"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flight_finder_api.config import settings
from flight_finder_api.routers import airports, flights, health


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    app = FastAPI(
        title="Flight Finder API",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    _prefix = "/api"
    app.include_router(flights.router, prefix=_prefix)
    app.include_router(airports.router, prefix=_prefix)
    app.include_router(health.router, prefix=_prefix)

    return app


app = create_app()
