"""Shared fixtures for API tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from flight_finder_api.dependencies import get_crawler
from flight_finder_api.main import create_app
from flight_finder_core.schemas import (
    Airport,
    Flight,
    SearchOutcome,
    SearchResult,
)
from flight_finder_crawler.base import BaseCrawler


class FakeCrawler(BaseCrawler):
    """Crawler returning a canned result and recording its calls."""

    def __init__(self, result: SearchResult | None = None) -> None:
        self.result = result or SearchResult(fetched_at=datetime.now(tz=UTC))
        self.calls: list[tuple] = []

    async def search(self, origin, destination, departure_date):
        self.calls.append((origin, destination, departure_date))
        return self.result

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass


def make_flight(airline_code: str = "DL", price: float = 150) -> Flight:
    departure = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    return Flight(
        id=f"{airline_code}123-0",
        airline="Delta Air Lines",
        airline_code=airline_code,
        flight_number=f"{airline_code}123",
        origin=Airport(code="JFK", name="John F Kennedy International", city="John"),
        destination=Airport(code="LAX", name="Los Angeles International", city="Los"),
        departure_time=departure,
        arrival_time=departure + timedelta(hours=3, minutes=30),
        duration=210,
        stops=0,
        price=price,
        seats_available=20,
        aircraft="Boeing 737",
        cabin="Economy",
    )


@pytest.fixture
def crawler():
    return FakeCrawler(
        SearchResult(flights=[make_flight()], fetched_at=datetime.now(tz=UTC))
    )


@pytest.fixture
def no_results_crawler():
    return FakeCrawler(
        SearchResult(
            outcome=SearchOutcome.NO_RESULTS,
            error="No flights found for this route",
            fetched_at=datetime.now(tz=UTC),
        )
    )


@pytest.fixture
def make_client():
    """Build a TestClient whose crawler dependency yields *crawler*."""

    def _make(crawler: BaseCrawler) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_crawler] = lambda: crawler
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, crawler):
    return make_client(crawler)
