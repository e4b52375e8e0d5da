"""Shared fixtures for client tests."""

from __future__ import annotations

import itertools
from datetime import UTC, date, datetime, timedelta
from typing import Any

import pytest

from flight_finder_client.fetcher import FetchResponse
from flight_finder_core.schemas import Airport, Flight, SearchParams

JFK = Airport(code="JFK", name="John F. Kennedy International", city="New York")
LAX = Airport(code="LAX", name="Los Angeles International", city="Los Angeles")


class ScriptedFetcher:
    """Fetcher that answers each call with the next scripted item.

    An item is a :class:`FetchResponse`, an exception to raise, or an
    async callable whose return value is the response.
    """

    def __init__(self, *items: Any) -> None:
        self._items = list(items)
        self.calls: list[SearchParams] = []

    async def fetch(self, params: SearchParams) -> FetchResponse:
        self.calls.append(params)
        item = self._items.pop(0)
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return await item()
        return item


@pytest.fixture
def make_fetcher():
    return ScriptedFetcher


@pytest.fixture
def params() -> SearchParams:
    return SearchParams(origin=JFK, destination=LAX, departure_date=date(2026, 3, 1))


@pytest.fixture
def make_flight():
    """Factory fixture for Flight instances with sensible defaults."""
    counter = itertools.count()

    def _make(
        price: float = 200.0,
        *,
        stops: int = 0,
        airline: str = "Delta Air Lines",
        airline_code: str = "DL",
    ) -> Flight:
        n = next(counter)
        departure = datetime(2026, 3, 1, 8, 0, tzinfo=UTC) + timedelta(hours=n)
        return Flight(
            id=f"{airline_code}{100 + n}-{n}",
            airline=airline,
            airline_code=airline_code,
            flight_number=f"{airline_code}{100 + n}",
            origin=JFK,
            destination=LAX,
            departure_time=departure,
            arrival_time=departure + timedelta(hours=6),
            duration=360,
            stops=stops,
            price=price,
            seats_available=10,
        )

    return _make


@pytest.fixture
def ok_response():
    """Build a 200 response carrying *flights* in wire format."""

    def _make(flights: list[Flight]) -> FetchResponse:
        return FetchResponse(
            status_code=200,
            body={
                "flights": [f.to_wire() for f in flights],
                "source": "aviationstack",
                "outcome": "ok",
            },
        )

    return _make
