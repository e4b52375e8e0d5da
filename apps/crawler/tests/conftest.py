"""Shared fixtures and helpers for crawler tests."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest


class FixedRandom:
    """Stand-in for :class:`random.Random` that always draws the same values."""

    def __init__(self, variance: float = 1.0, seats: int = 20) -> None:
        self._variance = variance
        self._seats = seats

    def uniform(self, a: float, b: float) -> float:
        return self._variance

    def randint(self, a: int, b: int) -> int:
        return self._seats


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def make_record():
    """Factory fixture for raw AviationStack flight records."""

    def _make(
        *,
        airline: str | None = "Delta Air Lines",
        airline_iata: str | None = "DL",
        flight_iata: str | None = "DL123",
        dep_iata: str | None = "JFK",
        arr_iata: str | None = "LAX",
        dep_airport: str | None = "John F Kennedy International",
        arr_airport: str | None = "Los Angeles International",
        departure: str | None = "2026-03-01T12:00:00+00:00",
        arrival: str | None = "2026-03-01T15:30:00+00:00",
    ) -> dict[str, Any]:
        return {
            "flight_date": "2026-03-01",
            "flight_status": "scheduled",
            "departure": {
                "airport": dep_airport,
                "timezone": "America/New_York",
                "iata": dep_iata,
                "icao": "KJFK",
                "terminal": "4",
                "gate": None,
                "delay": None,
                "scheduled": departure,
                "estimated": departure,
                "actual": None,
            },
            "arrival": {
                "airport": arr_airport,
                "timezone": "America/Los_Angeles",
                "iata": arr_iata,
                "icao": "KLAX",
                "terminal": None,
                "gate": None,
                "delay": None,
                "scheduled": arrival,
                "estimated": arrival,
                "actual": None,
            },
            "airline": {"name": airline, "iata": airline_iata, "icao": "DAL"},
            "flight": {"number": "123", "iata": flight_iata, "icao": "DAL123"},
        }

    return _make


@pytest.fixture
def payload(make_record):
    """A two-record AviationStack response body."""
    return {
        "pagination": {"limit": 100, "offset": 0, "count": 2, "total": 2},
        "data": [
            make_record(),
            make_record(airline="Emirates", airline_iata="EK", flight_iata="EK201"),
        ],
    }


@pytest.fixture
def mock_transport():
    """Build an ``httpx.MockTransport`` answering every request the same way.

    Requests are recorded on ``transport.requests``.
    """

    def _make(
        body: Any = None,
        *,
        status_code: int = 200,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if exc is not None:
                raise exc
            content = text if text is not None else json.dumps(body)
            return httpx.Response(status_code, content=content)

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _make
