"""Shared fixtures for the analytics tests."""

from __future__ import annotations

import itertools
from datetime import UTC, datetime, timedelta

import pytest

from flight_finder_core.schemas import Airport, Flight

JFK = Airport(code="JFK", name="John F Kennedy International", city="John")
LAX = Airport(code="LAX", name="Los Angeles International", city="Los")


class FixedRandom:
    """Stand-in for :class:`random.Random` that always draws the same values."""

    def __init__(self, variance: float = 1.0, seats: int | None = None) -> None:
        self._variance = variance
        self._seats = seats

    def uniform(self, a: float, b: float) -> float:
        return self._variance

    def randint(self, a: int, b: int) -> int:
        return a if self._seats is None else self._seats


@pytest.fixture
def fixed_random():
    return FixedRandom


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
        departure = datetime(2026, 3, 1, 12, 0, tzinfo=UTC) + timedelta(hours=n)
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
