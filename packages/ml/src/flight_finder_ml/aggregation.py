"""Price statistics and chart aggregates over a flight result set."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel

from flight_finder_core.rounding import round_half_up

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flight_finder_core.schemas import Flight

CHART_MAX_AIRLINES = 8

LOW_PRICE_RATIO = 0.85
HIGH_PRICE_RATIO = 1.15


class PriceStats(BaseModel):
    """Descriptive statistics of the prices in a result set."""

    avg: int
    min: int
    max: int
    median: int


class PriceDataPoint(BaseModel):
    """One flight reduced to what the price chart needs."""

    id: str
    airline: str
    price: float
    stops: int


class ChartRow(BaseModel):
    """Per-airline summary row for the comparison chart."""

    airline: str
    full_name: str
    price: int
    stops: int
    count: int


class PriceBand(StrEnum):
    """Where a price sits relative to the average."""

    LOW = "LOW"
    TYPICAL = "TYPICAL"
    HIGH = "HIGH"


def price_stats(flights: Sequence[Flight]) -> PriceStats:
    """Average, extremes and median of the flight prices, rounded half-up.

    All zeros for an empty input.
    """
    if not flights:
        return PriceStats(avg=0, min=0, max=0, median=0)

    prices = sorted(flight.price for flight in flights)
    count = len(prices)
    mid = count // 2
    median = prices[mid] if count % 2 else (prices[mid - 1] + prices[mid]) / 2

    return PriceStats(
        avg=round_half_up(sum(prices) / count),
        min=round_half_up(prices[0]),
        max=round_half_up(prices[-1]),
        median=round_half_up(median),
    )


def to_chart_points(flights: Sequence[Flight]) -> list[PriceDataPoint]:
    return [
        PriceDataPoint(
            id=flight.id,
            airline=flight.airline,
            price=flight.price,
            stops=flight.stops,
        )
        for flight in flights
    ]


def chart_aggregate(
    flights: Sequence[Flight],
    limit: int = CHART_MAX_AIRLINES,
) -> list[ChartRow]:
    """Group flights by airline name and keep the *limit* cheapest groups.

    Each row holds the rounded average price and stop count of its group.
    Groups with equal averages keep the order in which they first appeared.
    """
    groups: dict[str, tuple[list[float], list[int]]] = {}
    for point in to_chart_points(flights):
        prices, stops = groups.setdefault(point.airline, ([], []))
        prices.append(point.price)
        stops.append(point.stops)

    rows = [
        ChartRow(
            airline=_short_label(name),
            full_name=name,
            price=round_half_up(sum(prices) / len(prices)),
            stops=round_half_up(sum(stops) / len(stops)),
            count=len(prices),
        )
        for name, (prices, stops) in groups.items()
    ]
    rows.sort(key=lambda row: row.price)
    return rows[:limit]


def price_band(price: float, average: float) -> PriceBand:
    """Classify a price against the average of its result set."""
    if price <= average * LOW_PRICE_RATIO:
        return PriceBand.LOW
    if price >= average * HIGH_PRICE_RATIO:
        return PriceBand.HIGH
    return PriceBand.TYPICAL


def _short_label(name: str) -> str:
    words = name.split()
    return words[0] if words else name
