"""Client-side filtering over a flight result set."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from flight_finder_core.schemas import FilterState, Flight

# Returned for an empty result set so the price slider still has bounds.
EMPTY_PRICE_RANGE = (0, 1000)


class PriceRange(BaseModel):
    """Bounds of the prices in a result set."""

    min: int
    max: int


def _matches_stops(stops: int, buckets: frozenset[int]) -> bool:
    if not buckets:
        return True
    return any(stops >= 2 if bucket == 2 else stops == bucket for bucket in buckets)


def _matches_airline(airline_code: str, airlines: frozenset[str]) -> bool:
    return not airlines or airline_code in airlines


def filter_flights(flights: Sequence[Flight], filters: FilterState) -> list[Flight]:
    """Flights passing the price, stops and airline filters, in input order."""
    return [
        flight
        for flight in flights
        if flight.price <= filters.max_price
        and _matches_stops(flight.stops, filters.stops)
        and _matches_airline(flight.airline_code, filters.airlines)
    ]


def unique_airlines(flights: Sequence[Flight]) -> list[str]:
    """Distinct airline codes, sorted."""
    return sorted({flight.airline_code for flight in flights})


def price_range(flights: Sequence[Flight]) -> PriceRange:
    if not flights:
        low, high = EMPTY_PRICE_RANGE
        return PriceRange(min=low, max=high)
    prices = [flight.price for flight in flights]
    return PriceRange(min=math.floor(min(prices)), max=math.ceil(max(prices)))


def has_active_filters(filters: FilterState, bounds: PriceRange) -> bool:
    """True when any filter currently hides part of the result set."""
    return (
        filters.max_price < bounds.max
        or bool(filters.stops)
        or bool(filters.airlines)
    )


def toggle_stop(filters: FilterState, bucket: int, checked: bool) -> FilterState:
    """Return *filters* with a stop bucket selected or deselected."""
    stops = filters.stops | {bucket} if checked else filters.stops - {bucket}
    return filters.model_validate({**filters.model_dump(), "stops": stops})


def toggle_airline(filters: FilterState, code: str, checked: bool) -> FilterState:
    """Return *filters* with an airline code selected or deselected."""
    airlines = filters.airlines | {code} if checked else filters.airlines - {code}
    return filters.model_validate({**filters.model_dump(), "airlines": airlines})
