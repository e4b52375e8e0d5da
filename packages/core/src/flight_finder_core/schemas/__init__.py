"""Core schemas for Flight Finder."""

from .enums import CabinClass, DataSource, SearchOutcome
from .filters import DEFAULT_MAX_PRICE, STOP_BUCKETS, FilterState
from .flight import Airport, Flight
from .results import FlightSearchResponse, SearchResult
from .search import (
    AirportSelection,
    FreeTextCode,
    SearchParams,
    SelectedAirport,
    build_search_params,
    to_airport,
)

__all__ = [
    "DEFAULT_MAX_PRICE",
    "STOP_BUCKETS",
    "Airport",
    "AirportSelection",
    "CabinClass",
    "DataSource",
    "FilterState",
    "Flight",
    "FlightSearchResponse",
    "FreeTextCode",
    "SearchOutcome",
    "SearchParams",
    "SearchResult",
    "SelectedAirport",
    "build_search_params",
    "to_airport",
]
