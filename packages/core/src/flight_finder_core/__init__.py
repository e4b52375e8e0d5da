"""Flight Finder core - shared domain model, errors and reference data."""

from flight_finder_core.errors import (
    ConfigurationError,
    FlightSearchError,
    NoFlightsFound,
    TransportError,
    UpstreamProtocolError,
    classify_error,
)
from flight_finder_core.rounding import round_half_up

__all__ = [
    "ConfigurationError",
    "FlightSearchError",
    "NoFlightsFound",
    "TransportError",
    "UpstreamProtocolError",
    "classify_error",
    "round_half_up",
]
