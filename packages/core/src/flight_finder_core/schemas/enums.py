"""Enums shared by the flight search packages."""

from enum import StrEnum


class DataSource(StrEnum):
    """Upstream provider that produced a result set."""

    AVIATIONSTACK = "aviationstack"


class CabinClass(StrEnum):
    """Cabin label attached to a flight."""

    ECONOMY = "Economy"
    PREMIUM_ECONOMY = "Premium Economy"
    BUSINESS = "Business"
    FIRST = "First"


class SearchOutcome(StrEnum):
    """Discriminant carried alongside a search response."""

    OK = "ok"
    NO_RESULTS = "no_results"
    ERROR = "error"
