"""Search result envelopes returned by the provider and the HTTP API."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, Field

from .base import WireModel
from .enums import DataSource, SearchOutcome
from .flight import Flight


class SearchResult(BaseModel):
    """Result of a single provider search."""

    flights: list[Flight] = Field(default_factory=list)
    source: DataSource = DataSource.AVIATIONSTACK
    outcome: SearchOutcome = SearchOutcome.OK
    error: str | None = None
    fetched_at: datetime
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.outcome is SearchOutcome.OK


class FlightSearchResponse(WireModel):
    """Body of the flight search endpoint.

    ``outcome`` is optional on input so that bodies produced by other
    backends, which only carry ``error``, still validate.
    """

    flights: list[Flight] = Field(default_factory=list)
    source: DataSource = DataSource.AVIATIONSTACK
    error: str | None = None
    outcome: SearchOutcome | None = None

    @classmethod
    def from_result(cls, result: SearchResult) -> FlightSearchResponse:
        return cls(
            flights=result.flights,
            source=result.source,
            error=result.error,
            outcome=result.outcome,
        )
