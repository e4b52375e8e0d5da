"""Airport and flight DTOs exchanged between the provider, API and client."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import Field, field_validator

from .base import WireModel


class Airport(WireModel):
    """A location identified by its IATA code.

    Two airports are equal when their codes match, regardless of how the
    display name or city were spelled by the source.
    """

    code: str = Field(description="IATA airport code")
    name: str = ""
    city: str = ""

    @field_validator("code")
    @classmethod
    def _canonical_code(cls, value: str) -> str:
        return value.strip().upper()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Airport):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


class Flight(WireModel):
    """One direct, already-priced flight segment."""

    # Identification
    id: str = Field(description="Unique within one search result")
    airline: str
    airline_code: str
    flight_number: str

    # Route
    origin: Airport
    destination: Airport

    # Schedule
    departure_time: datetime
    arrival_time: datetime
    duration: int = Field(description="Minutes from departure to arrival")

    # Offer
    stops: int = Field(default=0, ge=0)
    price: float = Field(gt=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    seats_available: int = Field(ge=0)
    aircraft: str | None = None
    cabin: str | None = None
