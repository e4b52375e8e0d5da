"""Airport schemas."""

from __future__ import annotations

from pydantic import BaseModel

from flight_finder_core.schemas import Airport


class AirportSearchResponse(BaseModel):
    """Response for airport search."""

    query: str
    airports: list[Airport]
    total: int
