"""Airport search router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from flight_finder_core.reference import search_airports as find_airports

from ..config import settings
from ..schemas.airports import AirportSearchResponse

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get("/search", response_model=AirportSearchResponse)
async def search_airports(
    q: Annotated[str, Query(min_length=1, max_length=50)],
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
) -> AirportSearchResponse:
    airports = find_airports(q, limit or settings.airport_search_limit)
    return AirportSearchResponse(query=q, airports=airports, total=len(airports))
