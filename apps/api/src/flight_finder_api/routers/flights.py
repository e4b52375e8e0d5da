"""Flight search router."""

from __future__ import annotations

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from flight_finder_core.schemas import FlightSearchResponse
from flight_finder_crawler.base import BaseCrawler  # noqa: TC001

from ..dependencies import get_crawler
from ..schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["flights"])

_MISSING_PARAMS = "Missing required parameters: origin, destination, date"

CrawlerDep = Annotated[BaseCrawler, Depends(get_crawler)]


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get(
    "",
    response_model=FlightSearchResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def search_flights(
    crawler: CrawlerDep,
    origin: Annotated[str | None, Query()] = None,
    destination: Annotated[str | None, Query()] = None,
    departure: Annotated[str | None, Query(alias="date")] = None,
) -> FlightSearchResponse | JSONResponse:
    """Search one route on one date.

    Provider failures and empty results are reported with status 200 and
    ``error`` / ``outcome`` in the body so clients can show the message.
    """
    if not origin or not destination or not departure:
        return _bad_request(_MISSING_PARAMS)
    try:
        departure_date = date.fromisoformat(departure)
    except ValueError:
        return _bad_request(f"Invalid date '{departure}', expected YYYY-MM-DD")

    result = await crawler.search(
        origin.strip().upper(),
        destination.strip().upper(),
        departure_date,
    )
    if not result.success:
        logger.info(
            "Search %s-%s on %s ended with %s: %s",
            origin,
            destination,
            departure_date,
            result.outcome.value,
            result.error,
        )
    return FlightSearchResponse.from_result(result)
