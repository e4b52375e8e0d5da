"""Network collaborator that runs a search against the Flight Finder API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx
from pydantic import BaseModel

from flight_finder_client.config import settings

if TYPE_CHECKING:
    from flight_finder_core.schemas import SearchParams

logger = logging.getLogger(__name__)


class FetchResponse(BaseModel):
    """HTTP status plus the decoded JSON body."""

    status_code: int
    body: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class FlightFetcher(Protocol):
    """Anything that can turn search parameters into a response."""

    async def fetch(self, params: SearchParams) -> FetchResponse: ...


class HttpFlightFetcher:
    """Calls ``GET /api/flights`` with ``origin``, ``destination`` and ``date``.

    Any status code is returned to the caller; only transport failures
    raise. A body that is not JSON comes back as ``None``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=httpx.Timeout(timeout or settings.request_timeout),
            transport=transport,
        )

    async def fetch(self, params: SearchParams) -> FetchResponse:
        query = {
            "origin": params.origin.code,
            "destination": params.destination.code,
            "date": params.departure_date.isoformat(),
        }
        resp = await self._client.get(settings.flights_path, params=query)
        logger.debug("Flight search %s returned %d", query, resp.status_code)
        try:
            body = resp.json()
        except ValueError:
            logger.warning(
                "Flight search returned non-JSON body (%d): %s",
                resp.status_code,
                resp.text[:200],
            )
            body = None
        return FetchResponse(status_code=resp.status_code, body=body)

    async def close(self) -> None:
        """Shut down the underlying HTTPX client."""
        await self._client.aclose()
