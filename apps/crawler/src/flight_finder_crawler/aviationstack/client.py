"""HTTP client for the AviationStack real-time flights API."""

from __future__ import annotations

import logging

import httpx

from flight_finder_core.errors import (
    ConfigurationError,
    TransportError,
    UpstreamProtocolError,
)
from flight_finder_crawler.config import settings

logger = logging.getLogger(__name__)

_INVALID_RESPONSE = "API returned invalid response"


class AviationStackClient:
    """Thin async wrapper around the AviationStack ``/flights`` endpoint.

    Failures are raised as :class:`~flight_finder_core.errors.FlightSearchError`
    subclasses. No retries are made: the free plan is quota-limited.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
        limit: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = settings.aviationstack_api_key if api_key is None else api_key
        self._limit = limit or settings.result_limit
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.aviationstack_base_url,
            timeout=httpx.Timeout(timeout or settings.request_timeout),
            transport=transport,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key)

    async def fetch_flights(self, origin: str, destination: str) -> dict:
        """Call ``GET /flights`` for a departure/arrival pair.

        Returns the decoded JSON body. A body-level ``error`` object is
        reported before the HTTP status is looked at.
        """
        if not self._api_key:
            raise ConfigurationError

        params = {
            "access_key": self._api_key,
            "dep_iata": origin,
            "arr_iata": destination,
            "limit": self._limit,
        }
        try:
            resp = await self._client.get("/flights", params=params)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or None) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error(
                "AviationStack returned non-JSON response: %s", resp.text[:200]
            )
            raise UpstreamProtocolError(_INVALID_RESPONSE) from exc

        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            logger.error("AviationStack API error: %s", error)
            message = error.get("message") if isinstance(error, dict) else error
            raise UpstreamProtocolError(str(message) if message else None)

        if not resp.is_success:
            msg = f"API request failed: {resp.status_code}"
            raise TransportError(msg)

        if not isinstance(data, dict):
            raise UpstreamProtocolError(_INVALID_RESPONSE)

        logger.debug(
            "AviationStack returned %d records for %s-%s",
            len(data.get("data") or []),
            origin,
            destination,
        )
        return data

    async def close(self) -> None:
        """Shut down the underlying HTTPX client."""
        await self._client.aclose()
