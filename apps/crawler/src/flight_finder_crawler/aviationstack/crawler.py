"""AviationStack crawler implementation."""

from __future__ import annotations

import logging
import time
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from flight_finder_core.errors import FlightSearchError, NoFlightsFound, TransportError
from flight_finder_core.schemas import DataSource, SearchOutcome, SearchResult
from flight_finder_crawler.base import BaseCrawler
from flight_finder_ml.pricing import PriceEstimator

from .client import AviationStackClient
from .response_parser import parse_aviationstack_response

if TYPE_CHECKING:
    import random

logger = logging.getLogger(__name__)

# Route used by the health check; any valid pair works.
_HEALTH_ROUTE = ("JFK", "LAX")


class AviationStackCrawler(BaseCrawler):
    """Fetches flight-status records and turns them into priced flights."""

    def __init__(
        self,
        *,
        client: AviationStackClient | None = None,
        api_key: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client or AviationStackClient(api_key=api_key)
        self._estimator = PriceEstimator(rng)

    # ------------------------------------------------------------------
    # BaseCrawler interface
    # ------------------------------------------------------------------

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date | None = None,
    ) -> SearchResult:
        """Search AviationStack and return normalized results.

        *departure_date* is accepted for interface parity only: the
        real-time endpoint cannot be queried by date.
        """
        start = time.monotonic()
        try:
            raw = await self._client.fetch_flights(origin, destination)
            if not raw.get("data"):
                raise NoFlightsFound
            flights = parse_aviationstack_response(raw, estimator=self._estimator)
        except FlightSearchError as exc:
            if exc.outcome is SearchOutcome.NO_RESULTS:
                logger.info("No AviationStack flights for %s-%s", origin, destination)
            else:
                logger.error("AviationStack search failed: %s", exc.message)
            return self._result(start, outcome=exc.outcome, error=exc.message)
        except Exception as exc:
            logger.exception("AviationStack search failed: %s", exc)
            error = TransportError(str(exc) or None)
            return self._result(start, outcome=error.outcome, error=error.message)

        return self._result(start, flights=flights)

    async def health_check(self) -> bool:
        """Return *True* if the API key is configured and the API is reachable."""
        if not self._client.has_credentials:
            return False
        try:
            await self._client.fetch_flights(*_HEALTH_ROUTE)
        except FlightSearchError:
            return False
        return True

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        await self._client.close()

    @staticmethod
    def _result(start: float, **fields: object) -> SearchResult:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        return SearchResult(
            source=DataSource.AVIATIONSTACK,
            fetched_at=datetime.now(tz=UTC),
            duration_ms=elapsed_ms,
            **fields,
        )
