"""Search state machine behind the flight search screen.

A search moves ``IDLE -> SEARCHING -> SUCCESS | FAILURE``; a new search
restarts at ``SEARCHING`` from any state. Every failure, including
exceptions from the fetch collaborator, ends up as ``FAILURE`` with a
message; :meth:`SearchOrchestrator.search` never raises.

Overlapping searches are resolved by generation: each search (and
:meth:`SearchOrchestrator.clear_search`) takes a new token, and a
response that arrives for an older token is dropped.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from flight_finder_core.errors import classify_error
from flight_finder_core.schemas import (
    DataSource,
    FilterState,
    FlightSearchResponse,
    SearchOutcome,
)
from flight_finder_ml import (
    chart_aggregate,
    filter_flights,
    price_range,
    price_stats,
    toggle_airline,
    toggle_stop,
    unique_airlines,
)

if TYPE_CHECKING:
    from flight_finder_client.fetcher import FetchResponse, FlightFetcher
    from flight_finder_core.schemas import Flight, SearchParams
    from flight_finder_ml import ChartRow, PriceRange, PriceStats

logger = logging.getLogger(__name__)

_UNEXPECTED_ERROR = "An unexpected error occurred"


class SearchStatus(StrEnum):
    """Lifecycle state of the current search."""

    IDLE = "IDLE"
    SEARCHING = "SEARCHING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


def _parse_outcome(value: Any) -> SearchOutcome | None:
    try:
        return SearchOutcome(value)
    except ValueError:
        return None


class SearchOrchestrator:
    """Owns the current result set, its filters and the search status."""

    def __init__(self, fetcher: FlightFetcher) -> None:
        self._fetcher = fetcher
        self._generation = 0
        self._status = SearchStatus.IDLE
        self._flights: list[Flight] = []
        self._error: str | None = None
        self._error_outcome: SearchOutcome | None = None
        self._has_searched = False
        self._search_params: SearchParams | None = None
        self._data_source: DataSource | None = None
        self._filters = FilterState()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status is SearchStatus.SEARCHING

    @property
    def flights(self) -> list[Flight]:
        return list(self._flights)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def error_outcome(self) -> SearchOutcome | None:
        """``NO_RESULTS`` or ``ERROR`` while in ``FAILURE``, else None."""
        return self._error_outcome

    @property
    def has_searched(self) -> bool:
        return self._has_searched

    @property
    def search_params(self) -> SearchParams | None:
        return self._search_params

    @property
    def data_source(self) -> DataSource | None:
        return self._data_source

    @property
    def filters(self) -> FilterState:
        return self._filters

    # Derived views of the result set

    @property
    def filtered_flights(self) -> list[Flight]:
        return filter_flights(self._flights, self._filters)

    @property
    def available_airlines(self) -> list[str]:
        return unique_airlines(self._flights)

    @property
    def price_range(self) -> PriceRange:
        return price_range(self._flights)

    @property
    def price_stats(self) -> PriceStats:
        return price_stats(self.filtered_flights)

    @property
    def chart_data(self) -> list[ChartRow]:
        return chart_aggregate(self.filtered_flights)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def search(self, params: SearchParams) -> None:
        """Run one search and settle in ``SUCCESS`` or ``FAILURE``."""
        self._generation += 1
        token = self._generation

        self._status = SearchStatus.SEARCHING
        self._search_params = params
        self._error = None
        self._error_outcome = None
        self._data_source = None
        self._has_searched = True

        try:
            response = await self._fetcher.fetch(params)
        except Exception as exc:
            if self._is_stale(token):
                return
            logger.exception("Flight search request failed")
            self._fail(str(exc) or _UNEXPECTED_ERROR, SearchOutcome.ERROR)
            return

        if self._is_stale(token):
            return

        try:
            self._resolve(response)
        except Exception as exc:
            logger.exception("Flight search response could not be read")
            self._fail(str(exc) or _UNEXPECTED_ERROR, SearchOutcome.ERROR)

    def update_filters(self, **changes: Any) -> None:
        """Apply a partial filter update, e.g. ``update_filters(max_price=300)``."""
        unknown = set(changes) - set(FilterState.model_fields)
        if unknown:
            msg = f"Unknown filter field(s): {', '.join(sorted(unknown))}"
            raise TypeError(msg)
        self._filters = FilterState.model_validate(
            {**self._filters.model_dump(), **changes}
        )

    def toggle_stop(self, bucket: int, checked: bool) -> None:
        self._filters = toggle_stop(self._filters, bucket, checked)

    def toggle_airline(self, code: str, checked: bool) -> None:
        self._filters = toggle_airline(self._filters, code, checked)

    def reset_filters(self) -> None:
        """Back to default filters with the ceiling at the highest price."""
        self._filters = FilterState(max_price=self.price_range.max)

    def clear_search(self) -> None:
        """Forget the current search; any response still in flight is dropped."""
        self._generation += 1
        self._status = SearchStatus.IDLE
        self._flights = []
        self._has_searched = False
        self._search_params = None
        self._filters = FilterState()
        self._error = None
        self._error_outcome = None
        self._data_source = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_stale(self, token: int) -> bool:
        if token == self._generation:
            return False
        logger.info(
            "Dropping response for search #%d; search #%d is current",
            token,
            self._generation,
        )
        return True

    def _resolve(self, response: FetchResponse) -> None:
        body = response.body if isinstance(response.body, dict) else {}

        # A body-level error is more specific than the status code.
        error = body.get("error")
        if error:
            message = str(error)
            outcome = classify_error(message, _parse_outcome(body.get("outcome")))
            self._fail(message, outcome)
            return

        if not response.is_success:
            self._fail(f"Search failed: {response.status_code}", SearchOutcome.ERROR)
            return

        parsed = FlightSearchResponse.model_validate(response.body)
        self._flights = list(parsed.flights)
        self._data_source = parsed.source
        self._status = SearchStatus.SUCCESS
        self._filters = FilterState(max_price=price_range(self._flights).max)
        logger.info("Search returned %d flights", len(self._flights))

    def _fail(self, message: str, outcome: SearchOutcome) -> None:
        self._status = SearchStatus.FAILURE
        self._flights = []
        self._error = message
        self._error_outcome = outcome
