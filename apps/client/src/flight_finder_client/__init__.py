"""Flight Finder client - search state machine and display helpers."""

from flight_finder_client.fetcher import FetchResponse, FlightFetcher, HttpFlightFetcher
from flight_finder_client.orchestrator import SearchOrchestrator, SearchStatus
from flight_finder_client.results import ResultsView, classify_results

__all__ = [
    "FetchResponse",
    "FlightFetcher",
    "HttpFlightFetcher",
    "ResultsView",
    "SearchOrchestrator",
    "SearchStatus",
    "classify_results",
]
