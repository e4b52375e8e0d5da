"""Decide which results panel the screen should show."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from flight_finder_core.schemas import SearchOutcome

if TYPE_CHECKING:
    from flight_finder_client.orchestrator import SearchOrchestrator


class ResultsView(StrEnum):
    LOADING = "LOADING"
    NO_RESULTS = "NO_RESULTS"
    ERROR = "ERROR"
    NOT_SEARCHED = "NOT_SEARCHED"
    EMPTY = "EMPTY"
    RESULTS = "RESULTS"


def classify_results(orchestrator: SearchOrchestrator) -> ResultsView:
    """Checked in order: loading, error, not searched yet, nothing left, list."""
    if orchestrator.is_loading:
        return ResultsView.LOADING
    if orchestrator.error:
        if orchestrator.error_outcome is SearchOutcome.NO_RESULTS:
            return ResultsView.NO_RESULTS
        return ResultsView.ERROR
    if not orchestrator.has_searched:
        return ResultsView.NOT_SEARCHED
    if not orchestrator.filtered_flights:
        return ResultsView.EMPTY
    return ResultsView.RESULTS
