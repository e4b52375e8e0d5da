"""Error taxonomy for flight searches.

Errors are raised close to the upstream call and converted into result
objects at the crawler and orchestrator boundaries; callers of those
boundaries never see them as exceptions.
"""

from __future__ import annotations

from flight_finder_core.schemas.enums import SearchOutcome

# Phrases that mark a message as an empty result rather than a failure when
# the response carries no explicit outcome.
_NO_RESULTS_PHRASES = ("no flights found", "no results")


class FlightSearchError(Exception):
    """Base class for every search failure."""

    default_message = "An unexpected error occurred"
    outcome = SearchOutcome.ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(FlightSearchError):
    """A required credential is missing. Never retried."""

    default_message = "API key not configured"


class UpstreamProtocolError(FlightSearchError):
    """The upstream sent a non-JSON body or a body-level error object."""

    default_message = "API error occurred"


class TransportError(FlightSearchError):
    """The request itself failed or returned a non-success status."""

    default_message = "Failed to fetch flights"


class NoFlightsFound(FlightSearchError):
    """A valid query that matched nothing. Not a failure."""

    default_message = "No flights found for this route"
    outcome = SearchOutcome.NO_RESULTS


def classify_error(
    message: str | None,
    outcome: SearchOutcome | None = None,
) -> SearchOutcome:
    """Decide whether an error message means "no results" or a real error.

    An explicit *outcome* always wins. Without one, the message text is
    matched against the phrases used for empty results.
    """
    if outcome is not None:
        return outcome
    if not message:
        return SearchOutcome.OK
    lowered = message.lower()
    if any(phrase in lowered for phrase in _NO_RESULTS_PHRASES):
        return SearchOutcome.NO_RESULTS
    return SearchOutcome.ERROR
