"""Abstract base class for all crawlers."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from flight_finder_core.schemas import SearchResult


class BaseCrawler(abc.ABC):
    """Base class that all source crawlers must implement."""

    @abc.abstractmethod
    async def search(
        self, origin: str, destination: str, departure_date: date
    ) -> SearchResult:
        """Search one route and return normalized results.

        Implementations never raise for upstream failures; the error is
        reported on the returned result instead.
        """

    @abc.abstractmethod
    async def health_check(self) -> bool:
        """Return True if the source is reachable."""

    @abc.abstractmethod
    async def close(self) -> None:
        """Release any held resources (HTTP clients, etc.)."""
