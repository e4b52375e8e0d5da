"""FastAPI dependency injection providers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flight_finder_crawler.aviationstack import AviationStackCrawler

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from flight_finder_crawler.base import BaseCrawler


async def get_crawler() -> AsyncGenerator[BaseCrawler]:
    """Yield a provider crawler and close it once the request is done."""
    crawler = AviationStackCrawler()
    try:
        yield crawler
    finally:
        await crawler.close()
