"""AviationStack real-time flights provider."""

from .client import AviationStackClient
from .crawler import AviationStackCrawler
from .response_parser import parse_aviationstack_response, transform_flight

__all__ = [
    "AviationStackClient",
    "AviationStackCrawler",
    "parse_aviationstack_response",
    "transform_flight",
]
