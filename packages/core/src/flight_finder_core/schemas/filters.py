"""User-selected constraints that narrow a flight collection."""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import WireModel

# Bucket 2 stands for "2 or more" stops.
STOP_BUCKETS: frozenset[int] = frozenset({0, 1, 2})

DEFAULT_MAX_PRICE = 10000


class FilterState(WireModel):
    """Price ceiling plus stop and airline selections.

    An empty ``stops`` or ``airlines`` set places no restriction on that
    dimension.
    """

    max_price: float = DEFAULT_MAX_PRICE
    stops: frozenset[int] = Field(default_factory=frozenset)
    airlines: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("stops")
    @classmethod
    def _known_buckets(cls, value: frozenset[int]) -> frozenset[int]:
        unknown = value - STOP_BUCKETS
        if unknown:
            msg = f"Unknown stop bucket(s): {sorted(unknown)}"
            raise ValueError(msg)
        return value
