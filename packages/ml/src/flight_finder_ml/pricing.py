"""Heuristic fare estimation for sources that publish no prices."""

from __future__ import annotations

import random
from datetime import datetime

from flight_finder_core.rounding import round_half_up

BASE_PRICE = 150

PREMIUM_AIRLINES: tuple[str, ...] = (
    "Emirates",
    "Qatar Airways",
    "Singapore Airlines",
    "Lufthansa",
    "British Airways",
)
BUDGET_AIRLINES: tuple[str, ...] = (
    "Spirit",
    "Frontier",
    "Ryanair",
    "EasyJet",
    "Southwest",
)

PREMIUM_TIER = 1.8
BUDGET_TIER = 0.7
STANDARD_TIER = 1.0

RED_EYE_TIER = 0.85
PEAK_TIER = 1.3
OFF_PEAK_TIER = 1.0

VARIANCE_RANGE = (0.8, 1.2)
SEATS_RANGE = (5, 54)


def airline_tier(airline_name: str) -> float:
    """Multiplier for the airline's market position.

    Premium is checked before budget, so a name matching both lists is
    priced as premium.
    """
    lowered = airline_name.lower()
    if any(name.lower() in lowered for name in PREMIUM_AIRLINES):
        return PREMIUM_TIER
    if any(name.lower() in lowered for name in BUDGET_AIRLINES):
        return BUDGET_TIER
    return STANDARD_TIER


def time_of_day_tier(departure: datetime) -> float:
    """Multiplier for the departure hour as written in the timestamp."""
    hour = departure.hour
    if hour < 6 or hour > 21:
        return RED_EYE_TIER
    if 7 <= hour <= 9 or 17 <= hour <= 19:
        return PEAK_TIER
    return OFF_PEAK_TIER


class PriceEstimator:
    """Produces a plausible ticket price from airline and departure time.

    Every call draws a fresh variance factor, so two calls with the same
    input usually differ. Pass a seeded :class:`random.Random` to make the
    sequence reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def variance(self) -> float:
        low, high = VARIANCE_RANGE
        return self._rng.uniform(low, high)

    def estimate(self, airline_name: str, departure: datetime | str) -> int:
        """Estimated price in whole currency units."""
        if isinstance(departure, str):
            departure = datetime.fromisoformat(departure)
        price = (
            BASE_PRICE
            * airline_tier(airline_name)
            * time_of_day_tier(departure)
            * self.variance()
        )
        return round_half_up(price)

    def seats_available(self) -> int:
        """Synthetic seat count; the source has no inventory signal."""
        low, high = SEATS_RANGE
        return self._rng.randint(low, high)
