"""Flight Finder ML - fare heuristics and result-set analytics."""

from flight_finder_ml.aggregation import (
    CHART_MAX_AIRLINES,
    ChartRow,
    PriceBand,
    PriceDataPoint,
    PriceStats,
    chart_aggregate,
    price_band,
    price_stats,
    to_chart_points,
)
from flight_finder_ml.filtering import (
    PriceRange,
    filter_flights,
    has_active_filters,
    price_range,
    toggle_airline,
    toggle_stop,
    unique_airlines,
)
from flight_finder_ml.pricing import PriceEstimator, airline_tier, time_of_day_tier

__all__ = [
    "CHART_MAX_AIRLINES",
    "ChartRow",
    "PriceBand",
    "PriceDataPoint",
    "PriceEstimator",
    "PriceRange",
    "PriceStats",
    "airline_tier",
    "chart_aggregate",
    "filter_flights",
    "has_active_filters",
    "price_band",
    "price_range",
    "price_stats",
    "time_of_day_tier",
    "to_chart_points",
    "toggle_airline",
    "toggle_stop",
    "unique_airlines",
]
