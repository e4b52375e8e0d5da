"""Parse an AviationStack ``/flights`` response into Flight objects.

AviationStack serves flight-status records, not fare offers. Each record
describes one scheduled, non-connecting segment::

    {
        "flight_date": "2026-03-01",
        "flight_status": "scheduled",
        "departure": {
            "airport": "John F Kennedy International",
            "iata": "JFK",
            "scheduled": "2026-03-01T08:00:00+00:00",
            "estimated": "2026-03-01T08:00:00+00:00",
            ...
        },
        "arrival": {"airport": "...", "iata": "LAX", "scheduled": "...", ...},
        "airline": {"name": "Delta Air Lines", "iata": "DL", "icao": "DAL"},
        "flight": {"number": "123", "iata": "DL123", "icao": "DAL123"}
    }

Scheduled times are the airports' local wall-clock times even though they
carry a ``+00:00`` suffix. Prices, seat counts and aircraft are not part of
the record, so they are estimated or filled with placeholders.
"""

from __future__ import annotations

import logging
import random
from datetime import UTC, date, datetime
from typing import Any

from flight_finder_core.rounding import round_half_up
from flight_finder_core.schemas import Airport, CabinClass, Flight
from flight_finder_crawler.config import settings
from flight_finder_ml.pricing import PriceEstimator

logger = logging.getLogger(__name__)

UNKNOWN_AIRLINE = "Unknown Airline"
UNKNOWN_AIRLINE_CODE = "XX"
PLACEHOLDER_AIRCRAFT = "Boeing 737"

_EPOCH = datetime.fromtimestamp(0, tz=UTC)


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _parse_timestamp(value: Any) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def _schedule_time(section: dict[str, Any], flight_date: Any) -> datetime:
    """Scheduled time, else estimated time, else midnight of the flight date."""
    for key in ("scheduled", "estimated"):
        parsed = _parse_timestamp(section.get(key))
        if parsed is not None:
            return parsed

    if isinstance(flight_date, str):
        try:
            day = date.fromisoformat(flight_date)
        except ValueError:
            pass
        else:
            return datetime(day.year, day.month, day.day, tzinfo=UTC)

    logger.warning("No usable timestamp in %s; using the epoch", section)
    return _EPOCH


def _duration_minutes(departure: datetime, arrival: datetime) -> int:
    # Negative values are kept: they flag a bad schedule upstream.
    return round_half_up((arrival - departure).total_seconds() / 60)


def _airport(section: dict[str, Any]) -> Airport:
    code = str(section.get("iata") or "")
    name = str(section.get("airport") or "")
    words = name.split()
    return Airport(
        code=code,
        name=name or code,
        city=words[0] if words else code,
    )


def has_identity(raw: dict[str, Any]) -> bool:
    """True if the record has departure/arrival codes and an airline name."""
    return bool(
        _section(raw, "departure").get("iata")
        and _section(raw, "arrival").get("iata")
        and _section(raw, "airline").get("name")
    )


def transform_flight(
    raw: dict[str, Any],
    index: int,
    *,
    estimator: PriceEstimator,
) -> Flight:
    """Map one AviationStack record onto :class:`Flight`.

    Missing fields are defaulted rather than rejected. *index* is the
    record's position in its batch and keeps synthesized flight numbers
    and ids unique.
    """
    departure = _section(raw, "departure")
    arrival = _section(raw, "arrival")
    airline = _section(raw, "airline")
    flight = _section(raw, "flight")
    flight_date = raw.get("flight_date")

    airline_name = str(airline.get("name") or UNKNOWN_AIRLINE)
    airline_code = str(airline.get("iata") or UNKNOWN_AIRLINE_CODE)
    flight_number = str(
        flight.get("iata") or f"{UNKNOWN_AIRLINE_CODE}{1000 + index}"
    )
    departure_time = _schedule_time(departure, flight_date)
    arrival_time = _schedule_time(arrival, flight_date)

    return Flight(
        id=f"{flight_number}-{index}",
        airline=airline_name,
        airline_code=airline_code,
        flight_number=flight_number,
        origin=_airport(departure),
        destination=_airport(arrival),
        departure_time=departure_time,
        arrival_time=arrival_time,
        duration=_duration_minutes(departure_time, arrival_time),
        stops=0,
        price=estimator.estimate(airline_name, departure_time),
        currency=settings.default_currency,
        seats_available=estimator.seats_available(),
        aircraft=PLACEHOLDER_AIRCRAFT,
        cabin=CabinClass.ECONOMY.value,
    )


def parse_aviationstack_response(
    raw: dict[str, Any],
    *,
    estimator: PriceEstimator | None = None,
    rng: random.Random | None = None,
) -> list[Flight]:
    """Convert ``data[]`` into flights, dropping records without an identity."""
    estimator = estimator or PriceEstimator(rng)
    records = [r for r in raw.get("data") or [] if isinstance(r, dict)]
    usable = [r for r in records if has_identity(r)]

    if len(usable) < len(records):
        logger.info(
            "Dropped %d AviationStack records without route or airline",
            len(records) - len(usable),
        )

    flights = [
        transform_flight(record, index, estimator=estimator)
        for index, record in enumerate(usable)
    ]
    logger.info("Parsed %d flights from AviationStack response", len(flights))
    return flights
