"""Display helpers for flight cards, filters and chart labels."""

from __future__ import annotations

from datetime import datetime

from flight_finder_core.reference import airline_name
from flight_finder_core.rounding import round_half_up

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

__all__ = [
    "airline_name",
    "format_date",
    "format_duration",
    "format_price",
    "format_time",
    "stops_text",
]


def format_duration(minutes: int) -> str:
    """``135`` -> ``"2h 15m"``."""
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours}h {mins}m"
    if hours:
        return f"{hours}h"
    if mins:
        return f"{mins}m"
    return "0m"


def _as_datetime(value: datetime | str) -> datetime:
    return datetime.fromisoformat(value) if isinstance(value, str) else value


def format_time(value: datetime | str) -> str:
    """Twelve-hour clock, e.g. ``"08:05 AM"``."""
    return _as_datetime(value).strftime("%I:%M %p")


def format_date(value: datetime | str) -> str:
    """Short weekday and date, e.g. ``"Sun, Mar 1"``."""
    moment = _as_datetime(value)
    return f"{moment:%a}, {moment:%b} {moment.day}"


def stops_text(stops: int) -> str:
    if stops == 0:
        return "Nonstop"
    if stops == 1:
        return "1 stop"
    return f"{stops} stops"


def format_price(price: float, currency: str = "USD") -> str:
    """Whole-unit price with a currency symbol, e.g. ``"$1,234"``."""
    amount = f"{round_half_up(price):,}"
    symbol = CURRENCY_SYMBOLS.get(currency)
    return f"{symbol}{amount}" if symbol else f"{currency} {amount}"
