"""Static airport and airline reference data for suggestions and labels."""

from __future__ import annotations

from flight_finder_core.schemas.flight import Airport

AIRLINE_NAMES: dict[str, str] = {
    "AA": "American Airlines",
    "UA": "United Airlines",
    "DL": "Delta Air Lines",
    "SW": "Southwest Airlines",
    "B6": "JetBlue Airways",
    "AS": "Alaska Airlines",
    "NK": "Spirit Airlines",
    "F9": "Frontier Airlines",
    "WN": "Southwest",
    "LH": "Lufthansa",
    "BA": "British Airways",
    "AF": "Air France",
    "KL": "KLM Royal Dutch",
    "EK": "Emirates",
}

POPULAR_AIRPORTS: tuple[Airport, ...] = (
    Airport(code="JFK", name="John F. Kennedy International", city="New York"),
    Airport(code="LAX", name="Los Angeles International", city="Los Angeles"),
    Airport(code="ORD", name="O'Hare International", city="Chicago"),
    Airport(code="DFW", name="Dallas/Fort Worth International", city="Dallas"),
    Airport(code="DEN", name="Denver International", city="Denver"),
    Airport(code="SFO", name="San Francisco International", city="San Francisco"),
    Airport(code="SEA", name="Seattle-Tacoma International", city="Seattle"),
    Airport(code="ATL", name="Hartsfield-Jackson Atlanta", city="Atlanta"),
    Airport(code="BOS", name="Logan International", city="Boston"),
    Airport(code="MIA", name="Miami International", city="Miami"),
    Airport(code="LHR", name="Heathrow", city="London"),
    Airport(code="CDG", name="Charles de Gaulle", city="Paris"),
)


def airline_name(code: str) -> str:
    """Display name for an airline code, or the code itself if unknown."""
    return AIRLINE_NAMES.get(code, code)


def search_airports(query: str, limit: int = 10) -> list[Airport]:
    """Match *query* against code, city and name; exact code matches first."""
    needle = query.strip().lower()
    if not needle:
        return []

    matches = [
        ap
        for ap in POPULAR_AIRPORTS
        if needle in ap.code.lower()
        or needle in ap.city.lower()
        or needle in ap.name.lower()
    ]
    matches.sort(key=lambda ap: (ap.code.lower() != needle, ap.name))
    return matches[:limit]
