"""Search parameters and the airport input variants that feed them."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from .base import WireModel
from .flight import Airport


class SelectedAirport(BaseModel):
    """An airport picked from the suggestion list."""

    kind: Literal["selected"] = "selected"
    airport: Airport


class FreeTextCode(BaseModel):
    """An airport code typed by the user instead of picked."""

    kind: Literal["free_text"] = "free_text"
    text: str


AirportSelection = Annotated[
    SelectedAirport | FreeTextCode,
    Field(discriminator="kind"),
]


def to_airport(selection: SelectedAirport | FreeTextCode) -> Airport:
    """Normalize either input variant to a single :class:`Airport`."""
    if isinstance(selection, SelectedAirport):
        return selection.airport

    code = selection.text.strip().upper()
    if not code:
        msg = "Airport code must not be blank"
        raise ValueError(msg)
    return Airport(code=code, city=code, name=f"{code} Airport")


class SearchParams(WireModel):
    """One user search action."""

    origin: Airport
    destination: Airport
    departure_date: date
    return_date: date | None = None
    passengers: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _validate_dates(self) -> SearchParams:
        if self.return_date and self.return_date < self.departure_date:
            msg = "return_date must be after departure_date"
            raise ValueError(msg)
        return self


def build_search_params(
    origin: SelectedAirport | FreeTextCode,
    destination: SelectedAirport | FreeTextCode,
    departure_date: date,
    return_date: date | None = None,
    passengers: int = 1,
) -> SearchParams:
    """Build :class:`SearchParams` from raw form selections."""
    return SearchParams(
        origin=to_airport(origin),
        destination=to_airport(destination),
        departure_date=departure_date,
        return_date=return_date,
        passengers=passengers,
    )
