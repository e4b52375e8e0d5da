"""Base model for schemas that travel over the wire in camelCase."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model serialized with camelCase keys.

    Input is accepted in either snake_case or camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        """Dump to a JSON-compatible dict using the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
