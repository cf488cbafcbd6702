"""Place contracts: coordinates, named places and place references.

A place reference is a two-case sum type:

- a ``str`` naming an entry in the dataset's place registry, or
- an :class:`InlinePlace` carrying an anonymous coordinate directly.

Documents express the first as a bare string (``place: kure``) and the second
as a mapping (``place: {coordinate: [34.2, 132.5]}``); pydantic's union
validation picks the arm from the input's shape.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, FiniteFloat

# (latitude, longitude); NaN/inf are rejected at validation time.
Coordinate = tuple[FiniteFloat, FiniteFloat]


def _iso_text(value: Any) -> Any:
    """Normalize YAML-native date/datetime values back to ISO strings.

    YAML reads an unquoted year (``date: 1937``) as an int; it becomes
    ``"1937"`` and is left to the engine to parse or skip.
    """
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# ISO-8601 date string. Parsing happens in the engine, not here, so that an
# unparseable date is skipped rather than rejecting the whole document.
IsoDate = Annotated[str, BeforeValidator(_iso_text)]


class Place(BaseModel):
    """A named, fixed location."""

    model_config = ConfigDict(frozen=True)

    name: str
    coordinate: Coordinate = Field(description="(latitude, longitude) in degrees")
    references: list[str] = Field(default_factory=list)


class InlinePlace(BaseModel):
    """An anonymous location given by coordinate alone."""

    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate


PlaceRef = str | InlinePlace


__all__ = ["Coordinate", "IsoDate", "Place", "InlinePlace", "PlaceRef"]
