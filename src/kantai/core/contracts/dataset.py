"""Dataset root contract and dataset-level (global) events."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .place import IsoDate, Place, PlaceRef
from .vessel import Vessel


class GlobalEvent(BaseModel):
    """A timeline marker independent of any vessel (e.g. a battle or treaty).

    Only contributes to the dataset's time range. Either a single ``date`` or
    a ``begin_date``/``end_date`` span (or both) may be given.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    date: IsoDate | None = None
    begin_date: IsoDate | None = None
    end_date: IsoDate | None = None
    place: PlaceRef
    references: list[str] = Field(default_factory=list)


class Dataset(BaseModel):
    """The whole in-memory document: place registry, vessels and global events."""

    model_config = ConfigDict(frozen=True)

    places: dict[str, Place] = Field(default_factory=dict)
    vessels: dict[str, Vessel] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("vessels", "entities"),
    )
    events: list[GlobalEvent] = Field(default_factory=list)


__all__ = ["GlobalEvent", "Dataset"]
