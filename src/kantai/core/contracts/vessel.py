"""Vessel and VesselEvent: the tracked entities and their dated history."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .place import IsoDate, PlaceRef

EventKind = Literal[
    "arrival",
    "departure",
    "waypoint",
    "commissioning",
    "launch",
    "battle",
    "sinking",
    "decommissioning",
    "other",
]

VesselType = Literal[
    "battleship",
    "aircraft_carrier",
    "cruiser",
    "destroyer",
    "submarine",
    "other",
]


class VesselEvent(BaseModel):
    """One dated entry in a vessel's history.

    ``place`` may be absent (e.g. a renaming or refit with no known location);
    such events are kept but ignored for positioning.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    date: IsoDate = Field(description="ISO-8601 date or datetime")
    type: EventKind | None = None
    place: PlaceRef | None = None
    references: list[str] = Field(default_factory=list)


class Vessel(BaseModel):
    """A tracked ship. ``events`` must already be in chronological order."""

    model_config = ConfigDict(frozen=True)

    name: str
    affiliation: str
    type: VesselType
    events: list[VesselEvent] = Field(default_factory=list)


__all__ = ["EventKind", "VesselType", "VesselEvent", "Vessel"]
