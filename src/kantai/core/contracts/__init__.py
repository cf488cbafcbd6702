"""Pydantic contracts for the timeline dataset (places, vessels, events)."""

from __future__ import annotations

from .dataset import Dataset, GlobalEvent
from .place import Coordinate, InlinePlace, Place, PlaceRef
from .vessel import EventKind, Vessel, VesselEvent, VesselType

__all__ = [
    "Coordinate",
    "Dataset",
    "EventKind",
    "GlobalEvent",
    "InlinePlace",
    "Place",
    "PlaceRef",
    "Vessel",
    "VesselEvent",
    "VesselType",
]
