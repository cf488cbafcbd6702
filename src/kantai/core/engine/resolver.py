"""Place resolution: turn a :data:`PlaceRef` into a concrete coordinate."""

from __future__ import annotations

from collections.abc import Mapping

from kantai.core.contracts.place import Coordinate, InlinePlace, Place, PlaceRef
from kantai.core.errors import PlaceNotFound
from kantai.core.result import Result, err, ok


def resolve_coordinate(place_ref: PlaceRef, places: Mapping[str, Place]) -> Coordinate:
    """Return the coordinate a place reference points at.

    Raises
    ------
    PlaceNotFound
        If ``place_ref`` is an identifier missing from ``places``. Inline
        references never raise.
    """
    match place_ref:
        case str() as place_id:
            place = places.get(place_id)
            if place is None:
                raise PlaceNotFound(place_id)
            return place.coordinate
        case InlinePlace(coordinate=coordinate):
            return coordinate


def try_resolve(
    place_ref: PlaceRef, places: Mapping[str, Place]
) -> Result[Coordinate, PlaceNotFound]:
    """Like :func:`resolve_coordinate`, but report a missing place as ``Err``."""
    try:
        return ok(resolve_coordinate(place_ref, places))
    except PlaceNotFound as exc:
        return err(exc)


__all__ = ["resolve_coordinate", "try_resolve"]
