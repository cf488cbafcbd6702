"""Temporal position engine: where a vessel is at a given time, and where it has been.

Vessels are only sighted at discrete events. Between two consecutive
positioned events the vessel is assumed to travel in a straight line at
constant speed, in plain (latitude, longitude) space. Distances in the
source data are chart-scale, so great-circle geometry is not used.

Outside the span of known positions we do not extrapolate: before the first
sighting and after the last, the answer is :class:`NotPositioned`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from kantai.core.contracts.place import Coordinate, Place, PlaceRef
from kantai.core.contracts.vessel import Vessel
from kantai.core.engine.resolver import try_resolve
from kantai.core.result import Result, err, ok
from kantai.core.settings import get_logger
from kantai.core.timeutil import parse_date

logger = get_logger(__name__)

NotPositionedReason = Literal["too_few_events", "before_first", "after_last", "unresolved_place"]


@dataclass(frozen=True)
class NotPositioned:
    """No interpolated position exists at the requested time. Not an error."""

    reason: NotPositionedReason


@dataclass(frozen=True)
class _Fix:
    time: int
    place: PlaceRef


def _positioned_events(vessel: Vessel) -> list[_Fix]:
    """Events that carry a place and a parseable date, in stored order."""
    fixes: list[_Fix] = []
    for ev in vessel.events:
        if ev.place is None:
            continue
        when = parse_date(ev.date)
        if when is None:
            continue
        fixes.append(_Fix(when, ev.place))
    return fixes


def interpolate(c1: Coordinate, c2: Coordinate, ratio: float) -> Coordinate:
    """Linear interpolation applied to each axis independently."""
    return (
        c1[0] + (c2[0] - c1[0]) * ratio,
        c1[1] + (c2[1] - c1[1]) * ratio,
    )


def position_at(
    vessel: Vessel, query_time: int, places: Mapping[str, Place]
) -> Result[Coordinate, NotPositioned]:
    """Interpolated coordinate of ``vessel`` at ``query_time`` (epoch ms).

    The first consecutive pair of positioned events enclosing ``query_time``
    is used. If that pair references a missing place it is skipped and the
    scan goes on, so a bad reference only blanks the times it actually
    covers.
    """
    fixes = _positioned_events(vessel)
    if len(fixes) < 2:
        return err(NotPositioned("too_few_events"))
    if query_time < fixes[0].time:
        return err(NotPositioned("before_first"))
    if query_time > fixes[-1].time:
        return err(NotPositioned("after_last"))

    for ev1, ev2 in zip(fixes, fixes[1:]):
        if not (ev1.time <= query_time <= ev2.time):
            continue
        coord1 = try_resolve(ev1.place, places)
        coord2 = try_resolve(ev2.place, places)
        if coord1.is_err() or coord2.is_err():
            missing = coord1.unwrap_err() if coord1.is_err() else coord2.unwrap_err()
            logger.debug("%s: skipping segment, %s", vessel.name, missing)
            continue
        span = ev2.time - ev1.time
        if span and query_time == ev2.time:
            # c1 + (c2 - c1) * 1.0 can drift by an ulp
            return ok(coord2.unwrap())
        ratio = (query_time - ev1.time) / span if span else 0.0
        return ok(interpolate(coord1.unwrap(), coord2.unwrap(), ratio))

    return err(NotPositioned("unresolved_place"))


def track_up_to(
    vessel: Vessel, query_time: int, places: Mapping[str, Place]
) -> list[Coordinate]:
    """Resolved coordinates of every positioned event dated at or before ``query_time``.

    Events whose place cannot be resolved are dropped; the rest keep their
    order. Fewer than two points cannot be drawn as a line.
    """
    track: list[Coordinate] = []
    for fix in _positioned_events(vessel):
        if fix.time > query_time:
            continue
        resolved = try_resolve(fix.place, places)
        if resolved.is_err():
            logger.debug("%s: dropping track point, %s", vessel.name, resolved.unwrap_err())
            continue
        track.append(resolved.unwrap())
    return track


__all__ = ["NotPositioned", "NotPositionedReason", "interpolate", "position_at", "track_up_to"]
