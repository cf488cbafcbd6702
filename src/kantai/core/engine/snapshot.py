"""Per-frame aggregation: everything the map draws for one query time.

For each vessel a :class:`VesselFrame` carries the marker position (or
``None`` when the vessel is not positioned) and its track so far. Vessels
are computed independently, so a bad place reference in one vessel's
history never hides another vessel.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kantai.core.contracts.dataset import Dataset
from kantai.core.contracts.place import Coordinate
from kantai.core.engine.position import position_at, track_up_to

TRACK_COLORS: tuple[str, ...] = (
    "blue",
    "red",
    "green",
    "orange",
    "purple",
    "brown",
    "pink",
    "gray",
    "cyan",
    "magenta",
)


def track_color(index: int) -> str:
    """Colour for the ``index``-th vessel's track, cycling through the palette."""
    return TRACK_COLORS[index % len(TRACK_COLORS)]


@dataclass(frozen=True)
class VesselFrame:
    vessel_id: str
    name: str
    affiliation: str
    color: str
    position: Coordinate | None
    track: list[Coordinate] = field(default_factory=list)

    @property
    def drawable(self) -> bool:
        """A track needs at least two points to be drawn as a line."""
        return len(self.track) > 1


@dataclass(frozen=True)
class Snapshot:
    time: int
    frames: list[VesselFrame]

    @property
    def positioned(self) -> list[VesselFrame]:
        """Frames that have a marker to draw."""
        return [f for f in self.frames if f.position is not None]


def snapshot(dataset: Dataset, query_time: int) -> Snapshot:
    """Compute markers and tracks for every vessel at ``query_time``."""
    frames = [
        VesselFrame(
            vessel_id=vessel_id,
            name=vessel.name,
            affiliation=vessel.affiliation,
            color=track_color(i),
            position=position_at(vessel, query_time, dataset.places).ok_or_none(),
            track=track_up_to(vessel, query_time, dataset.places),
        )
        for i, (vessel_id, vessel) in enumerate(dataset.vessels.items())
    ]
    return Snapshot(time=query_time, frames=frames)


__all__ = ["TRACK_COLORS", "track_color", "VesselFrame", "Snapshot", "snapshot"]
