"""Temporal position engine.

Every operation is a pure function of its arguments; the dataset (or its
place registry) is always passed in explicitly.
"""

from __future__ import annotations

from .bounds import TimeBounds, time_bounds
from .position import NotPositioned, position_at, track_up_to
from .resolver import resolve_coordinate, try_resolve
from .snapshot import Snapshot, VesselFrame, snapshot

__all__ = [
    "NotPositioned",
    "Snapshot",
    "TimeBounds",
    "VesselFrame",
    "position_at",
    "resolve_coordinate",
    "snapshot",
    "time_bounds",
    "track_up_to",
    "try_resolve",
]
