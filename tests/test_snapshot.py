"""Tests for per-frame aggregation across all vessels."""

from __future__ import annotations

from conftest import ms

from kantai.core.contracts import Dataset
from kantai.core.engine.snapshot import TRACK_COLORS, snapshot, track_color


def _fleet() -> Dataset:
    return Dataset.model_validate(
        {
            "places": {"A": {"name": "A", "coordinate": [10, 20]}, "B": {"name": "B", "coordinate": [30, 40]}},
            "vessels": {
                "good": {
                    "name": "Good",
                    "affiliation": "IJN",
                    "type": "battleship",
                    "events": [
                        {"date": "2024-01-01", "place": "A"},
                        {"date": "2024-01-11", "place": "B"},
                    ],
                },
                "broken": {
                    "name": "Broken",
                    "affiliation": "IJN",
                    "type": "cruiser",
                    "events": [
                        {"date": "2024-01-01", "place": "missing"},
                        {"date": "2024-01-11", "place": "B"},
                    ],
                },
                "idle": {"name": "Idle", "affiliation": "USN", "type": "destroyer"},
            },
        }
    )


def test_snapshot_covers_every_vessel_in_order() -> None:
    """One frame per vessel, in dataset order, with cycling colours."""
    snap = snapshot(_fleet(), ms(2024, 1, 6))
    assert [f.vessel_id for f in snap.frames] == ["good", "broken", "idle"]
    assert [f.color for f in snap.frames] == list(TRACK_COLORS[:3])
    assert snap.time == ms(2024, 1, 6)


def test_bad_reference_does_not_blank_other_vessels() -> None:
    """`broken` loses its marker; `good` is unaffected."""
    snap = snapshot(_fleet(), ms(2024, 1, 6))
    frames = {f.vessel_id: f for f in snap.frames}
    assert frames["good"].position == (20.0, 30.0)
    assert frames["broken"].position is None
    assert frames["idle"].position is None
    assert [f.vessel_id for f in snap.positioned] == ["good"]


def test_drawable_needs_two_points() -> None:
    """Tracks shorter than two points are not drawable."""
    early = {f.vessel_id: f for f in snapshot(_fleet(), ms(2024, 1, 6)).frames}
    late = {f.vessel_id: f for f in snapshot(_fleet(), ms(2024, 1, 11)).frames}
    assert not early["good"].drawable
    assert late["good"].drawable
    assert late["broken"].track == [(30, 40)]
    assert not late["broken"].drawable


def test_track_color_cycles() -> None:
    """The palette wraps around."""
    assert track_color(0) == track_color(len(TRACK_COLORS)) == "blue"
