"""Exception hierarchy for Kantai.

Only genuine faults are exceptions. "No position at this time" is a normal
answer and lives in :class:`kantai.core.engine.position.NotPositioned`
instead.
"""

from __future__ import annotations


class KantaiError(Exception):
    """Base class for every error raised by the package."""


class PlaceNotFound(KantaiError, KeyError):
    """A string place reference has no entry in the place registry."""

    def __init__(self, place_id: str) -> None:
        super().__init__(place_id)
        self.place_id = place_id

    def __str__(self) -> str:
        return f"Place {self.place_id!r} not found"


class UnparseableDate(KantaiError, ValueError):
    """A date value could not be parsed as an ISO-8601 calendar date."""

    def __init__(self, raw: object) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"Unparseable date: {self.raw!r}"


class EmptyDataset(KantaiError):
    """No date anywhere in the dataset could be parsed, so it has no time span."""


class DatasetError(KantaiError):
    """The dataset document could not be read or validated."""


__all__ = ["KantaiError", "PlaceNotFound", "UnparseableDate", "EmptyDataset", "DatasetError"]
