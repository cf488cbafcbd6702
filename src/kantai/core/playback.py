"""Deterministic playback clock for stepping the scrubber across a dataset.

The clock only produces query times; it never touches the dataset, so the
same clock can drive any number of snapshots.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from kantai.core.engine.bounds import TimeBounds
from kantai.core.timeutil import MS_PER_DAY


@dataclass(frozen=True)
class PlaybackClock:
    """Query times ``start, start + step, ...`` up to and including ``end``."""

    start_ms: int
    end_ms: int
    step_ms: int = MS_PER_DAY

    def __post_init__(self) -> None:
        if self.step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {self.step_ms}")

    @classmethod
    def over(cls, bounds: TimeBounds, step_ms: int = MS_PER_DAY) -> PlaybackClock:
        """Clock spanning ``bounds``; raises ``EmptyDataset`` for empty bounds."""
        begin, end = bounds.require()
        return cls(begin, end, step_ms)

    def __iter__(self) -> Iterator[int]:
        t = self.start_ms
        while t <= self.end_ms:
            yield t
            t += self.step_ms

    def __len__(self) -> int:
        if self.end_ms < self.start_ms:
            return 0
        return (self.end_ms - self.start_ms) // self.step_ms + 1


__all__ = ["PlaybackClock"]
