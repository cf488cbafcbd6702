"""Dataset time bounds: the range the playback scrubber can move over."""

from __future__ import annotations

import math
from dataclasses import dataclass

from kantai.core.contracts.dataset import Dataset
from kantai.core.errors import EmptyDataset
from kantai.core.timeutil import parse_date


@dataclass(frozen=True)
class TimeBounds:
    """Earliest and latest instant (epoch ms) seen anywhere in a dataset.

    When nothing parsed, ``begin`` is ``+inf`` and ``end`` is ``-inf``. Use
    :attr:`is_empty` or :meth:`require` before treating them as timestamps.
    """

    begin: float
    end: float

    @property
    def is_empty(self) -> bool:
        return math.isinf(self.begin) or math.isinf(self.end)

    def require(self) -> tuple[int, int]:
        """Return ``(begin, end)`` as integers, or raise :class:`EmptyDataset`."""
        if self.is_empty:
            raise EmptyDataset("dataset contains no parseable dates")
        return int(self.begin), int(self.end)


def time_bounds(dataset: Dataset) -> TimeBounds:
    """Fold every parseable date in ``dataset`` into a begin/end pair.

    Global events contribute ``begin_date`` to the start only, ``end_date``
    to the end only, and ``date`` to both. Every vessel event date counts
    toward both. Unparseable dates are skipped.
    """
    begin = math.inf
    end = -math.inf

    for event in dataset.events:
        if (t := parse_date(event.begin_date)) is not None:
            begin = min(begin, t)
        if (t := parse_date(event.end_date)) is not None:
            end = max(end, t)
        if (t := parse_date(event.date)) is not None:
            begin = min(begin, t)
            end = max(end, t)

    for vessel in dataset.vessels.values():
        for ev in vessel.events:
            if (t := parse_date(ev.date)) is not None:
                begin = min(begin, t)
                end = max(end, t)

    return TimeBounds(begin, end)


__all__ = ["TimeBounds", "time_bounds"]
