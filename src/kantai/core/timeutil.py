"""Conversions between calendar dates and the engine's linear timeline.

The engine compares and subtracts times, so every date is reduced to an
integer count of milliseconds since 1970-01-01T00:00:00Z before use. Dates
without an explicit offset are taken as UTC, which keeps "1941-12-08" on
the same instant regardless of the host timezone.

Besides full ISO-8601 dates and datetimes, the reduced forms ``YYYY`` and
``YYYY-MM`` are accepted (first day of the year / month), since historical
sources often only know the year a ship was laid down.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta

from kantai.core.errors import UnparseableDate
from kantai.core.settings import get_logger

logger = get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MS_PER_DAY = 86_400_000

_REDUCED = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2}))?$")


def _from_datetime(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def parse_date(raw: str | None) -> int | None:
    """Parse an ISO-8601 string to epoch milliseconds, or ``None`` if it can't be.

    A failed parse is logged at DEBUG and otherwise ignored; callers that fold
    many dates together simply skip the value.
    """
    if raw is None:
        return None
    text = raw.strip()
    match = _REDUCED.match(text)
    try:
        if match:
            month = int(match.group("month") or 1)
            return _from_datetime(datetime(int(match.group("year")), month, 1))
        return _from_datetime(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        logger.debug("Skipping unparseable date %r", raw)
        return None


def to_millis(value: int | str | date | datetime) -> int:
    """Coerce a user-supplied time to epoch milliseconds.

    Integers are taken as milliseconds already. Strings go through
    :func:`parse_date`; unlike the folding path, a bad string raises
    :class:`UnparseableDate` here because the caller asked for that exact time.
    """
    if isinstance(value, bool):
        raise UnparseableDate(value)
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        return _from_datetime(value)
    if isinstance(value, date):
        return _from_datetime(datetime(value.year, value.month, value.day))
    parsed = parse_date(value)
    if parsed is None:
        raise UnparseableDate(value)
    return parsed


def format_millis(ms: int | float) -> str:
    """Render epoch milliseconds as the ``YYYY-MM-DD`` scrubber label."""
    return (EPOCH + timedelta(milliseconds=ms)).strftime("%Y-%m-%d")


__all__ = ["EPOCH", "MS_PER_DAY", "parse_date", "to_millis", "format_millis"]
