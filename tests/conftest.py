"""Shared fixtures: small synthetic datasets built directly from contracts."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest

from kantai.core.contracts import Dataset, Vessel
from kantai.core.settings import load_settings


def ms(year: int, month: int, day: int) -> int:
    """Epoch milliseconds for midnight UTC on the given day."""
    return int(datetime(year, month, day, tzinfo=UTC).timestamp()) * 1000


def make_vessel(*events: dict[str, Any], name: str = "Yamato") -> Vessel:
    """Build a vessel from event dicts, e.g. ``{"date": "2024-01-01", "place": "A"}``."""
    return Vessel.model_validate(
        {"name": name, "affiliation": "IJN", "type": "battleship", "events": list(events)}
    )


@pytest.fixture  # type: ignore[misc]
def places_ab() -> Dataset:
    """Registry ``{A: (10, 20), B: (30, 40)}`` with no vessels or events."""
    return Dataset.model_validate(
        {
            "places": {
                "A": {"name": "Alpha", "coordinate": [10, 20]},
                "B": {"name": "Bravo", "coordinate": [30, 40]},
            }
        }
    )


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings after each test so env overrides don't leak."""
    yield
    load_settings.cache_clear()
