"""Tests for the dataset loader and reference checks."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kantai.core.engine.bounds import time_bounds
from kantai.core.errors import DatasetError
from kantai.core.timeutil import parse_date
from kantai.io.loader import check_references, load_dataset

SAMPLE_YAML = """
places:
  kure:
    name: Kure
    coordinate: [34.2417, 132.5531]
vessels:
  yamato:
    name: Yamato
    affiliation: IJN
    type: battleship
    events:
      - date: 1941-12-16
        type: commissioning
        place: kure
      - date: 1945-04-07
        type: sinking
        place:
          coordinate: [30.3833, 128.0667]
      - date: 1945-04-08
        place: atlantis
events:
  - name: Pearl Harbor
    date: 1941-12-08
    place: pearl_harbor
"""


def test_load_yaml(tmp_path: Path) -> None:
    """YAML documents load, with unquoted dates kept as ISO strings."""
    path = tmp_path / "data.yml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")

    ds = load_dataset(path)

    assert set(ds.places) == {"kure"}
    yamato = ds.vessels["yamato"]
    assert yamato.events[0].date == "1941-12-16"
    assert yamato.events[1].place is not None
    assert ds.events[0].date == "1941-12-08"


def test_load_json(tmp_path: Path) -> None:
    """JSON documents are accepted too."""
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({"places": {"a": {"name": "A", "coordinate": [1, 2]}}, "events": []}),
        encoding="utf-8",
    )
    assert load_dataset(path).places["a"].coordinate == (1.0, 2.0)


def test_missing_file(tmp_path: Path) -> None:
    """A missing path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "nope.yml")


@pytest.mark.parametrize(  # type: ignore[misc]
    ("name", "content"),
    [
        ("data.txt", "places: {}"),
        ("data.yml", "- just\n- a list\n"),
        ("data.yml", "places: [unclosed"),
        ("data.yml", "places:\n  a:\n    name: A\n"),
    ],
)
def test_bad_documents_raise_dataset_error(tmp_path: Path, name: str, content: str) -> None:
    """Unsupported formats, non-mappings, syntax and schema errors all map to DatasetError."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(DatasetError):
        load_dataset(path)


def test_check_references_reports_dangling_ids(tmp_path: Path) -> None:
    """Unknown place ids in vessel and global events are listed, inline places are not."""
    path = tmp_path / "data.yml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    problems = check_references(load_dataset(path))
    assert len(problems) == 2
    assert "vessels.yamato.events[2]: unknown place 'atlantis'" in problems
    assert any("pearl_harbor" in p for p in problems)


def test_year_only_dates_load_and_count_toward_bounds(tmp_path: Path) -> None:
    """An unquoted `date: 1937` (a YAML int) loads and folds in as 1937-01-01."""
    path = tmp_path / "data.yml"
    path.write_text(
        """
vessels:
  yamato:
    name: Yamato
    affiliation: IJN
    type: battleship
    events:
      - date: 1937
        type: other
      - date: 1941-12-16
        type: commissioning
events:
  - name: Treaty lapse
    begin_date: 1936
    end_date: 1946
    place: {coordinate: [0, 0]}
""",
        encoding="utf-8",
    )

    ds = load_dataset(path)

    assert ds.vessels["yamato"].events[0].date == "1937"
    bounds = time_bounds(ds)
    assert bounds.begin == parse_date("1936")
    assert bounds.end == parse_date("1946")
    assert parse_date("1937") is not None


def test_unparseable_int_date_is_skipped_not_fatal(tmp_path: Path) -> None:
    """A bogus numeric date doesn't reject the document; it is just skipped."""
    path = tmp_path / "data.yml"
    path.write_text(
        "events:\n"
        "  - {name: Bad, date: 99, place: {coordinate: [0, 0]}}\n"
        "  - {name: Good, date: 1937, place: {coordinate: [0, 0]}}\n",
        encoding="utf-8",
    )
    bounds = time_bounds(load_dataset(path))
    assert bounds.begin == bounds.end == parse_date("1937")
