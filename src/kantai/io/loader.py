"""Dataset loader: read a YAML or JSON document into a validated :class:`Dataset`.

The loader is the only place that touches the filesystem. Everything
downstream works on the immutable in-memory model it returns.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kantai.core.contracts.dataset import Dataset
from kantai.core.contracts.place import PlaceRef
from kantai.core.errors import DatasetError
from kantai.core.settings import get_logger

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yml", ".yaml"}


def _read_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DatasetError(f"{path}: cannot parse document: {exc}") from exc
    raise DatasetError(f"{path}: unsupported dataset format {suffix!r}")


def load_dataset(path: str | Path) -> Dataset:
    """Load and validate the dataset at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DatasetError
        If the document cannot be parsed or does not match the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    raw = _read_document(path)
    if not isinstance(raw, dict):
        raise DatasetError(f"{path}: top level must be a mapping, got {type(raw).__name__}")

    try:
        dataset = Dataset.model_validate(raw)
    except ValidationError as exc:
        raise DatasetError(f"{path}: invalid dataset: {exc}") from exc

    logger.info(
        "Loaded %s: %d places, %d vessels, %d events",
        path.name,
        len(dataset.places),
        len(dataset.vessels),
        len(dataset.events),
    )
    return dataset


def check_references(dataset: Dataset) -> list[str]:
    """Describe every string place reference with no registry entry.

    Dangling references are tolerated by the engine (the point is skipped),
    so this is a report, not a validation step.
    """
    problems: list[str] = []

    def _check(ref: PlaceRef | None, where: str) -> None:
        if isinstance(ref, str) and ref not in dataset.places:
            problems.append(f"{where}: unknown place {ref!r}")

    for vessel_id, vessel in dataset.vessels.items():
        for i, ev in enumerate(vessel.events):
            _check(ev.place, f"vessels.{vessel_id}.events[{i}]")
    for i, event in enumerate(dataset.events):
        _check(event.place, f"events[{i}] ({event.name})")
    return problems


__all__ = ["load_dataset", "check_references"]
