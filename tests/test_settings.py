"""Typed smoke tests for the settings loader.

These tests verify three guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
from pydantic import ValidationError

from kantai.core.settings import Settings, get_logger, load_settings, settings


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("KANTAI_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("KANTAI_DATA", "fleet.json")
    monkeypatch.setenv("KANTAI_PLAYBACK_STEP_DAYS", "7")

    load_settings.cache_clear()
    s = load_settings()

    assert s.environment == "test" and s.is_test
    assert s.log_level == "DEBUG"
    assert s.data_path == "fleet.json"
    assert s.playback_step_days == 7


def test_playback_step_must_be_positive(monkeypatch: Any) -> None:
    """A zero step is rejected at load time."""
    monkeypatch.setenv("KANTAI_PLAYBACK_STEP_DAYS", "0")
    load_settings.cache_clear()
    with pytest.raises(ValidationError):
        load_settings()


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()

    logger = get_logger("kantai.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
    assert logger.propagate is False


def test_fetched_logger_keeps_level_until_fetched_again(monkeypatch: Any) -> None:
    """The level is applied at fetch time, not when a message is emitted."""
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    load_settings.cache_clear()
    logger = get_logger("kantai.tests.fetch_time")
    assert logger.level == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    load_settings.cache_clear()
    assert logger.level == logging.INFO

    assert get_logger("kantai.tests.fetch_time").level == logging.WARNING
