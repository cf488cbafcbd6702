"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `KANTAI_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    data_path : str
        Default dataset document used by CLI commands; maps from `KANTAI_DATA`.
    playback_step_days : int
        Default scrubber step for playback, in days; maps from
        `KANTAI_PLAYBACK_STEP_DAYS`.
    """

    environment: EnvName = Field(default="dev", alias="KANTAI_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    data_path: str = Field(default="data.yml", alias="KANTAI_DATA")
    playback_step_days: int = Field(default=1, ge=1, alias="KANTAI_PLAYBACK_STEP_DAYS")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("KANTAI_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "kantai") -> logging.Logger:
    """Return a process-global logger configured to the current log level.

    The level is applied when the logger is fetched. Module-level loggers keep
    the level that was in effect at import time.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
