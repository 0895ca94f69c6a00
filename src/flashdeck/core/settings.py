"""Centralized application configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`. Defaults to WARNING
        because stdout carries the interactive session.
    shuffle_seed : Optional[int]
        Seed for the quiz shuffle; maps from `FLASHDECK_SEED`. Unset means
        a fresh, unpredictable order every session.
    file_encoding : str
        Text encoding for snapshot and log files; maps from
        `FLASHDECK_FILE_ENCODING`.
    """

    log_level: LogLevelName = Field(default="WARNING", alias="LOG_LEVEL")
    shuffle_seed: int | None = Field(default=None, alias="FLASHDECK_SEED")
    file_encoding: str = Field(default="utf-8", alias="FLASHDECK_FILE_ENCODING")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.WARNING)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Kept behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    return Settings()


# Ready-to-use instance (import-time read of env / .env files).
settings: Settings = load_settings()


def get_logger(name: str = "flashdeck") -> logging.Logger:
    """Return a process-global logger configured to the current log level.

    The level is re-read through `load_settings()` on every call, so a test
    that clears the cache sees its override applied.
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
