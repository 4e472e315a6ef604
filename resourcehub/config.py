"""Application-wide configuration and start-up."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

VERSION = "0.1.0"

DEFAULT_API_URL = "https://api.example.com"

LOG_LEVEL_ENV = "RESOURCEHUB_LOG"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Settings shared by the API client and the services built on it."""

    api_url: str = DEFAULT_API_URL
    api_key: str | None = None
    timeout: float = 30.0
    max_retries: int = 3


def create_config(api_url: str | None = None, api_key: str | None = None) -> Config:
    """Return the default configuration with the given overrides applied."""
    config = Config()
    if api_url is not None:
        config.api_url = api_url
    if api_key is not None:
        config.api_key = api_key
    return config


def _level_from_environment() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "ERROR").strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.ERROR


def initialize() -> int:
    """Set up logging from the environment and announce the library version.

    The level is read from the ``RESOURCEHUB_LOG`` variable and defaults to
    errors only. Returns the level that was applied.
    """
    level = _level_from_environment()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level)
    logger.info("Application initialized, version: %s", VERSION)
    return level