"""Runtime settings for talking to the word-finding service."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.datamuse.com/words"
# httpx's own default
DEFAULT_TIMEOUT = 5.0

BASE_URL_ENV = "ONELOOK_SEARCH_BASE_URL"
TIMEOUT_ENV = "ONELOOK_SEARCH_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def _env_timeout(default: float) -> float:
    raw = os.environ.get(TIMEOUT_ENV)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not a number", TIMEOUT_ENV, raw)
        return default
    if value <= 0:
        LOGGER.warning("Ignoring %s=%r: must be positive", TIMEOUT_ENV, raw)
        return default
    return value


def load_settings(base_url: Optional[str] = None, timeout: Optional[float] = None) -> Settings:
    """Resolve settings: explicit arguments, then environment, then defaults."""

    if base_url is None:
        base_url = os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    if timeout is None:
        timeout = _env_timeout(DEFAULT_TIMEOUT)
    return Settings(base_url=base_url.rstrip("?"), timeout=timeout)
