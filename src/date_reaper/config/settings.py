"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_API_BASE_URL = "https://endoflife.date/api"
DEFAULT_TIMEOUT = 10.0  # seconds


def _default_api_base_url() -> str:
    return os.environ.get("DATE_REAPER_API_URL", "").rstrip("/") or DEFAULT_API_BASE_URL


def _default_timeout() -> float:
    """Return the registry request timeout.

    Reads DATE_REAPER_TIMEOUT; unparsable or non-positive values fall back
    to the default so a typo never disables the deadline.
    """
    raw = os.environ.get("DATE_REAPER_TIMEOUT", "")
    if raw:
        try:
            value = float(raw)
        except ValueError:
            return DEFAULT_TIMEOUT
        if value > 0:
            return value
    return DEFAULT_TIMEOUT


def _default_log_level() -> str:
    return os.environ.get("DATE_REAPER_LOG_LEVEL", "").upper() or "WARNING"


@dataclass
class Settings:
    api_base_url: str = field(default_factory=_default_api_base_url)
    request_timeout: float = field(default_factory=_default_timeout)
    user_agent: str = "date-reaper-cli"
    default_output: str = "table"  # "table", "json" or "yaml"
    log_level: str = field(default_factory=_default_log_level)


# Global singleton
settings = Settings()
