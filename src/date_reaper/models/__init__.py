"""Data models for date-reaper."""

from __future__ import annotations

import enum


class EolStatus(enum.Enum):
    EOL = "eol"
    NOT_EOL = "not-eol"


class SupportKind(enum.Enum):
    NO_SUPPORT = "no-support"
    SUPPORT_UNTIL = "support-until"
    UNKNOWN = "unknown"
