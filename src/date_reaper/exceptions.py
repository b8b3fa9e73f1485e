"""Custom exceptions for date-reaper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from date_reaper.utils.text import capitalize

if TYPE_CHECKING:
    from date_reaper.models.release import EvaluationResult


class DateReaperError(Exception):
    """Base exception for all date-reaper operations."""

    exit_code = 1


class LookupFailed(DateReaperError):
    """Raised when the release registry cannot be queried or its answer is unusable."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Lookup for {name!r} failed: {reason}")


class VersionNotFound(DateReaperError):
    """Raised when no release record matches the requested cycle."""

    def __init__(self, name: str, cycle: str):
        self.name = name
        self.cycle = cycle
        super().__init__(f"Version {cycle} not found for {name}")


class UnsupportedRequested(DateReaperError):
    """Raised by a single check when the caller asked to fail on unsupported versions."""

    exit_code = 4

    def __init__(self, name: str, cycle: str):
        self.name = name
        self.cycle = cycle
        super().__init__(f"{capitalize(name)} {cycle} is not supported anymore")


class EOLDetected(DateReaperError):
    """Raised by a single check when the version has reached its end of life."""

    exit_code = 3

    def __init__(self, result: EvaluationResult):
        self.result = result
        super().__init__(
            f"{capitalize(result.name)} {result.cycle} is EOL since {result.eol}. "
            f"Support ended on: {result.support_display}"
        )


class ChunkLoadError(DateReaperError):
    """Raised when a chunk document cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error loading chunk file {path}: {reason}")
