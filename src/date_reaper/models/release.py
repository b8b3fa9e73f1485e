"""Release lifecycle models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from date_reaper.models import EolStatus, SupportKind

NO_SUPPORT_LABEL = "No Support"
UNKNOWN_LABEL = "Unknown"


@dataclass(frozen=True)
class Support:
    """Resolved form of the registry's polymorphic ``support`` field."""

    kind: SupportKind = SupportKind.UNKNOWN
    until: str = ""

    @classmethod
    def from_raw(cls, value: Any) -> Support:
        # bool must be tested before anything else: True is not a date
        if value is False:
            return cls(kind=SupportKind.NO_SUPPORT)
        if isinstance(value, str):
            return cls(kind=SupportKind.SUPPORT_UNTIL, until=value)
        return cls(kind=SupportKind.UNKNOWN)

    @property
    def display(self) -> str:
        if self.kind == SupportKind.SUPPORT_UNTIL:
            return self.until
        if self.kind == SupportKind.NO_SUPPORT:
            return NO_SUPPORT_LABEL
        return UNKNOWN_LABEL


def _as_str(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


@dataclass(frozen=True)
class ReleaseRecord:
    cycle: str
    eol: str = ""
    support: Support = field(default_factory=Support)
    release_date: str = ""
    latest: str = ""
    latest_release_date: str = ""
    lts: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> ReleaseRecord:
        """Build a record from one element of the registry's JSON array.

        Only ``cycle`` and ``eol`` take part in decisions; the remaining
        fields are informational and parsed leniently.
        """
        return cls(
            cycle=d["cycle"],
            eol=d.get("eol") or "",
            support=Support.from_raw(d.get("support")),
            release_date=_as_str(d.get("releaseDate")),
            latest=_as_str(d.get("latest")),
            latest_release_date=_as_str(d.get("latestReleaseDate")),
            lts=bool(d.get("lts", False)),
        )


@dataclass(frozen=True)
class EvaluationResult:
    name: str
    cycle: str
    status: EolStatus
    eol: str
    support: Support

    @property
    def is_eol(self) -> bool:
        return self.status == EolStatus.EOL

    @property
    def support_display(self) -> str:
        return self.support.display

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.cycle,
            "status": self.status.value,
            "eol": self.eol,
            "support": self.support_display,
        }
