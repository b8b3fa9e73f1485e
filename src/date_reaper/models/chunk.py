"""Batch-check document models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from date_reaper.models.release import EvaluationResult


@dataclass(frozen=True)
class Variant:
    name: str
    args: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> Variant:
        name = d.get("name")
        if name is None or name == "":
            raise ValueError("variant is missing a name")
        args = d.get("args") or {}
        if not isinstance(args, dict):
            raise ValueError(f"variant {name!r} has non-mapping args")
        return cls(
            name=str(name),
            args={str(k): "" if v is None else str(v) for k, v in args.items()},
        )


@dataclass
class Chunk:
    variants: list[Variant] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict | None) -> Chunk:
        if not d:
            return cls()
        raw = d.get("variants") or []
        if not isinstance(raw, list):
            raise ValueError("'variants' must be a list")
        variants = []
        for i, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise ValueError(f"variant #{i + 1} is not a mapping")
            variants.append(Variant.from_dict(entry))
        return cls(variants=variants)


@dataclass
class VariantReport:
    """Outcome of checking one variant: a result or the error that stopped it."""

    variant: Variant
    result: EvaluationResult | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @property
    def message(self) -> str:
        version = self.variant.name
        if self.error is not None or self.result is None:
            return f"Error checking version {version}: {self.error}"
        if self.result.is_eol:
            return (
                f"Version {version} is EOL since {self.result.eol}. "
                f"Support ended on: {self.result.support_display}"
            )
        return f"Version {version} is not EOL yet. It will be EOL on {self.result.eol}."

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"version": self.variant.name, "args": dict(self.variant.args)}
        if self.ok:
            data.update(
                status=self.result.status.value,
                eol=self.result.eol,
                support=self.result.support_display,
            )
        else:
            data.update(status="error", error=str(self.error))
        return data
