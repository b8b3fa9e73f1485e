"""Match a requested cycle against registry records and classify its EOL state."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from date_reaper.core.registry import RegistryClient
from date_reaper.exceptions import VersionNotFound
from date_reaper.models import EolStatus
from date_reaper.models.release import EvaluationResult, ReleaseRecord

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def today_str() -> str:
    """Today's local date in the registry's zero-padded ISO form."""
    return date.today().strftime(DATE_FORMAT)


def find_cycle(records: Iterable[ReleaseRecord], cycle: str) -> ReleaseRecord | None:
    """Return the first record whose cycle equals ``cycle`` exactly."""
    for record in records:
        if record.cycle == cycle:
            return record
    return None


def classify(eol: str, today: str) -> EolStatus:
    """EOL unless the end-of-life date lies strictly after ``today``.

    Both sides are YYYY-MM-DD, so string order is date order.
    """
    if eol > today:
        return EolStatus.NOT_EOL
    return EolStatus.EOL


def evaluate(
    name: str,
    cycle: str,
    client: RegistryClient | None = None,
    today: str | None = None,
) -> EvaluationResult:
    """Look up ``name`` and classify release ``cycle``.

    Raises LookupFailed from the registry and VersionNotFound when no
    record carries the requested cycle.
    """
    if not name:
        raise ValueError("software name must not be empty")
    if not cycle:
        raise ValueError("version must not be empty")

    if client is None:
        with RegistryClient() as owned:
            records = owned.fetch_releases(name)
    else:
        records = client.fetch_releases(name)

    record = find_cycle(records, cycle)
    if record is None:
        raise VersionNotFound(name, cycle)

    today = today or today_str()
    status = classify(record.eol, today)
    logger.debug("%s %s: eol=%s today=%s -> %s", name, cycle, record.eol, today, status.value)

    return EvaluationResult(
        name=name,
        cycle=cycle,
        status=status,
        eol=record.eol,
        support=record.support,
    )
