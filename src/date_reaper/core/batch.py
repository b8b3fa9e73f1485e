"""Check every variant of a chunk against the registry."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from date_reaper.core.evaluator import evaluate, today_str
from date_reaper.core.registry import RegistryClient
from date_reaper.exceptions import DateReaperError
from date_reaper.models.chunk import Variant, VariantReport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def evaluate_chunk(
    tool: str,
    variants: Iterable[Variant],
    client: RegistryClient | None = None,
    today: str | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[VariantReport]:
    """Evaluate each variant in order, one report per variant.

    Per-variant failures are recorded in the report and never stop the
    loop.
    """
    variants = list(variants)
    if client is None:
        with RegistryClient() as owned:
            return evaluate_chunk(tool, variants, client=owned, today=today, on_progress=on_progress)

    today = today or today_str()
    reports: list[VariantReport] = []
    total = len(variants)

    for i, variant in enumerate(variants, 1):
        if on_progress:
            on_progress(i, total, variant.name)
        try:
            result = evaluate(tool, variant.name, client=client, today=today)
        except (DateReaperError, ValueError) as e:
            logger.info("Error checking version %s: %s", variant.name, e)
            reports.append(VariantReport(variant=variant, error=e))
            continue
        reports.append(VariantReport(variant=variant, result=result))

    return reports
