"""Pass/fail policy for a single (name, version) check."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from date_reaper.core.evaluator import evaluate
from date_reaper.core.registry import RegistryClient
from date_reaper.exceptions import EOLDetected, UnsupportedRequested, VersionNotFound
from date_reaper.models.release import EvaluationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckPolicy:
    fail_on_missing: bool = False
    fail_on_unsupported: bool = False


def run_check(
    name: str,
    cycle: str,
    policy: CheckPolicy | None = None,
    client: RegistryClient | None = None,
    today: str | None = None,
) -> EvaluationResult | None:
    """Evaluate one version and apply the gate policy.

    Returns the result when the version passes, or None when it is
    unknown to the registry and missing versions are tolerated. EOL
    always raises EOLDetected; a live version raises
    UnsupportedRequested only when the policy asks for it.
    """
    policy = policy or CheckPolicy()
    try:
        result = evaluate(name, cycle, client=client, today=today)
    except VersionNotFound as e:
        if policy.fail_on_missing:
            raise
        logger.debug("%s", e)
        return None

    if result.is_eol:
        raise EOLDetected(result)
    if policy.fail_on_unsupported:
        raise UnsupportedRequested(name, cycle)
    return result
