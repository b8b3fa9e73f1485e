"""Tests for the single-check gate policy."""

import pytest

from date_reaper.core.policy import CheckPolicy, run_check
from date_reaper.exceptions import EOLDetected, LookupFailed, UnsupportedRequested, VersionNotFound
from date_reaper.models import EolStatus

TODAY = "2025-01-01"


class TestRunCheck:
    def test_live_version_passes_by_default(self, fake_registry):
        result = run_check("node", "20", client=fake_registry, today=TODAY)
        assert result.status == EolStatus.NOT_EOL

    def test_live_version_fails_when_unsupported_requested(self, fake_registry):
        policy = CheckPolicy(fail_on_unsupported=True)

        with pytest.raises(UnsupportedRequested) as exc_info:
            run_check("node", "20", policy, client=fake_registry, today=TODAY)

        assert str(exc_info.value) == "Node 20 is not supported anymore"
        assert exc_info.value.exit_code == 4

    @pytest.mark.parametrize("policy", [CheckPolicy(), CheckPolicy(fail_on_unsupported=True), CheckPolicy(True, True)])
    def test_eol_always_fails(self, fake_registry, policy):
        with pytest.raises(EOLDetected) as exc_info:
            run_check("node", "14", policy, client=fake_registry, today=TODAY)

        error = exc_info.value
        assert error.exit_code == 3
        assert error.result.eol == "2024-04-30"
        assert str(error) == "Node 14 is EOL since 2024-04-30. Support ended on: No Support"

    def test_missing_version_tolerated_by_default(self, fake_registry):
        assert run_check("node", "99", client=fake_registry, today=TODAY) is None

    def test_missing_version_fails_when_requested(self, fake_registry):
        with pytest.raises(VersionNotFound):
            run_check("node", "99", CheckPolicy(fail_on_missing=True), client=fake_registry, today=TODAY)

    def test_lookup_failure_always_propagates(self, fake_registry):
        with pytest.raises(LookupFailed):
            run_check("unknown-product", "1", CheckPolicy(), client=fake_registry, today=TODAY)

    def test_distinct_exit_codes(self):
        assert EOLDetected.exit_code != UnsupportedRequested.exit_code
        assert LookupFailed.exit_code == VersionNotFound.exit_code == 1

    def test_tolerated_missing_version_is_only_logged_at_debug(self, fake_registry, caplog):
        with caplog.at_level("DEBUG", logger="date_reaper"):
            run_check("node", "99", client=fake_registry, today=TODAY)

        assert [r.levelname for r in caplog.records if "99" in r.getMessage()] == ["DEBUG"]
