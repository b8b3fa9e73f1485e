"""Pytest configuration and shared fixtures for all tests."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from date_reaper.exceptions import LookupFailed
from date_reaper.models.release import ReleaseRecord

NODE_RECORDS = [
    {"cycle": "22", "releaseDate": "2024-04-24", "eol": "2027-04-30", "support": "2025-10-21", "lts": True},
    {"cycle": "20", "releaseDate": "2023-04-18", "eol": "2026-04-30", "support": "2025-10-01", "lts": True},
    {"cycle": "19", "releaseDate": "2022-10-18", "eol": "2023-06-01", "support": "2023-04-01", "lts": False},
    {"cycle": "14", "releaseDate": "2020-04-21", "eol": "2024-04-30", "support": False, "lts": True},
]


class FakeRegistry:
    """Stand-in for RegistryClient keyed by product name.

    A value may be a list of raw record dicts or an exception to raise.
    """

    def __init__(self, products: dict):
        self.products = products
        self.calls: list[str] = []

    def fetch_releases(self, name: str) -> list[ReleaseRecord]:
        self.calls.append(name)
        if name not in self.products:
            raise LookupFailed(name, "server returned status 404")
        value = self.products[name]
        if isinstance(value, Exception):
            raise value
        return [ReleaseRecord.from_dict(d) for d in value]


@pytest.fixture
def fake_registry():
    return FakeRegistry({"node": NODE_RECORDS})


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    return Mock(spec=requests.Session)


def _make_response(status_code: int = 200, payload=None, json_error: Exception | None = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Factory for mock requests responses."""
    return _make_response


class ClosingRegistry(FakeRegistry):
    """FakeRegistry that records context-manager closes, for default-client tests."""

    instances: list["ClosingRegistry"] = []

    def __init__(self):
        super().__init__({"node": NODE_RECORDS})
        self.closed = False
        ClosingRegistry.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


@pytest.fixture
def closing_registry():
    ClosingRegistry.instances = []
    yield ClosingRegistry
    ClosingRegistry.instances = []
