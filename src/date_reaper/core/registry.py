"""endoflife.date API wrapper."""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from date_reaper.config.settings import settings
from date_reaper.exceptions import LookupFailed
from date_reaper.models.release import ReleaseRecord

logger = logging.getLogger(__name__)


class RegistryClient:
    """Thin wrapper that fetches the release records of one product."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session = session
        self._owns_session = session is None

    def __enter__(self) -> RegistryClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        """Close the session if this client created it; injected sessions belong to the caller."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def product_url(self, name: str) -> str:
        return f"{self.base_url}/{quote(name, safe='')}.json"

    def fetch_releases(self, name: str) -> list[ReleaseRecord]:
        """Return the product's release records in registry order.

        Every failure mode (transport, status, decoding, shape) surfaces
        as LookupFailed.
        """
        url = self.product_url(name)
        logger.debug("Fetching release records for %s from %s", name, url)
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": settings.user_agent},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise LookupFailed(name, f"request timed out after {self.timeout:g}s") from None
        except requests.exceptions.RequestException as e:
            raise LookupFailed(name, str(e)) from e

        if response.status_code != 200:
            raise LookupFailed(name, f"server returned status {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise LookupFailed(name, f"invalid JSON in response: {e}") from e

        records = _parse_records(name, payload)
        logger.debug("Registry returned %d record(s) for %s", len(records), name)
        return records


def _parse_records(name: str, payload: object) -> list[ReleaseRecord]:
    if not isinstance(payload, list):
        raise LookupFailed(name, f"expected a JSON array, got {type(payload).__name__}")

    records: list[ReleaseRecord] = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise LookupFailed(name, f"record #{i + 1} is not an object")
        if not isinstance(entry.get("cycle"), str):
            raise LookupFailed(name, f"record #{i + 1} has no string 'cycle'")
        eol = entry.get("eol")
        if eol is not None and not isinstance(eol, str):
            raise LookupFailed(name, f"record #{i + 1} ({entry['cycle']}) has a non-date 'eol': {eol!r}")
        records.append(ReleaseRecord.from_dict(entry))
    return records
