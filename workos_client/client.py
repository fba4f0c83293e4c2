"""The HTTP client and its builder."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urljoin, urlsplit

import requests

DEFAULT_BASE_URL = "https://api.workos.com"
_VERSION = "0.2.0"
USER_AGENT = f"workos_client/{_VERSION}"


class WorkOsError(Exception):
    """Base class for errors raised while talking to the API."""


class UnauthorizedError(WorkOsError):
    """The API rejected the key (HTTP 401)."""

    def __init__(self) -> None:
        super().__init__("unauthorized")


class ApiError(WorkOsError):
    """The API answered with an error status other than 401."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"request failed with status {status}: {body}")
        self.status = status
        self.body = body


def _normalize_url(base_url: str) -> str:
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid base URL: {base_url!r}")
    if not parts.path:
        return parts._replace(path="/").geturl()
    return parts.geturl()


class WorkOs:
    """A client for the API, holding the key, base URL and HTTP session."""

    def __init__(self, key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self.key = key
        self.base_url = _normalize_url(base_url)
        self.session = requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    @classmethod
    def builder(cls, key: str) -> WorkOsBuilder:
        """Return a builder for a client using ``key``."""
        return WorkOsBuilder(key)

    def url(self, path: str) -> str:
        """Resolve ``path`` against the base URL."""
        return urljoin(self.base_url, path)

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        """Send an authorised request and raise on an error status."""
        try:
            response = self.session.request(
                method,
                self.url(path),
                params=params,
                headers={"Authorization": f"Bearer {self.key}"},
            )
        except requests.RequestException as exc:
            raise WorkOsError(str(exc)) from exc
        if response.status_code == 401:
            raise UnauthorizedError()
        if response.status_code >= 400:
            raise ApiError(response.status_code, response.text)
        return response


class WorkOsBuilder:
    """Configures and builds a :class:`WorkOs` client."""

    def __init__(self, key: str) -> None:
        self._key = key
        self._base_url = _normalize_url(DEFAULT_BASE_URL)

    def base_url(self, base_url: str) -> WorkOsBuilder:
        """Set the API base URL; raises ValueError if it is not a valid URL."""
        self._base_url = _normalize_url(base_url)
        return self

    def key(self, key: str) -> WorkOsBuilder:
        """Set the API key."""
        self._key = key
        return self

    def build(self) -> WorkOs:
        return WorkOs(self._key, self._base_url)