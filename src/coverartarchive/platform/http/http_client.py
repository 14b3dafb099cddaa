"""Where: src/coverartarchive/platform/http/http_client.py
What: HTTP seam used by the Cover Art Archive client plus a requests adapter.
Why: Keep transport concerns injectable so lookups can run against fakes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, cast

import requests

from coverartarchive.config.settings import CONNECT_TIMEOUT_SECONDS, READ_TIMEOUT_SECONDS
from coverartarchive.domain.errors import TransportError
from coverartarchive.platform.logging import logger


@dataclass(slots=True)
class HTTPResponse:
    """Represent the parts of an HTTP response the client consumes."""

    status: int
    headers: dict[str, str] = field(default_factory=lambda: {})
    text: str = ""


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to perform a GET request."""

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        ...


class RequestsHTTPClient:
    """Perform GET requests through ``requests``.

    Redirects are followed. Any ``requests`` failure (DNS, TLS, timeout) is
    re-raised as ``TransportError``; HTTP status codes are returned untouched.
    """

    def __init__(
        self,
        connect_timeout: float = CONNECT_TIMEOUT_SECONDS,
        read_timeout: float = READ_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout: tuple[float, float] = (connect_timeout, read_timeout)
        self._session: requests.Session | None = session

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        try:
            if self._session is not None:
                response = self._session.get(url, headers=dict(headers), timeout=self._timeout)
            else:
                response = requests.get(url, headers=dict(headers), timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Cover Art Archive request error: %s", exc)
            raise TransportError(f"GET {url} failed: {exc}") from exc

        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}
        return HTTPResponse(
            status=int(response.status_code),
            headers=response_headers,
            text=response.text,
        )


__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
]
