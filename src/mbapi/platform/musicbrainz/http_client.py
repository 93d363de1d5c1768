"""Where: src/mbapi/platform/musicbrainz/http_client.py
What: HTTP adapter performing single JSON GET requests for MusicBrainz WS2.
Why: Decouple network concerns from request building and error classification.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests
from requests.structures import CaseInsensitiveDict


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the MusicBrainz client."""

    status: int
    headers: Mapping[str, str] = field(default_factory=lambda: CaseInsensitiveDict())
    data: Any = None
    decode_error: ValueError | None = None

    def json(self) -> Any:
        """Return the decoded body or re-raise the decoding failure."""

        if self.decode_error is not None:
            raise self.decode_error
        return self.data


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch JSON payloads."""

    def get_json(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> HTTPResult:
        ...


class MusicBrainzHTTPClient:
    """Perform one GET request with ``requests`` and decode the JSON body.

    Error statuses are not raised here: MusicBrainz sends its error messages
    as JSON bodies, which the client classifies. Network and decoding
    failures propagate unchanged and nothing is retried.

    Args:
        timeout: Seconds to wait for the server, ``None`` waits indefinitely.
        session: Optional session reused across requests.
    """

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None) -> None:
        self._timeout: float | None = timeout
        self._session: requests.Session | None = session

    def get_json(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> HTTPResult:
        getter = self._session.get if self._session is not None else requests.get
        response = getter(url, params=dict(params), headers=dict(headers), timeout=self._timeout)
        status = int(response.status_code)
        response_headers = CaseInsensitiveDict()
        for key, value in response.headers.items():
            response_headers[str(key)] = str(value)
        try:
            data = response.json()
        except requests.JSONDecodeError as exc:
            # Headers still matter to the rate limiter, so the failure is deferred.
            return HTTPResult(status=status, headers=response_headers, decode_error=exc)
        return HTTPResult(status=status, headers=response_headers, data=data)


__all__ = [
    "HTTPClient",
    "HTTPResult",
    "MusicBrainzHTTPClient",
]
