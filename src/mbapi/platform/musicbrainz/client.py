"""Where: src/mbapi/platform/musicbrainz/client.py
What: Facade dispatching MusicBrainz WS2 lookups.
Why: Combine request building, throttling and error classification behind one API.

This module delegates specialised responsibilities to smaller helpers:
- ``http_client`` performs the actual GET request
- ``rate_limit`` serialises requests and adapts to quota headers
- ``mbid`` rejects malformed identifiers before dispatch
- ``user_agent`` centralises etiquette for outbound requests
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final
from urllib.parse import urljoin

from mbapi.config.settings import MB_API_URL, MB_MAX_QUEUE_SIZE, MB_TIMEOUT
from mbapi.features.schema import DEFAULT_REGISTRY, SchemaRegistry, project
from mbapi.features.schema.catalog import COLLECTABLE_ENTITY_TYPES, ENTITY_TYPES, entity_plural
from mbapi.platform.logging import logger

from .errors import ApiError, InvalidEntityTypeError, is_error_response
from .http_client import HTTPClient, MusicBrainzHTTPClient
from .mbid import assert_mbid
from .rate_limit import RateLimiter
from .user_agent import AppInfo, resolve_user_agent

QueryValue = str | int | None

_ACCEPT: Final[str] = "application/json"


class MusicBrainzClient:
    """MusicBrainz WS2 client returning decoded JSON documents.

    The shape of a lookup result depends on the requested include parameters;
    ``mbapi.features.schema`` describes that shape and ``lookup_projected``
    applies it to the decoded document.

    Args:
        api_url: Root URL of the API, for example the beta server.
        app: Application identity used for the ``User-Agent`` header.
        max_queue_size: Reject callers immediately once this many requests
            are running or waiting. ``None`` means unbounded.
        timeout: Network timeout in seconds for the default HTTP adapter.
        http_client: Replacement HTTP adapter.
        rate_limiter: Replacement or shared rate limiter.
        registry: Schema arena used by ``lookup_projected``.
    """

    def __init__(
        self,
        api_url: str | None = None,
        app: AppInfo | None = None,
        *,
        max_queue_size: int | None = None,
        timeout: float | None = None,
        http_client: HTTPClient | None = None,
        rate_limiter: RateLimiter | None = None,
        registry: SchemaRegistry | None = None,
    ) -> None:
        base = api_url or MB_API_URL
        self.api_url: str = base if base.endswith("/") else f"{base}/"
        self.user_agent: str = resolve_user_agent(app)
        self._headers: dict[str, str] = {"Accept": _ACCEPT, "User-Agent": self.user_agent}
        self._http: HTTPClient = http_client or MusicBrainzHTTPClient(
            timeout=timeout if timeout is not None else MB_TIMEOUT
        )
        self.rate_limiter: RateLimiter = rate_limiter or RateLimiter(
            max_queue_size if max_queue_size is not None else MB_MAX_QUEUE_SIZE
        )
        self._registry: SchemaRegistry = registry or DEFAULT_REGISTRY

    def lookup(
        self,
        entity_type: str,
        mbid: str,
        *,
        inc: str | Iterable[str] | None = None,
        status: str | Iterable[str] | None = None,
        release_type: str | Iterable[str] | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any]:
        """Perform a lookup request for the given entity.

        Args:
            entity_type: Entity type token such as ``"release-group"``.
            mbid: MusicBrainz identifier of the entity.
            inc: Include parameters requesting additional data.
            status: Only expand nested releases with these statuses.
            release_type: Only expand nested release groups (and their
                releases) of these types.
            limit: Passed through to the server.
            offset: Passed through to the server.

        Returns:
            dict[str, Any]: The decoded entity document.

        Raises:
            InvalidEntityTypeError: Unknown entity type, nothing was sent.
            InvalidMbidError: Malformed identifier, nothing was sent.
            RateLimitQueueFullError: Too many requests are queued already.
            ApiError: The server answered with an error document.
        """

        _check_entity_type(entity_type, ENTITY_TYPES)
        assert_mbid(mbid)
        query: dict[str, QueryValue] = {
            "inc": _join_values(inc, "+"),
            "status": _join_values(status, "|", lower=True),
            "type": _join_values(release_type, "|", lower=True),
            "limit": limit,
            "offset": offset,
        }
        return self.get(f"{entity_type}/{mbid}", query)

    def lookup_projected(
        self,
        entity_type: str,
        mbid: str,
        *,
        inc: str | Iterable[str] | None = None,
        status: str | Iterable[str] | None = None,
        release_type: str | Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Like ``lookup`` but trims the result to the fields ``inc`` entitles."""

        document = self.lookup(entity_type, mbid, inc=inc, status=status, release_type=release_type)
        return project(entity_type, document, inc, registry=self._registry)

    def lookup_collection_contents(self, mbid: str, content_type: str) -> dict[str, Any]:
        """Look up the collection with the given MBID, including its contents."""

        _check_entity_type(content_type, COLLECTABLE_ENTITY_TYPES)
        assert_mbid(mbid)
        return self.get("/".join(["collection", mbid, entity_plural(content_type)]))

    def get(self, endpoint: str, query: Mapping[str, QueryValue] | None = None) -> Any:
        """Fetch JSON data from the given ``GET`` endpoint.

        This method should only be called directly for unsupported endpoints.
        """

        url = urljoin(self.api_url, endpoint)
        params = {key: str(value) for key, value in (query or {}).items() if value is not None}
        logger.debug(
            "MusicBrainz request",
            extra={"request_event": "request.start", "endpoint": endpoint},
        )

        with self.rate_limiter.slot():
            result = self._http.get_json(url, params, self._headers)
            self.rate_limiter.update(result.headers)

        data = result.json()
        if is_error_response(data):
            logger.warning(
                "MusicBrainz API error: %s",
                data["error"],
                extra={"request_event": "request.api_error", "endpoint": endpoint, "status_code": result.status},
            )
            help_text = data.get("help")
            raise ApiError(
                data["error"],
                result.status,
                help_text=help_text if isinstance(help_text, str) else None,
            )

        logger.debug(
            "MusicBrainz response",
            extra={"request_event": "request.success", "endpoint": endpoint, "status_code": result.status},
        )
        return data


def _check_entity_type(entity_type: str, allowed: tuple[str, ...]) -> None:
    if entity_type not in allowed:
        raise InvalidEntityTypeError(entity_type, allowed)


def _join_values(values: str | Iterable[str] | None, separator: str, *, lower: bool = False) -> str | None:
    """Join query values, dropping duplicates while keeping their order."""

    if values is None:
        return None
    items = [values] if isinstance(values, str) else list(values)
    seen: dict[str, None] = {}
    for item in items:
        token = item.strip().lower() if lower else item.strip()
        if token:
            seen.setdefault(token, None)
    return separator.join(seen) or None


__all__ = [
    "MusicBrainzClient",
    "QueryValue",
]
