"""Where: src/mbapi/platform/musicbrainz/errors.py
What: Exception hierarchy for MusicBrainz WS2 requests.
Why: Let callers tell invalid input, server failures and local throttling apart.
"""

from __future__ import annotations

from typing import Any, Final

DEFAULT_ERROR_STATUS: Final[int] = 500


class MusicBrainzError(Exception):
    """Base class of all errors raised by this package."""


class InvalidMbidError(MusicBrainzError, ValueError):
    """Raised before dispatch when an identifier is not a valid MBID."""

    def __init__(self, mbid: str) -> None:
        super().__init__(f"{mbid} is not a valid MBID")
        self.mbid: str = mbid


class InvalidEntityTypeError(MusicBrainzError, ValueError):
    """Raised before dispatch when an entity type token is not supported."""

    def __init__(self, entity_type: str, allowed: tuple[str, ...] = ()) -> None:
        message = f"Unsupported entity type '{entity_type}'"
        if allowed:
            message += f". Valid options: {', '.join(allowed)}"
        super().__init__(message)
        self.entity_type: str = entity_type


class ApiError(MusicBrainzError):
    """Error response returned by the MusicBrainz API.

    Attributes:
        status_code: HTTP status of the response, 500 when unknown.
        help: Optional usage hint sent along with the error message.
    """

    def __init__(self, message: str, status_code: int | None = None, *, help_text: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.status_code: int = status_code or DEFAULT_ERROR_STATUS
        self.help: str | None = help_text


class RateLimitQueueFullError(MusicBrainzError):
    """Raised immediately when too many callers are waiting for the rate limiter."""

    def __init__(self, max_queue_size: int) -> None:
        super().__init__(f"Rate limit queue is full ({max_queue_size} pending requests)")
        self.max_queue_size: int = max_queue_size


def is_error_response(data: Any) -> bool:
    """Return True when a decoded body has the shape ``{"error": str, "help"?: str}``."""

    return isinstance(data, dict) and isinstance(data.get("error"), str)


__all__ = [
    "ApiError",
    "DEFAULT_ERROR_STATUS",
    "InvalidEntityTypeError",
    "InvalidMbidError",
    "MusicBrainzError",
    "RateLimitQueueFullError",
    "is_error_response",
]
