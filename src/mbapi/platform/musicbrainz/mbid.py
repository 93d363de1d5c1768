"""Where: src/mbapi/platform/musicbrainz/mbid.py
What: Validate MusicBrainz identifiers.
Why: Reject malformed ids before any request leaves the process.
"""

from __future__ import annotations

import re
from typing import Final

from .errors import InvalidMbidError

_MBID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_mbid(value: object) -> bool:
    """Return True for 36 character UUID strings (8-4-4-4-12 hex groups)."""

    return isinstance(value, str) and _MBID_PATTERN.fullmatch(value) is not None


def assert_mbid(value: str) -> None:
    """Raise ``InvalidMbidError`` unless ``value`` is a valid MBID."""

    if not is_mbid(value):
        raise InvalidMbidError(value)


__all__ = ["assert_mbid", "is_mbid"]
