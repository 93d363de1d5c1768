"""Summary: Parse track number ranges such as ``2:7-13`` or side prefixes like ``A``.
Why: Track selections reference media and track numbers in a compact notation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_TRACK_RANGE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:(?P<medium>\d+):)?(?:(?P<first>[^-]+)-(?P<last>[^-]+)|(?P<prefix>.*))"
)


@dataclass(frozen=True, slots=True)
class TrackRange:
    """Range of track numbers, optionally restricted to one medium.

    Attributes:
        medium: Medium position.
        first: Number of the first track in the range.
        last: Number of the last track in the range.
        prefix: Prefix shared by the track numbers, exclusive with ``first``
            and ``last``.
    """

    medium: int | None = None
    first: str | None = None
    last: str | None = None
    prefix: str | None = None


def parse_track_range(text: str) -> TrackRange:
    """Parse a track range or prefix, optionally preceded by a medium number and colon.

    Raises:
        ValueError: If ``text`` cannot be parsed.
    """

    match = _TRACK_RANGE_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"Invalid track range: {text!r}")
    medium = match.group("medium")
    return TrackRange(
        medium=int(medium) if medium else None,
        first=match.group("first"),
        last=match.group("last"),
        prefix=match.group("prefix"),
    )


__all__ = ["TrackRange", "parse_track_range"]
