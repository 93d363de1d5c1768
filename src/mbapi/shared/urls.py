"""Summary: Extract entity references from MusicBrainz URLs.
Why: Users paste website links; lookups need the entity type and MBID.
"""

from __future__ import annotations

import re
from typing import Final

from mbapi.features.schema.catalog import ENTITY_TYPES

# Longer tokens first so "release-group" wins over "release".
_ENTITY_ALTERNATIVES: Final[str] = "|".join(
    re.escape(entity_type) for entity_type in sorted(ENTITY_TYPES, key=len, reverse=True)
)
_ENTITY_URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?<![\w-])({_ENTITY_ALTERNATIVES})/([0-9a-f-]{{36}})(?:$|/|\?|#)"
)


def extract_entity_from_url(url: str) -> tuple[str, str] | None:
    """Return ``(entity_type, mbid)`` for a MusicBrainz entity URL.

    The URL can be incomplete and have additional path components and query
    parameters. ``None`` is returned when no entity reference is found.
    """

    match = _ENTITY_URL_PATTERN.search(url)
    if match is None:
        return None
    return match.group(1), match.group(2)


__all__ = ["extract_entity_from_url"]
