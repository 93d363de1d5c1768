"""Summary: Include parameter vocabulary accepted by lookup requests.
Why: Keep the partition of include tokens in one place for the entity catalog.
"""

from __future__ import annotations

from typing import Final

from .kinds import RELATABLE_ENTITY_TYPES

# Usable with (almost) every entity kind. The user-* variants return the data
# submitted by the authenticated user.
MISC_INCLUDES: Final[tuple[str, ...]] = (
    "aliases",
    "annotation",
    "tags",
    "genres",
    "ratings",
    "user-tags",
    "user-genres",
    "user-ratings",
)


def rel_include(entity_type: str) -> str:
    """Return the include which loads relationships to ``entity_type``."""

    return f"{entity_type}-rels"


REL_INCLUDES: Final[tuple[str, ...]] = tuple(rel_include(kind) for kind in RELATABLE_ENTITY_TYPES)

# Control how much data about linked entities is loaded.
SUB_QUERY_INCLUDES: Final[tuple[str, ...]] = (
    "discids",
    "media",
    "isrcs",
    "artist-credits",
)

# Relationships of entities nested inside a release.
LEVEL_REL_INCLUDES: Final[tuple[str, ...]] = (
    "recording-level-rels",
    "release-group-level-rels",
)

LINKED_ENTITY_INCLUDES: Final[tuple[str, ...]] = (
    "artists",
    "collections",
    "labels",
    "recordings",
    "releases",
    "release-groups",
    "user-collections",
    "works",
)

# Only releases where the artist appears on a track but not in the release credit.
VARIOUS_ARTISTS_INCLUDE: Final[str] = "various-artists"


__all__ = [
    "LEVEL_REL_INCLUDES",
    "LINKED_ENTITY_INCLUDES",
    "MISC_INCLUDES",
    "REL_INCLUDES",
    "SUB_QUERY_INCLUDES",
    "VARIOUS_ARTISTS_INCLUDE",
    "rel_include",
]
