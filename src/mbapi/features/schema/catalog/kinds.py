"""Summary: Entity kind vocabulary of the MusicBrainz web service.
Why: Central list of entity type tokens, their plural endpoints and relationship keys.
"""

from __future__ import annotations

from typing import Final

ENTITY_TYPES: Final[tuple[str, ...]] = (
    "area",
    "artist",
    "collection",
    "event",
    "genre",
    "instrument",
    "label",
    "place",
    "recording",
    "release",
    "release-group",
    "series",
    "url",
    "work",
)

# Kinds that can be the target of a relationship.
RELATABLE_ENTITY_TYPES: Final[tuple[str, ...]] = tuple(
    entity_type for entity_type in ENTITY_TYPES if entity_type != "collection"
)

# Kinds that can be stored in a collection.
COLLECTABLE_ENTITY_TYPES: Final[tuple[str, ...]] = (
    "area",
    "artist",
    "event",
    "instrument",
    "label",
    "place",
    "recording",
    "release",
    "release-group",
    "series",
    "work",
)

_IRREGULAR_PLURALS: Final[dict[str, str]] = {"series": "series"}


def entity_plural(entity_type: str) -> str:
    """Return the plural form used by browse endpoints and collection contents."""

    return _IRREGULAR_PLURALS.get(entity_type, f"{entity_type}s")


def snake_case(entity_type: str) -> str:
    """Convert a kebab-case entity token into the snake-case key used in payloads."""

    return entity_type.replace("-", "_")


__all__ = [
    "COLLECTABLE_ENTITY_TYPES",
    "ENTITY_TYPES",
    "RELATABLE_ENTITY_TYPES",
    "entity_plural",
    "snake_case",
]
