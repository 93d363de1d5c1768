# Path: `src/mbapi/features/schema/catalog/__init__.py`
# Summary: Export the static entity catalog.
# Why: Keep entity data importable apart from the projection algorithms.

from .entities import (
    DEFAULT_REGISTRY,
    ENTITY_KINDS,
    MINIMAL_SCHEMAS,
    EntityKind,
    any_relationship,
    build_registry,
    collection_contents_schema_name,
    get_entity_kind,
    relationship_schema_name,
)
from .includes import (
    LEVEL_REL_INCLUDES,
    LINKED_ENTITY_INCLUDES,
    MISC_INCLUDES,
    REL_INCLUDES,
    SUB_QUERY_INCLUDES,
    VARIOUS_ARTISTS_INCLUDE,
    rel_include,
)
from .kinds import (
    COLLECTABLE_ENTITY_TYPES,
    ENTITY_TYPES,
    RELATABLE_ENTITY_TYPES,
    entity_plural,
    snake_case,
)
from .values import (
    ARTIST_TYPE_IDS,
    DATA_QUALITIES,
    GENDER_IDS,
    RELEASE_GROUP_PRIMARY_TYPE_IDS,
    RELEASE_GROUP_SECONDARY_TYPE_IDS,
    RELEASE_PACKAGING_IDS,
    RELEASE_STATUS_IDS,
    release_group_types,
    release_statuses,
)

__all__ = [
    "ARTIST_TYPE_IDS",
    "DATA_QUALITIES",
    "GENDER_IDS",
    "RELEASE_GROUP_PRIMARY_TYPE_IDS",
    "RELEASE_GROUP_SECONDARY_TYPE_IDS",
    "RELEASE_PACKAGING_IDS",
    "RELEASE_STATUS_IDS",
    "COLLECTABLE_ENTITY_TYPES",
    "DEFAULT_REGISTRY",
    "ENTITY_KINDS",
    "ENTITY_TYPES",
    "EntityKind",
    "LEVEL_REL_INCLUDES",
    "LINKED_ENTITY_INCLUDES",
    "MINIMAL_SCHEMAS",
    "MISC_INCLUDES",
    "RELATABLE_ENTITY_TYPES",
    "REL_INCLUDES",
    "SUB_QUERY_INCLUDES",
    "VARIOUS_ARTISTS_INCLUDE",
    "any_relationship",
    "build_registry",
    "collection_contents_schema_name",
    "entity_plural",
    "get_entity_kind",
    "rel_include",
    "relationship_schema_name",
    "snake_case",
    "release_group_types",
    "release_statuses",
]
