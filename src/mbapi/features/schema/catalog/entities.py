"""
Summary: Schemas of all MusicBrainz WS2 entity kinds and their nested records.
Why: Static data driving include collection and projection for lookup results.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from mbapi.features.schema.domain.model import (
    BOOLEAN,
    NEVER,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    ArrayOf,
    Maybe,
    Nullable,
    OneOf,
    Ref,
    Schema,
    SubQuery,
    Switch,
    ValueType,
    sub_query,
)
from mbapi.features.schema.domain.registry import SchemaRegistry
from mbapi.features.schema.usecases.collector import collect_includes

from .includes import REL_INCLUDES, VARIOUS_ARTISTS_INCLUDE, rel_include
from .kinds import COLLECTABLE_ENTITY_TYPES, ENTITY_TYPES, RELATABLE_ENTITY_TYPES, entity_plural, snake_case

# Schema used for an entity of the given kind when it is nested in another one.
MINIMAL_SCHEMAS: Final[dict[str, str]] = {
    "area": "minimal-area",
    "artist": "minimal-artist",
    "event": "minimal-event",
    "genre": "genre",
    "instrument": "minimal-instrument",
    "label": "minimal-label",
    "place": "minimal-place",
    "recording": "minimal-recording",
    "release": "minimal-release",
    "release-group": "minimal-release-group",
    "series": "minimal-series",
    "url": "url",
    "work": "minimal-work",
}

NULLABLE_STRING: Final[ValueType] = Nullable(STRING)
STRINGS: Final[ValueType] = ArrayOf(STRING)
ARTIST_CREDIT: Final[ValueType] = ArrayOf(Ref("artist-credit"))

_DATE_PERIOD: Final[dict[str, ValueType]] = {
    "begin": NULLABLE_STRING,
    "end": NULLABLE_STRING,
    "ended": BOOLEAN,
}


def relationship_schema_name(target_type: str) -> str:
    return f"relationship/{target_type}"


def any_relationship() -> ValueType:
    """Relationship to a target of any relatable kind."""

    return OneOf(tuple(Ref(relationship_schema_name(kind)) for kind in RELATABLE_ENTITY_TYPES))


def _with_rels() -> dict[str, SubQuery]:
    # The target kind of each relationship depends on the rel include that loaded it.
    targets = Switch.of({rel_include(kind): Ref(relationship_schema_name(kind)) for kind in RELATABLE_ENTITY_TYPES})
    return {"relations": sub_query(ArrayOf(targets), *REL_INCLUDES)}


def _with_annotation() -> dict[str, SubQuery]:
    return {"annotation": sub_query(NULLABLE_STRING, "annotation")}


def _value_records() -> list[Schema]:
    return [
        Schema(
            "alias",
            fields={
                "name": STRING,
                "sort-name": STRING,
                "type": NULLABLE_STRING,
                "type-id": NULLABLE_STRING,
                "locale": NULLABLE_STRING,
                "primary": Nullable(BOOLEAN),
                **_DATE_PERIOD,
            },
        ),
        Schema(
            "artist-credit",
            fields={"name": STRING, "artist": Ref("minimal-artist"), "joinphrase": STRING},
        ),
        Schema("user-rating", fields={"value": Nullable(NUMBER)}),
        Schema("rating", fields={"value": Nullable(NUMBER), "votes-count": NUMBER}),
        Schema("user-tag", fields={"name": STRING}),
        Schema("tag", fields={"name": STRING, "count": NUMBER}),
        Schema(
            "genre-tag",
            fields={"id": STRING, "name": STRING, "disambiguation": STRING, "count": NUMBER},
        ),
        Schema(
            "disc-id",
            fields={"id": STRING, "sectors": NUMBER, "offset-count": NUMBER, "offsets": ArrayOf(NUMBER)},
        ),
        Schema("release-event", fields={"date": STRING, "area": Nullable(Ref("minimal-area"))}),
        Schema(
            "label-info",
            fields={"label": Nullable(Ref("minimal-label")), "catalog-number": NULLABLE_STRING},
        ),
        Schema(
            "cover-art-archive",
            fields={
                "count": NUMBER,
                "artwork": BOOLEAN,
                "front": BOOLEAN,
                "back": BOOLEAN,
                "darkened": BOOLEAN,
            },
        ),
        _track_schema("track", recording="minimal-recording"),
        _track_schema("release-track", recording="minimal-recording-with-rels"),
        _medium_schema("medium", track="track"),
        _medium_schema("release-medium", track="release-track"),
    ]


def _track_schema(name: str, *, recording: str) -> Schema:
    return Schema(
        name,
        fields={
            "id": STRING,
            "position": NUMBER,
            "number": STRING,
            "title": STRING,
            "length": Nullable(NUMBER),
        },
        sub_queries={
            "artist-credit": sub_query(ARTIST_CREDIT, "artist-credits"),
            "recording": sub_query(Ref(recording), "recordings"),
        },
    )


def _medium_schema(name: str, *, track: str) -> Schema:
    tracks = ArrayOf(Ref(track))
    return Schema(
        name,
        fields={
            "position": NUMBER,
            "title": STRING,
            "track-count": NUMBER,
            "format": NULLABLE_STRING,
            "format-id": NULLABLE_STRING,
        },
        sub_queries={
            # Track data is missing for an empty medium.
            "track-offset": sub_query(Maybe(NUMBER), "recordings"),
            "pregap": sub_query(Maybe(Ref(track)), "recordings"),
            "tracks": sub_query(Maybe(tracks), "recordings"),
            "data-tracks": sub_query(Maybe(tracks), "recordings"),
            "discs": sub_query(ArrayOf(Ref("disc-id")), "discids"),
        },
    )


def _relationship_schemas() -> list[Schema]:
    schemas: list[Schema] = []
    for kind in RELATABLE_ENTITY_TYPES:
        target_key = snake_case(kind)
        schemas.append(
            Schema(
                relationship_schema_name(kind),
                fields={
                    "target-type": STRING,
                    "type": STRING,
                    "type-id": STRING,
                    "direction": STRING,
                    "ordering-key": Maybe(NUMBER),
                    "attributes": STRINGS,
                    "attribute-values": OBJECT,
                    "attribute-ids": OBJECT,
                    "attribute-credits": Maybe(OBJECT),
                    "source-credit": STRING,
                    "target-credit": STRING,
                    **_DATE_PERIOD,
                    target_key: Ref(MINIMAL_SCHEMAS[kind]),
                },
                discriminator=("target-type", target_key),
            )
        )
    return schemas


def _entity_base() -> Schema:
    """Optional data shared by most entity kinds."""

    return Schema(
        "entity-base",
        fields={"id": STRING},
        sub_queries={
            "aliases": sub_query(Maybe(ArrayOf(Ref("alias"))), "aliases"),
            "rating": sub_query(Maybe(Ref("rating")), "ratings"),
            "user-rating": sub_query(Maybe(Ref("user-rating")), "user-ratings"),
            "tags": sub_query(Maybe(ArrayOf(Ref("tag"))), "tags"),
            "user-tags": sub_query(Maybe(ArrayOf(Ref("user-tag"))), "user-tags"),
            "genres": sub_query(Maybe(ArrayOf(Ref("genre-tag"))), "genres"),
            "user-genres": sub_query(Maybe(ArrayOf(Ref("genre"))), "user-genres"),
        },
    )


def _entity_schemas(*, mirror_server_quirks: bool) -> list[Schema]:
    base = _entity_base()
    minimal_entity = base.extend(
        "minimal-entity",
        fields={
            "name": STRING,
            "disambiguation": STRING,
            "type": NULLABLE_STRING,
            "type-id": NULLABLE_STRING,
        },
    )
    full: dict[str, SubQuery] = {**_with_annotation(), **_with_rels()}
    life_span: dict[str, ValueType] = {"life-span": OBJECT}
    area_or_null = Nullable(Ref("minimal-area"))

    minimal_area = minimal_entity.extend(
        "minimal-area",
        fields={
            "sort-name": STRING,
            "iso-3166-1-codes": Maybe(STRINGS),
            "iso-3166-2-codes": Maybe(STRINGS),
            "iso-3166-3-codes": Maybe(STRINGS),
        },
    )
    area = minimal_area.extend("area", fields=life_span, sub_queries=full)

    minimal_artist = minimal_entity.extend("minimal-artist", fields={"sort-name": STRING})
    artist = minimal_artist.extend(
        "artist",
        fields={
            "gender": NULLABLE_STRING,
            "gender-id": NULLABLE_STRING,
            "area": area_or_null,
            "country": NULLABLE_STRING,
            **life_span,
            "begin-area": area_or_null,
            "begin_area": Maybe(area_or_null),
            "end-area": area_or_null,
            "end_area": Maybe(area_or_null),
            "ipis": STRINGS,
            "isnis": STRINGS,
        },
        sub_queries={
            **full,
            "recordings": sub_query(ArrayOf(Ref("minimal-recording")), "recordings"),
            "releases": sub_query(ArrayOf(Ref("minimal-release")), "releases"),
            "release-groups": sub_query(ArrayOf(Ref("minimal-release-group")), "release-groups"),
            "works": sub_query(ArrayOf(Ref("minimal-work")), "works"),
        },
    )

    minimal_event = minimal_entity.extend(
        "minimal-event",
        fields={"time": STRING, "setlist": STRING, "cancelled": BOOLEAN},
    )
    event = minimal_event.extend("event", fields=life_span, sub_queries=full)

    genre = Schema("genre", fields={"id": STRING, "name": STRING, "disambiguation": STRING})

    minimal_instrument = minimal_entity.extend("minimal-instrument", fields={"description": STRING})
    instrument = minimal_instrument.extend("instrument", sub_queries=full)

    minimal_label = minimal_entity.extend(
        "minimal-label",
        fields={"sort-name": STRING, "label-code": Nullable(NUMBER)},
    )
    label = minimal_label.extend(
        "label",
        fields={
            "country": NULLABLE_STRING,
            "area": area_or_null,
            **life_span,
            "ipis": STRINGS,
            "isnis": STRINGS,
        },
        sub_queries={**full, "releases": sub_query(ArrayOf(Ref("minimal-release")), "releases")},
    )

    minimal_place = minimal_entity.extend(
        "minimal-place",
        fields={"address": STRING, "area": area_or_null, "coordinates": Nullable(OBJECT)},
    )
    place = minimal_place.extend("place", sub_queries=full)

    recording_base = base.extend(
        "recording-base",
        fields={
            "title": STRING,
            "disambiguation": STRING,
            "length": Nullable(NUMBER),
            "first-release-date": Maybe(STRING),
            "video": BOOLEAN,
        },
        sub_queries={"isrcs": sub_query(STRINGS, "isrcs")},
    )
    minimal_recording = recording_base.extend(
        "minimal-recording",
        sub_queries={"artist-credit": sub_query(ARTIST_CREDIT, "artist-credits")},
    )
    minimal_recording_with_rels = minimal_recording.extend(
        "minimal-recording-with-rels",
        sub_queries={"relations": sub_query(ArrayOf(any_relationship()), "recording-level-rels")},
    )
    recording = recording_base.extend(
        "recording",
        sub_queries={
            **full,
            "artist-credit": sub_query(ARTIST_CREDIT, "artists", "artist-credits"),
            "releases": sub_query(ArrayOf(Ref("minimal-release-with-group")), "releases"),
        },
    )

    release_base = base.extend(
        "release-base",
        fields={
            "title": STRING,
            "disambiguation": STRING,
            "date": Maybe(STRING),
            "country": Maybe(NULLABLE_STRING),
            "release-events": Maybe(ArrayOf(Ref("release-event"))),
            "barcode": NULLABLE_STRING,
            "packaging": NULLABLE_STRING,
            "packaging-id": NULLABLE_STRING,
            "status": NULLABLE_STRING,
            "status-id": NULLABLE_STRING,
            "text-representation": OBJECT,
            "quality": STRING,
            "cover-art-archive": Maybe(Ref("cover-art-archive")),
        },
        sub_queries={
            "collections": sub_query(ArrayOf(Ref("collection")), "collections", "user-collections"),
        },
    )
    media_includes = ("media", "discids", "recordings")
    minimal_release = release_base.extend(
        "minimal-release",
        sub_queries={
            "artist-credit": sub_query(ARTIST_CREDIT, "artist-credits"),
            "media": sub_query(ArrayOf(Ref("medium")), *media_includes),
        },
    )
    minimal_release_with_group = minimal_release.extend(
        "minimal-release-with-group",
        sub_queries={"release-group": sub_query(Ref("minimal-release-group"), "release-groups")},
    )
    release = release_base.extend(
        "release",
        fields={"asin": NULLABLE_STRING},
        sub_queries={
            **full,
            "artist-credit": sub_query(ARTIST_CREDIT, "artists", "artist-credits"),
            "label-info": sub_query(ArrayOf(Ref("label-info")), "labels"),
            "media": sub_query(ArrayOf(Ref("release-medium")), *media_includes),
            "release-group": sub_query(Ref("minimal-release-group-with-rels"), "release-groups"),
        },
    )

    release_group_base = base.extend(
        "release-group-base",
        fields={
            "title": STRING,
            "disambiguation": STRING,
            "primary-type": NULLABLE_STRING,
            "primary-type-id": NULLABLE_STRING,
            "secondary-types": STRINGS,
            "secondary-type-ids": STRINGS,
            # Empty when no release of the group has a date.
            "first-release-date": STRING,
        },
    )
    if mirror_server_quirks:
        # The server serializes the credit of a nested release group as null
        # when it was loaded by "artists" instead of "artist-credits".
        nested_credit = Switch.of({"artist-credits": ARTIST_CREDIT, "artists": NULL})
    else:
        nested_credit = ARTIST_CREDIT
    minimal_release_group = release_group_base.extend(
        "minimal-release-group",
        sub_queries={
            "artist-credit": sub_query(nested_credit, "artist-credits", "artists"),
            # Always empty for nested release groups.
            "releases": sub_query(ArrayOf(NEVER), "releases"),
        },
    )
    minimal_release_group_with_rels = minimal_release_group.extend(
        "minimal-release-group-with-rels",
        sub_queries={"relations": sub_query(ArrayOf(any_relationship()), "release-group-level-rels")},
    )
    release_group = release_group_base.extend(
        "release-group",
        sub_queries={
            **full,
            "artist-credit": sub_query(ARTIST_CREDIT, "artists", "artist-credits"),
            "releases": sub_query(ArrayOf(Ref("minimal-release")), "releases"),
        },
    )

    minimal_series = minimal_entity.extend("minimal-series")
    series = minimal_series.extend("series", sub_queries=full)

    url = Schema("url", fields={"id": STRING, "resource": STRING}, sub_queries=_with_rels())

    minimal_work = base.extend(
        "minimal-work",
        fields={
            "title": STRING,
            "disambiguation": STRING,
            "iswcs": STRINGS,
            "attributes": ArrayOf(OBJECT),
            "languages": STRINGS,
            "language": NULLABLE_STRING,
            "type": NULLABLE_STRING,
            "type-id": NULLABLE_STRING,
        },
    )
    work = minimal_work.extend("work", sub_queries=full)

    return [
        minimal_area,
        area,
        minimal_artist,
        artist,
        *_collection_schemas(),
        minimal_event,
        event,
        genre,
        minimal_instrument,
        instrument,
        minimal_label,
        label,
        minimal_place,
        place,
        minimal_recording,
        minimal_recording_with_rels,
        recording,
        minimal_release,
        minimal_release_with_group,
        release,
        minimal_release_group,
        minimal_release_group_with_rels,
        release_group,
        minimal_series,
        series,
        url,
        minimal_work,
        work,
    ]


def collection_contents_schema_name(content_type: str) -> str:
    return f"collection-contents/{content_type}"


def _collection_schemas() -> list[Schema]:
    collection_fields: dict[str, ValueType] = {
        "id": STRING,
        "name": STRING,
        "editor": STRING,
        "type": STRING,
        "type-id": STRING,
        "entity-type": STRING,
    }
    # The count key depends on the kind of the collected entities.
    counts = {f"{kind}-count": Maybe(NUMBER) for kind in COLLECTABLE_ENTITY_TYPES}
    schemas = [Schema("collection", fields={**collection_fields, **counts})]
    for kind in COLLECTABLE_ENTITY_TYPES:
        schemas.append(
            Schema(
                collection_contents_schema_name(kind),
                fields={
                    **collection_fields,
                    f"{kind}-count": NUMBER,
                    entity_plural(kind): ArrayOf(Ref(MINIMAL_SCHEMAS[kind])),
                },
            )
        )
    return schemas


def build_registry(*, mirror_server_quirks: bool = True) -> SchemaRegistry:
    """Create an arena holding every entity and record schema.

    Args:
        mirror_server_quirks: Model the server's serializer exactly, including
            behaviour that looks unintended. Disable to get the documented
            behaviour instead.

    Returns:
        SchemaRegistry: Registry with all references resolvable.
    """

    registry = SchemaRegistry()
    for schema in (
        *_value_records(),
        *_relationship_schemas(),
        *_entity_schemas(mirror_server_quirks=mirror_server_quirks),
    ):
        _ = registry.register(schema)
    registry.check_references()
    return registry


DEFAULT_REGISTRY: Final[SchemaRegistry] = build_registry()


@dataclass(frozen=True, slots=True)
class EntityKind:
    """An entity type token together with its lookup schema.

    Attributes:
        name: Entity type token used in endpoint paths.
        schema: Name of the schema describing lookup results.
        extra_includes: Includes accepted by the server that do not add fields.
    """

    name: str
    schema: str
    extra_includes: frozenset[str] = field(default_factory=frozenset)

    def includes(self, registry: SchemaRegistry | None = None) -> frozenset[str]:
        """Return every include parameter accepted for lookups of this kind."""

        collected = collect_includes(self.schema, registry=registry or DEFAULT_REGISTRY)
        return collected | self.extra_includes


ENTITY_KINDS: Final[Mapping[str, EntityKind]] = {
    name: EntityKind(
        name=name,
        schema=name,
        extra_includes=frozenset({VARIOUS_ARTISTS_INCLUDE}) if name == "artist" else frozenset(),
    )
    for name in ENTITY_TYPES
}


def get_entity_kind(name: str) -> EntityKind:
    """Return the entity kind registered for ``name``.

    Raises:
        KeyError: If ``name`` is not a known entity type.
    """

    return ENTITY_KINDS[name]


__all__ = [
    "DEFAULT_REGISTRY",
    "ENTITY_KINDS",
    "EntityKind",
    "MINIMAL_SCHEMAS",
    "any_relationship",
    "build_registry",
    "collection_contents_schema_name",
    "get_entity_kind",
    "relationship_schema_name",
]
