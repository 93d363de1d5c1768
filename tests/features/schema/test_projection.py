"""
Summary: Exercise include-driven projection of decoded lookup documents.
Why: Sub-query data must appear exactly when a requested include entitles it.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from mbapi.features.schema import (
    DEFAULT_REGISTRY,
    STRING,
    Ref,
    Schema,
    SchemaRegistry,
    available_fields,
    collect_includes,
    project,
    sub_query,
)

ARTIST_MBID = "7e84f845-ac16-41fe-9ff8-df12eb32af55"

ARTIST: dict[str, Any] = {
    "id": ARTIST_MBID,
    "name": "Björk",
    "sort-name": "Björk",
    "disambiguation": "",
    "type": "Person",
    "type-id": "b6e035f4-3ce9-331c-97df-83397230b0df",
}

ARTIST_RELATION: dict[str, Any] = {
    "target-type": "artist",
    "type": "producer",
    "type-id": "8bf377ba-8d71-4ecc-97f2-7bb2d8a2a75f",
    "direction": "backward",
    "attributes": [],
    "attribute-values": {},
    "attribute-ids": {},
    "source-credit": "",
    "target-credit": "",
    "begin": None,
    "end": None,
    "ended": False,
    "artist": ARTIST,
}

URL_RELATION: dict[str, Any] = {
    "target-type": "url",
    "type": "wikidata",
    "type-id": "b988d08c-5d86-4a57-9557-c83b399e3580",
    "direction": "forward",
    "attributes": [],
    "attribute-values": {},
    "attribute-ids": {},
    "source-credit": "",
    "target-credit": "",
    "begin": None,
    "end": None,
    "ended": False,
    "url": {"id": "0f5e4ab0-9e2e-4a4d-8cf4-0b0b3e3b2f2c", "resource": "https://www.wikidata.org/wiki/Q1411468"},
}

RELEASE_GROUP: dict[str, Any] = {
    "id": "1b022e01-4da6-387b-8658-8678046e4cef",
    "title": "Homogenic",
    "disambiguation": "",
    "primary-type": "Album",
    "primary-type-id": "f529b476-6e62-324f-b0aa-1f3e33d313fc",
    "secondary-types": [],
    "secondary-type-ids": [],
    "first-release-date": "1997-09-20",
    "annotation": "Third studio album.",
    "aliases": [],
    "tags": [{"name": "electronic", "count": 3}],
    "rating": {"value": 4.5, "votes-count": 10},
    "artist-credit": [{"name": "Björk", "joinphrase": "", "artist": ARTIST}],
    "releases": [
        {
            "id": "a3ea3821-5955-4cee-b44f-4f7da8a332f7",
            "title": "Homogenic",
            "status": "Official",
            "quality": "normal",
        }
    ],
    "relations": [ARTIST_RELATION, URL_RELATION],
}

ALWAYS_FIELDS = frozenset(
    {
        "id",
        "title",
        "disambiguation",
        "primary-type",
        "primary-type-id",
        "secondary-types",
        "secondary-type-ids",
        "first-release-date",
    }
)


@pytest.fixture
def release_group() -> dict[str, Any]:
    return copy.deepcopy(RELEASE_GROUP)


def _project(value: dict[str, Any], includes: str | list[str] | None) -> dict[str, Any]:
    return project("release-group", value, includes, registry=DEFAULT_REGISTRY)


def test_all_collected_includes_keep_every_field(release_group: dict[str, Any]) -> None:
    includes = collect_includes("release-group", registry=DEFAULT_REGISTRY)

    assert _project(release_group, includes) == RELEASE_GROUP


def test_no_includes_keep_only_always_present_fields(release_group: dict[str, Any]) -> None:
    projected = _project(release_group, None)

    assert set(projected) == ALWAYS_FIELDS
    assert _project(release_group, []) == projected


def test_unmet_sub_query_fields_are_removed_not_nulled(release_group: dict[str, Any]) -> None:
    projected = _project(release_group, ["tags"])

    assert projected["tags"] == [{"name": "electronic", "count": 3}]
    assert "rating" not in projected
    assert "annotation" not in projected


def test_requested_field_missing_from_value_stays_absent(release_group: dict[str, Any]) -> None:
    del release_group["tags"]

    projected = _project(release_group, ["tags", "user-tags"])

    assert "tags" not in projected
    assert "user-tags" not in projected


def test_empty_arrays_project_to_empty_arrays(release_group: dict[str, Any]) -> None:
    release_group["releases"] = []

    assert _project(release_group, ["releases"])["releases"] == []
    assert _project(release_group, ["releases", "artist-credits", "aliases"])["releases"] == []


def test_nested_entities_use_the_same_include_set(release_group: dict[str, Any]) -> None:
    release_group["releases"][0]["artist-credit"] = [{"name": "Björk", "joinphrase": "", "artist": ARTIST}]
    release_group["releases"][0]["tags"] = [{"name": "pop", "count": 1}]

    projected = _project(release_group, ["releases", "tags"])

    release = projected["releases"][0]
    assert release["tags"] == [{"name": "pop", "count": 1}]
    assert "artist-credit" not in release


def test_projection_is_idempotent(release_group: dict[str, Any]) -> None:
    for includes in ([], ["aliases", "artist-rels"], ["releases", "artists"], sorted(collect_includes("release-group", registry=DEFAULT_REGISTRY))):
        once = _project(release_group, includes)
        assert _project(once, includes) == once


def test_adding_includes_never_removes_fields(release_group: dict[str, Any]) -> None:
    steps = [
        [],
        ["aliases"],
        ["aliases", "artist-credits"],
        ["aliases", "artist-credits", "releases", "url-rels"],
        ["aliases", "artist-credits", "releases", "url-rels", "artist-rels", "ratings"],
    ]
    previous: set[str] = set()
    for includes in steps:
        fields = set(_project(release_group, includes))
        assert previous <= fields
        previous = fields


@pytest.mark.parametrize(
    ("includes", "kept"),
    [
        (["A"], True),
        (["B"], True),
        (["A", "B"], True),
        ([], False),
        (["C"], False),
    ],
)
def test_union_condition(includes: list[str], kept: bool) -> None:
    registry = SchemaRegistry([Schema("thing", fields={"id": STRING}, sub_queries={"credit": sub_query(STRING, "A", "B")})])

    projected = project("thing", {"id": "x", "credit": "y"}, includes, registry=registry)

    assert ("credit" in projected) is kept


@pytest.mark.parametrize("includes", [["artists"], ["artist-credits"], ["artists", "artist-credits"]])
def test_artist_credit_alternatives_give_the_same_result(release_group: dict[str, Any], includes: list[str]) -> None:
    assert _project(release_group, includes)["artist-credit"] == RELEASE_GROUP["artist-credit"]


def test_relationships_follow_the_include_that_loaded_them(release_group: dict[str, Any]) -> None:
    assert _project(release_group, ["artist-rels"])["relations"] == [ARTIST_RELATION]
    assert _project(release_group, ["url-rels"])["relations"] == [URL_RELATION]
    assert _project(release_group, ["url-rels", "artist-rels"])["relations"] == [ARTIST_RELATION, URL_RELATION]
    assert _project(release_group, ["work-rels"])["relations"] == []


def test_includes_without_effect_are_ignored() -> None:
    url = {"id": "0f5e4ab0-9e2e-4a4d-8cf4-0b0b3e3b2f2c", "resource": "https://example.com/"}

    assert project("url", url, ["aliases", "recordings"], registry=DEFAULT_REGISTRY) == url


def test_keys_unknown_to_the_schema_are_dropped(release_group: dict[str, Any]) -> None:
    release_group["score"] = 100

    assert "score" not in _project(release_group, collect_includes("release-group", registry=DEFAULT_REGISTRY))


def test_nested_release_group_releases_are_always_empty() -> None:
    release: dict[str, Any] = {
        "id": "a3ea3821-5955-4cee-b44f-4f7da8a332f7",
        "title": "Homogenic",
        "release-group": {"id": "1b022e01-4da6-387b-8658-8678046e4cef", "title": "Homogenic", "releases": [{"id": "x"}]},
    }

    projected = project("release", release, ["release-groups", "releases"], registry=DEFAULT_REGISTRY)

    assert projected["release-group"]["releases"] == []


def test_nested_release_group_credit_loaded_by_artists_is_null() -> None:
    release: dict[str, Any] = {
        "id": "a3ea3821-5955-4cee-b44f-4f7da8a332f7",
        "release-group": {"id": "1b022e01-4da6-387b-8658-8678046e4cef", "artist-credit": None},
    }

    projected = project("release", release, ["release-groups", "artists"], registry=DEFAULT_REGISTRY)

    assert projected["release-group"]["artist-credit"] is None


def test_recording_level_relations_pick_member_by_target_type() -> None:
    recording: dict[str, Any] = {
        "id": "b1a9c0e9-d987-4042-ae91-78d6a3267d69",
        "title": "Jóga",
        "relations": [ARTIST_RELATION, {"target-type": "mystery"}],
    }

    projected = project("minimal-recording-with-rels", recording, ["recording-level-rels"], registry=DEFAULT_REGISTRY)

    assert projected["relations"] == [ARTIST_RELATION]


def test_input_is_not_mutated(release_group: dict[str, Any]) -> None:
    _ = _project(release_group, [])

    assert release_group == RELEASE_GROUP


def test_non_object_values_are_rejected() -> None:
    with pytest.raises(TypeError):
        _ = project("release-group", [], None, registry=DEFAULT_REGISTRY)  # pyright: ignore[reportArgumentType]


def test_projection_accepts_schema_objects() -> None:
    schema = Schema("thing", fields={"id": STRING}, sub_queries={"child": sub_query(Ref("thing"), "children")})
    registry = SchemaRegistry([schema])

    projected = project(schema, {"id": "a", "child": {"id": "b", "child": {"id": "c"}}}, "children", registry=registry)

    assert projected == {"id": "a", "child": {"id": "b", "child": {"id": "c"}}}


def test_available_fields() -> None:
    fields = available_fields("release-group", "aliases+artist-rels", registry=DEFAULT_REGISTRY)

    assert fields == ALWAYS_FIELDS | {"aliases", "relations"}
