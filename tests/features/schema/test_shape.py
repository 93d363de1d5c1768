"""Tests for document shape description."""

from __future__ import annotations

import pytest

from mbapi.features.schema import (
    DEFAULT_REGISTRY,
    NEVER,
    NULL,
    NUMBER,
    STRING,
    ArrayOf,
    Maybe,
    OneOf,
    Ref,
    Schema,
    SchemaRegistry,
    Switch,
    build_registry,
    collect_includes,
    describe_shape,
    resolve_type,
    sub_query,
)

ARTIST_CREDIT = ArrayOf(Ref("artist-credit"))


def test_shape_without_includes_lists_always_fields() -> None:
    shape = describe_shape("release-group", None, registry=DEFAULT_REGISTRY)

    assert shape.root == "release-group"
    assert shape.includes == frozenset()
    assert shape.field_names == frozenset(DEFAULT_REGISTRY.get("release-group").fields)
    assert not any(shape_field.conditional for shape_field in shape.root_schema.fields)


def test_shape_with_full_includes_has_every_field() -> None:
    includes = collect_includes("release", registry=DEFAULT_REGISTRY)

    shape = describe_shape("release", includes, registry=DEFAULT_REGISTRY)

    assert shape.field_names == DEFAULT_REGISTRY.get("release").field_names


def test_shape_marks_conditional_and_optional_fields() -> None:
    shape = describe_shape("artist", ["aliases"], registry=DEFAULT_REGISTRY)
    aliases = shape.root_schema.field("aliases")

    assert aliases.conditional
    assert aliases.optional
    assert aliases.type == ArrayOf(Ref("alias"))
    assert not shape.root_schema.field("id").conditional
    with pytest.raises(KeyError):
        _ = shape.root_schema.field("tags")


def test_shape_includes_reachable_schemas_once() -> None:
    shape = describe_shape("artist", ["aliases", "releases"], registry=DEFAULT_REGISTRY)

    names = {schema.name for schema in shape}
    assert {"artist", "alias", "minimal-release", "minimal-area"} <= names
    assert "aliases" in shape["minimal-release"].field_names


def test_shape_terminates_on_cycles() -> None:
    registry = SchemaRegistry(
        [
            Schema("a", sub_queries={"b": sub_query(Ref("b"), "b-inc")}),
            Schema("b", sub_queries={"a": sub_query(ArrayOf(Ref("a")), "a-inc")}),
        ]
    )

    shape = describe_shape("a", ["a-inc", "b-inc"], registry=registry)

    assert {schema.name for schema in shape} == {"a", "b"}


@pytest.mark.parametrize(
    ("includes", "expected"),
    [
        (["artist-credits"], ARTIST_CREDIT),
        (["artists"], NULL),
        (["artists", "artist-credits"], OneOf((ARTIST_CREDIT, NULL))),
    ],
)
def test_nested_release_group_credit_depends_on_include(includes: list[str], expected: object) -> None:
    shape = describe_shape("minimal-release-group", includes, registry=DEFAULT_REGISTRY)

    assert shape.root_schema.field("artist-credit").type == expected


def test_documented_credit_without_server_quirks() -> None:
    registry = build_registry(mirror_server_quirks=False)

    shape = describe_shape("minimal-release-group", ["artists"], registry=registry)

    assert shape.root_schema.field("artist-credit").type == ARTIST_CREDIT


def test_resolve_type() -> None:
    switch = Switch.of({"a": STRING, "b": NUMBER})

    assert resolve_type(switch, frozenset()) == NEVER
    assert resolve_type(ArrayOf(switch), frozenset({"b"})) == ArrayOf(NUMBER)
    assert resolve_type(Maybe(switch), frozenset({"a", "b"})) == Maybe(OneOf((STRING, NUMBER)))
    assert resolve_type(STRING, frozenset({"a"})) == STRING
