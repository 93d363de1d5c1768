"""Tests for the schema arena."""

from __future__ import annotations

import pytest

from mbapi.features.schema import STRING, ArrayOf, Ref, Schema, SchemaError, SchemaRegistry, UnknownSchemaError


def test_register_and_resolve() -> None:
    schema = Schema("thing", fields={"id": STRING})
    registry = SchemaRegistry([schema])

    assert registry.get("thing") is schema
    assert registry.resolve("thing") is schema
    assert registry.resolve(schema) is schema
    assert "thing" in registry
    assert len(registry) == 1
    assert list(registry) == [schema]


def test_duplicate_names_are_rejected() -> None:
    registry = SchemaRegistry([Schema("thing")])

    with pytest.raises(SchemaError, match="already registered"):
        _ = registry.register(Schema("thing"))


def test_unknown_schema_raises_key_error_subclass() -> None:
    registry = SchemaRegistry()

    with pytest.raises(KeyError):
        _ = registry.get("missing")
    with pytest.raises(UnknownSchemaError, match="Unknown schema 'missing'"):
        _ = registry.resolve("missing")


def test_check_references_reports_dangling_refs() -> None:
    registry = SchemaRegistry(
        [
            Schema("a", fields={"b": Ref("b"), "cs": ArrayOf(Ref("c"))}),
            Schema("b", fields={"a": Ref("a")}),
        ]
    )

    with pytest.raises(SchemaError, match="Unresolved schema references: c"):
        registry.check_references()


def test_cyclic_references_are_allowed() -> None:
    registry = SchemaRegistry(
        [
            Schema("a", fields={"b": Ref("b")}),
            Schema("b", fields={"a": Ref("a")}),
        ]
    )

    registry.check_references()
    assert registry.names() == ["a", "b"]
