"""
Summary: Arena of named schemas referenced by handle.
Why: Let schemas point at each other (including cycles) without embedding values.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .model import Ref, Schema, SchemaError, UnknownSchemaError, ValueType, iter_children


class SchemaRegistry:
    """Hold schemas by name so ``Ref`` handles can be resolved lazily."""

    def __init__(self, schemas: Iterable[Schema] = ()) -> None:
        self._schemas: dict[str, Schema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: Schema) -> Schema:
        """Add ``schema`` to the arena.

        Raises:
            SchemaError: If another schema already uses the same name.
        """

        if schema.name in self._schemas:
            raise SchemaError(f"Schema '{schema.name}' is already registered")
        self._schemas[schema.name] = schema
        return schema

    def get(self, name: str) -> Schema:
        try:
            return self._schemas[name]
        except KeyError:
            raise UnknownSchemaError(name) from None

    def resolve(self, schema: Schema | str) -> Schema:
        """Accept either a schema object or its registered name."""

        if isinstance(schema, Schema):
            return schema
        return self.get(schema)

    def names(self) -> list[str]:
        return sorted(self._schemas)

    def check_references(self) -> None:
        """Ensure every ``Ref`` in the arena points at a registered schema."""

        missing: set[str] = set()
        for schema in self._schemas.values():
            for value_type in _schema_value_types(schema):
                missing.update(name for name in _referenced_names(value_type) if name not in self._schemas)
        if missing:
            raise SchemaError("Unresolved schema references: " + ", ".join(sorted(missing)))

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)


def _schema_value_types(schema: Schema) -> Iterator[ValueType]:
    yield from schema.fields.values()
    for query in schema.sub_queries.values():
        yield query.payload


def _referenced_names(value_type: ValueType) -> Iterator[str]:
    if isinstance(value_type, Ref):
        yield value_type.schema
        return
    for child in iter_children(value_type):
        yield from _referenced_names(child)


__all__ = ["SchemaRegistry"]
