"""
Summary: Describe the document shape produced by a set of include parameters.
Why: Callers can inspect what a lookup is entitled to return before fetching anything.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from mbapi.features.schema.domain.model import (
    NEVER,
    ArrayOf,
    Maybe,
    Nullable,
    OneOf,
    Ref,
    Schema,
    Switch,
    ValueType,
    normalize_includes,
)
from mbapi.features.schema.domain.registry import SchemaRegistry


@dataclass(frozen=True, slots=True)
class ShapeField:
    """One field of a projected schema.

    Attributes:
        name: JSON key.
        type: Value type with every include switch already resolved.
        optional: The key may be missing even though it is entitled.
        conditional: The field exists because of a requested include.
    """

    name: str
    type: ValueType
    optional: bool = False
    conditional: bool = False


@dataclass(frozen=True, slots=True)
class ShapeSchema:
    name: str
    fields: tuple[ShapeField, ...]

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(shape_field.name for shape_field in self.fields)

    def field(self, name: str) -> ShapeField:
        for shape_field in self.fields:
            if shape_field.name == name:
                return shape_field
        raise KeyError(name)


@dataclass(frozen=True, slots=True)
class DocumentShape:
    """Projected shapes of the root schema and every schema reachable from it."""

    root: str
    includes: frozenset[str]
    schemas: Mapping[str, ShapeSchema]

    @property
    def root_schema(self) -> ShapeSchema:
        return self.schemas[self.root]

    @property
    def field_names(self) -> frozenset[str]:
        return self.root_schema.field_names

    def __getitem__(self, name: str) -> ShapeSchema:
        return self.schemas[name]

    def __iter__(self) -> Iterator[ShapeSchema]:
        return iter(self.schemas.values())


def describe_shape(
    schema: Schema | str,
    includes: str | Iterable[str] | None,
    *,
    registry: SchemaRegistry,
) -> DocumentShape:
    """Compute the shape of ``schema`` for the requested ``includes``.

    Every reachable schema is projected once; nested entities share the
    caller's include set, so a schema's projection does not depend on where
    it is nested. The result is keyed by schema name and therefore finite for
    cyclic schema graphs as well.
    """

    requested = normalize_includes(includes)
    root = registry.resolve(schema)
    shapes: dict[str, ShapeSchema] = {}
    pending: list[Schema] = [root]

    while pending:
        current = pending.pop()
        if current.name in shapes:
            continue
        fields: list[ShapeField] = []
        for name, value_type in current.fields.items():
            fields.append(_shape_field(name, value_type, requested, conditional=False))
        for name, query in current.sub_queries.items():
            if query.is_satisfied_by(requested):
                fields.append(_shape_field(name, query.payload, requested, conditional=True))
        shapes[current.name] = ShapeSchema(current.name, tuple(fields))

        for shape_field in fields:
            for reference in _references(shape_field.type):
                if reference not in shapes:
                    pending.append(registry.get(reference))

    return DocumentShape(root=root.name, includes=requested, schemas=MappingProxyType(shapes))


def resolve_type(value_type: ValueType, requested: frozenset[str]) -> ValueType:
    """Replace include switches inside ``value_type`` by the selected payloads."""

    if isinstance(value_type, Switch):
        selected = tuple(resolve_type(option, requested) for option in value_type.select(requested))
        if not selected:
            return NEVER
        if len(selected) == 1:
            return selected[0]
        return OneOf(selected)
    if isinstance(value_type, ArrayOf):
        return ArrayOf(resolve_type(value_type.item, requested))
    if isinstance(value_type, Nullable):
        return Nullable(resolve_type(value_type.inner, requested))
    if isinstance(value_type, Maybe):
        return Maybe(resolve_type(value_type.inner, requested))
    if isinstance(value_type, OneOf):
        return OneOf(tuple(resolve_type(option, requested) for option in value_type.options))
    return value_type


def _shape_field(name: str, value_type: ValueType, requested: frozenset[str], *, conditional: bool) -> ShapeField:
    resolved = resolve_type(value_type, requested)
    optional = isinstance(resolved, Maybe)
    if isinstance(resolved, Maybe):
        resolved = resolved.inner
    return ShapeField(name=name, type=resolved, optional=optional, conditional=conditional)


def _references(value_type: ValueType) -> Iterator[str]:
    if isinstance(value_type, Ref):
        yield value_type.schema
    elif isinstance(value_type, ArrayOf):
        yield from _references(value_type.item)
    elif isinstance(value_type, (Nullable, Maybe)):
        yield from _references(value_type.inner)
    elif isinstance(value_type, OneOf):
        for option in value_type.options:
            yield from _references(option)


__all__ = [
    "DocumentShape",
    "ShapeField",
    "ShapeSchema",
    "describe_shape",
    "resolve_type",
]
