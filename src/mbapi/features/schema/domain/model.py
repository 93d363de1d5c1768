"""
Summary: Schema descriptors for include-dependent MusicBrainz documents.
Why: Describe which fields always exist and which depend on include parameters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Literal

from mbapi.platform.musicbrainz.errors import MusicBrainzError

ScalarKind = Literal["string", "number", "boolean", "null", "object", "any"]


class SchemaError(MusicBrainzError):
    """Raised when a schema definition violates the model invariants."""


class UnknownSchemaError(SchemaError, KeyError):
    """Raised when a schema name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown schema '{name}'")
        self.name: str = name

    def __str__(self) -> str:
        return str(self.args[0])


class ValueType:
    """Base class of all value type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Scalar(ValueType):
    """A JSON value without nested entity semantics."""

    kind: ScalarKind = "any"


@dataclass(frozen=True, slots=True)
class Ref(ValueType):
    """Reference to a named schema inside a registry."""

    schema: str


@dataclass(frozen=True, slots=True)
class ArrayOf(ValueType):
    item: ValueType


@dataclass(frozen=True, slots=True)
class Nullable(ValueType):
    inner: ValueType


@dataclass(frozen=True, slots=True)
class Maybe(ValueType):
    """The key may be missing from the surrounding object."""

    inner: ValueType


@dataclass(frozen=True, slots=True)
class OneOf(ValueType):
    """Structural union, members are tried in declaration order."""

    options: tuple[ValueType, ...]


@dataclass(frozen=True, slots=True)
class Switch(ValueType):
    """Payload chosen by the include parameters that were requested.

    Every case whose include is requested is selected. When several cases are
    selected the payload is the union of their types.
    """

    cases: tuple[tuple[str, ValueType], ...]

    @classmethod
    def of(cls, cases: Mapping[str, ValueType]) -> Switch:
        return cls(tuple(cases.items()))

    @property
    def includes(self) -> frozenset[str]:
        return frozenset(include for include, _ in self.cases)

    def select(self, requested: frozenset[str]) -> tuple[ValueType, ...]:
        """Return the payload types activated by ``requested``."""

        return tuple(value_type for include, value_type in self.cases if include in requested)


@dataclass(frozen=True, slots=True)
class Never(ValueType):
    """The empty type. Arrays of it are always empty."""


STRING: Final[Scalar] = Scalar("string")
NUMBER: Final[Scalar] = Scalar("number")
BOOLEAN: Final[Scalar] = Scalar("boolean")
NULL: Final[Scalar] = Scalar("null")
OBJECT: Final[Scalar] = Scalar("object")
ANY: Final[Scalar] = Scalar("any")
NEVER: Final[Never] = Never()


@dataclass(frozen=True, slots=True)
class SubQuery:
    """A field that is only present when one of ``requires`` is requested."""

    requires: frozenset[str]
    payload: ValueType

    def __post_init__(self) -> None:
        if isinstance(self.requires, str):
            object.__setattr__(self, "requires", frozenset((self.requires,)))
        else:
            object.__setattr__(self, "requires", frozenset(self.requires))
        if not self.requires:
            raise SchemaError("Sub-query fields need at least one include parameter")

    def is_satisfied_by(self, requested: frozenset[str]) -> bool:
        return not self.requires.isdisjoint(requested)


def sub_query(payload: ValueType, *requires: str) -> SubQuery:
    """Shorthand used by the entity catalog."""

    return SubQuery(frozenset(requires), payload)


@dataclass(frozen=True, slots=True)
class Schema:
    """Structural description of one entity kind or nested record.

    Attributes:
        name: Registry handle of the schema.
        fields: Always-present fields mapped to their value types.
        sub_queries: Fields gated by include parameters.
        discriminator: Optional ``(field, value)`` pair that identifies values
            of this schema among the members of a union.
    """

    name: str
    fields: Mapping[str, ValueType] = field(default_factory=dict)
    sub_queries: Mapping[str, SubQuery] = field(default_factory=dict)
    discriminator: tuple[str, str] | None = None

    def __post_init__(self) -> None:
        overlap = set(self.fields).intersection(self.sub_queries)
        if overlap:
            names = ", ".join(sorted(overlap))
            raise SchemaError(
                f"Schema '{self.name}' declares always-present and sub-query fields with the same name: {names}"
            )
        for field_name, query in self.sub_queries.items():
            for switch in _top_level_switches(query.payload):
                unknown = switch.includes - query.requires
                if unknown:
                    raise SchemaError(
                        f"Sub-query '{self.name}.{field_name}' switches on includes it does not require: "
                        + ", ".join(sorted(unknown))
                    )
        if self.discriminator is not None and self.discriminator[0] not in self.fields:
            raise SchemaError(
                f"Discriminator '{self.discriminator[0]}' of schema '{self.name}' is not an always-present field"
            )
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "sub_queries", MappingProxyType(dict(self.sub_queries)))

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(self.fields) | frozenset(self.sub_queries)

    def accepts(self, value: object) -> bool:
        """Return True when ``value`` can be read as an instance of this schema."""

        if not isinstance(value, Mapping):
            return False
        if self.discriminator is None:
            return True
        key, expected = self.discriminator
        return value.get(key) == expected

    def extend(
        self,
        name: str,
        *,
        fields: Mapping[str, ValueType] | None = None,
        sub_queries: Mapping[str, SubQuery] | None = None,
        drop: Iterable[str] = (),
        discriminator: tuple[str, str] | None = None,
    ) -> Schema:
        """Derive a new schema, overriding or adding fields.

        A field given in ``fields`` replaces a sub-query of the same name and
        the other way round, mirroring interface extension with overrides.
        """

        dropped = set(drop)
        merged_fields = {k: v for k, v in self.fields.items() if k not in dropped}
        merged_queries = {k: v for k, v in self.sub_queries.items() if k not in dropped}
        for key, value in (fields or {}).items():
            _ = merged_queries.pop(key, None)
            merged_fields[key] = value
        for key, query in (sub_queries or {}).items():
            _ = merged_fields.pop(key, None)
            merged_queries[key] = query
        return Schema(
            name=name,
            fields=merged_fields,
            sub_queries=merged_queries,
            discriminator=discriminator if discriminator is not None else self.discriminator,
        )


def _top_level_switches(value_type: ValueType) -> Iterable[Switch]:
    """Yield switches reachable without crossing a schema reference."""

    if isinstance(value_type, Switch):
        yield value_type
    elif isinstance(value_type, (ArrayOf,)):
        yield from _top_level_switches(value_type.item)
    elif isinstance(value_type, (Nullable, Maybe)):
        yield from _top_level_switches(value_type.inner)
    elif isinstance(value_type, OneOf):
        for option in value_type.options:
            yield from _top_level_switches(option)


def iter_children(value_type: ValueType) -> tuple[ValueType, ...]:
    """Return the value types directly nested in ``value_type``."""

    if isinstance(value_type, ArrayOf):
        return (value_type.item,)
    if isinstance(value_type, (Nullable, Maybe)):
        return (value_type.inner,)
    if isinstance(value_type, OneOf):
        return value_type.options
    if isinstance(value_type, Switch):
        return tuple(case for _, case in value_type.cases)
    return ()


def normalize_includes(includes: str | Iterable[str] | None) -> frozenset[str]:
    """Turn a caller supplied include list into a set.

    ``"aliases+tags"`` and ``["aliases", "tags", "aliases"]`` both become
    ``frozenset({"aliases", "tags"})``. Empty tokens are ignored.
    """

    if includes is None:
        return frozenset()
    if isinstance(includes, str):
        tokens: Iterable[str] = includes.split("+")
    else:
        tokens = includes
    return frozenset(token.strip() for token in tokens if token and token.strip())


__all__ = [
    "ANY",
    "ArrayOf",
    "BOOLEAN",
    "Maybe",
    "NEVER",
    "NULL",
    "NUMBER",
    "Never",
    "Nullable",
    "OBJECT",
    "OneOf",
    "Ref",
    "STRING",
    "Scalar",
    "ScalarKind",
    "Schema",
    "SchemaError",
    "SubQuery",
    "Switch",
    "UnknownSchemaError",
    "ValueType",
    "iter_children",
    "normalize_includes",
    "sub_query",
]
