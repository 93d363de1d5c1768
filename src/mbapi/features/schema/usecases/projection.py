"""
Summary: Project decoded documents onto the shape implied by requested includes.
Why: Presence of a field is the signal; unrequested sub-query data must not leak through.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Final

from mbapi.features.schema.domain.model import (
    ArrayOf,
    Maybe,
    Never,
    Nullable,
    OneOf,
    Ref,
    Scalar,
    Schema,
    Switch,
    ValueType,
    normalize_includes,
)
from mbapi.features.schema.domain.registry import SchemaRegistry

_DROP: Final[object] = object()


def project(
    schema: Schema | str,
    value: Mapping[str, Any],
    includes: str | Iterable[str] | None,
    *,
    registry: SchemaRegistry,
) -> dict[str, Any]:
    """Return the part of ``value`` a request with ``includes`` is entitled to.

    Always-present fields are kept, sub-query fields are kept only when one of
    their required includes was requested, and nested entities are projected
    with the same include set. Fields missing from ``value`` stay missing and
    keys unknown to the schema are dropped. The input is never mutated.

    Args:
        schema: Schema object or registered schema name.
        value: Decoded JSON object conforming to the unprojected shape.
        includes: Requested include parameters.
        registry: Arena used to resolve nested schema references.

    Returns:
        dict[str, Any]: A new projected document.

    Raises:
        TypeError: If ``value`` is not a JSON object.
    """

    if not isinstance(value, Mapping):
        raise TypeError(f"Expected a JSON object to project, got {type(value).__name__}")
    projector = _Projector(registry, normalize_includes(includes))
    return projector.project_object(registry.resolve(schema), value)


def available_fields(
    schema: Schema | str,
    includes: str | Iterable[str] | None,
    *,
    registry: SchemaRegistry,
) -> frozenset[str]:
    """Return the top-level field names a response may contain for ``includes``."""

    resolved = registry.resolve(schema)
    requested = normalize_includes(includes)
    active = {name for name, query in resolved.sub_queries.items() if query.is_satisfied_by(requested)}
    return frozenset(resolved.fields) | frozenset(active)


class _Projector:
    def __init__(self, registry: SchemaRegistry, requested: frozenset[str]) -> None:
        self._registry: SchemaRegistry = registry
        self._requested: frozenset[str] = requested

    def project_object(self, schema: Schema, value: Mapping[str, Any]) -> dict[str, Any]:
        projected: dict[str, Any] = {}
        for name, value_type in schema.fields.items():
            if name in value:
                self._store(projected, name, value_type, value[name])
        for name, query in schema.sub_queries.items():
            # A requested field without data is indistinguishable from an unrequested one.
            if name in value and query.is_satisfied_by(self._requested):
                self._store(projected, name, query.payload, value[name])
        return projected

    def _store(self, target: dict[str, Any], name: str, value_type: ValueType, raw: Any) -> None:
        item = self.project_value(value_type, raw)
        if item is not _DROP:
            target[name] = item

    def project_value(self, value_type: ValueType, raw: Any) -> Any:
        if isinstance(value_type, Maybe):
            return self.project_value(value_type.inner, raw)
        if isinstance(value_type, Nullable):
            if raw is None:
                return None
            return self.project_value(value_type.inner, raw)
        if isinstance(value_type, Ref):
            if isinstance(raw, Mapping):
                return self.project_object(self._registry.get(value_type.schema), raw)
            return raw
        if isinstance(value_type, ArrayOf):
            if not isinstance(raw, list):
                return raw
            items = (self.project_value(value_type.item, element) for element in raw)
            return [item for item in items if item is not _DROP]
        if isinstance(value_type, Switch):
            return self._project_union(value_type.select(self._requested), raw)
        if isinstance(value_type, OneOf):
            return self._project_union(value_type.options, raw)
        if isinstance(value_type, Never):
            return _DROP
        return raw

    def _project_union(self, options: Sequence[ValueType], raw: Any) -> Any:
        for option in options:
            if self.matches(option, raw):
                return self.project_value(option, raw)
        return _DROP

    def matches(self, value_type: ValueType, raw: Any) -> bool:
        """Cheap structural test used to pick a union member."""

        if isinstance(value_type, Scalar):
            return _scalar_matches(value_type, raw)
        if isinstance(value_type, Ref):
            return self._registry.get(value_type.schema).accepts(raw)
        if isinstance(value_type, ArrayOf):
            return isinstance(raw, list)
        if isinstance(value_type, Nullable):
            return raw is None or self.matches(value_type.inner, raw)
        if isinstance(value_type, Maybe):
            return self.matches(value_type.inner, raw)
        if isinstance(value_type, OneOf):
            return any(self.matches(option, raw) for option in value_type.options)
        if isinstance(value_type, Switch):
            return any(self.matches(option, raw) for option in value_type.select(self._requested))
        return False


def _scalar_matches(scalar: Scalar, raw: Any) -> bool:
    kind = scalar.kind
    if kind == "any":
        return True
    if kind == "null":
        return raw is None
    if kind == "boolean":
        return isinstance(raw, bool)
    if kind == "number":
        return isinstance(raw, (int, float)) and not isinstance(raw, bool)
    if kind == "string":
        return isinstance(raw, str)
    return isinstance(raw, Mapping)


__all__ = ["available_fields", "project"]
