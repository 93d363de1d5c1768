"""
Summary: Enumerate every include parameter that can affect a schema.
Why: Lookups need the full include vocabulary of an entity kind, nested entities included.
"""

from __future__ import annotations

from mbapi.features.schema.domain.model import Ref, Schema, Switch, ValueType, iter_children
from mbapi.features.schema.domain.registry import SchemaRegistry


def collect_includes(schema: Schema | str, *, registry: SchemaRegistry) -> frozenset[str]:
    """Return the union of all include parameters reachable from ``schema``.

    Descent into nested schemas is unconditional: a nested entity's sub-query
    includes count even though that entity only appears when its parent field
    is requested. Each schema name is expanded once per call, which keeps the
    walk finite on cyclic schema graphs.

    Args:
        schema: Schema object or registered schema name.
        registry: Arena used to resolve ``Ref`` handles.

    Returns:
        frozenset[str]: Include parameters, without duplicates.
    """

    collector = _IncludeCollector(registry)
    collector.visit_schema(registry.resolve(schema))
    return frozenset(collector.includes)


class _IncludeCollector:
    def __init__(self, registry: SchemaRegistry) -> None:
        self._registry: SchemaRegistry = registry
        self._visited: set[str] = set()
        self.includes: set[str] = set()

    def visit_schema(self, schema: Schema) -> None:
        if schema.name in self._visited:
            return
        self._visited.add(schema.name)

        for value_type in schema.fields.values():
            self.visit_type(value_type)
        for query in schema.sub_queries.values():
            self.includes.update(query.requires)
            self.visit_type(query.payload)

    def visit_type(self, value_type: ValueType) -> None:
        if isinstance(value_type, Ref):
            self.visit_schema(self._registry.get(value_type.schema))
            return
        if isinstance(value_type, Switch):
            self.includes.update(value_type.includes)
        for child in iter_children(value_type):
            self.visit_type(child)


__all__ = ["collect_includes"]
