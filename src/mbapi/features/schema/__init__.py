# Path: `src/mbapi/features/schema/__init__.py`
# Summary: Export the schema model, include collector and projection engine.
# Why: Provide a stable import surface for the client, the CLI and tests.

from .catalog import DEFAULT_REGISTRY, ENTITY_KINDS, EntityKind, build_registry, get_entity_kind
from .domain.model import (
    ANY,
    BOOLEAN,
    NEVER,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    ArrayOf,
    Maybe,
    Never,
    Nullable,
    OneOf,
    Ref,
    Scalar,
    Schema,
    SchemaError,
    SubQuery,
    Switch,
    UnknownSchemaError,
    ValueType,
    normalize_includes,
    sub_query,
)
from .domain.registry import SchemaRegistry
from .usecases.collector import collect_includes
from .usecases.projection import available_fields, project
from .usecases.shape import DocumentShape, ShapeField, ShapeSchema, describe_shape, resolve_type

__all__ = [
    "ANY",
    "ArrayOf",
    "BOOLEAN",
    "DEFAULT_REGISTRY",
    "DocumentShape",
    "ENTITY_KINDS",
    "EntityKind",
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
    "Schema",
    "SchemaError",
    "SchemaRegistry",
    "ShapeField",
    "ShapeSchema",
    "SubQuery",
    "Switch",
    "UnknownSchemaError",
    "ValueType",
    "available_fields",
    "build_registry",
    "collect_includes",
    "describe_shape",
    "get_entity_kind",
    "normalize_includes",
    "project",
    "resolve_type",
    "sub_query",
]
