"""src/mbapi/ui/cli/display/shape.py
Where: CLI adapter layer for shape rendering.
What: Build Rich trees describing the document shape of a lookup.
Why: Show which fields a set of includes adds before any request is made.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from mbapi.features.schema import (
    ArrayOf,
    DocumentShape,
    Maybe,
    Never,
    Nullable,
    OneOf,
    Ref,
    Scalar,
    ShapeSchema,
    ValueType,
)


def format_type(value_type: ValueType) -> str:
    """Render a resolved value type as a short label such as ``artist-credit[]``."""

    if isinstance(value_type, Scalar):
        return value_type.kind
    if isinstance(value_type, Ref):
        return value_type.schema
    if isinstance(value_type, ArrayOf):
        item = format_type(value_type.item)
        return f"({item})[]" if isinstance(value_type.item, OneOf) else f"{item}[]"
    if isinstance(value_type, Nullable):
        return f"{format_type(value_type.inner)} | null"
    if isinstance(value_type, Maybe):
        return f"{format_type(value_type.inner)}?"
    if isinstance(value_type, OneOf):
        return " | ".join(format_type(option) for option in value_type.options)
    if isinstance(value_type, Never):
        return "never"
    return type(value_type).__name__


def _first_reference(value_type: ValueType) -> str | None:
    if isinstance(value_type, Ref):
        return value_type.schema
    if isinstance(value_type, ArrayOf):
        return _first_reference(value_type.item)
    if isinstance(value_type, (Nullable, Maybe)):
        return _first_reference(value_type.inner)
    return None


@final
class ShapeDisplay:
    """Handles shape display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize shape display."""
        self.console = console or Console()

    def build_tree(self, shape: DocumentShape, depth: int) -> Tree:
        """Build a tree of the root schema, expanding references up to ``depth``."""

        includes = "+".join(sorted(shape.includes)) or "no includes"
        tree = Tree(f"[bold cyan]{escape(shape.root)}[/bold cyan] ({escape(includes)})")
        self._add_fields(tree, shape, shape.root_schema, depth, (shape.root,))
        return tree

    def show_shape(self, shape: DocumentShape, depth: int) -> None:
        self.console.print(self.build_tree(shape, depth))

    def _add_fields(
        self,
        node: Tree,
        shape: DocumentShape,
        schema: ShapeSchema,
        depth: int,
        path: tuple[str, ...],
    ) -> None:
        for shape_field in schema.fields:
            marker = "+" if shape_field.conditional else "•"
            optional = "?" if shape_field.optional else ""
            label = f"{marker} {escape(shape_field.name)}{optional}: [dim]{escape(format_type(shape_field.type))}[/dim]"
            child = node.add(label)
            reference = _first_reference(shape_field.type)
            # Recursion stops at cycles as well as at the depth limit.
            if reference is None or depth <= 1 or reference in path:
                continue
            self._add_fields(child, shape, shape[reference], depth - 1, (*path, reference))


__all__ = ["ShapeDisplay", "format_type"]
