"""src/mbapi/ui/cli/commands/shape.py
What: Render the document shape a set of includes produces.
Why: Preview lookup results offline.
"""

from typing import override

from mbapi.features.schema import DocumentShape, SchemaRegistry, describe_shape
from mbapi.ui.cli.args.options import ShapeArgs
from mbapi.ui.cli.commands.executor import CommandExecutor
from mbapi.ui.cli.display.shape import ShapeDisplay


class ShapeCommand(CommandExecutor):
    """Command describing a projected document shape."""

    args: ShapeArgs
    display: ShapeDisplay

    def __init__(self, args: ShapeArgs, registry: SchemaRegistry | None = None) -> None:
        super().__init__(registry)
        self.args = args
        self.display = ShapeDisplay()

    @override
    def execute(self) -> DocumentShape:
        args = self.args
        _ = self.warn_unknown_includes(args.entity_type, args.includes)
        kind = self.entity_kind(args.entity_type)
        shape = describe_shape(kind.schema, args.includes, registry=self.registry)
        self.display.show_shape(shape, args.depth)
        return shape
