"""src/mbapi/ui/cli/commands/includes.py
What: List the include parameters an entity type accepts.
Why: Users need the valid ``inc`` values without reading the API docs.
"""

from typing import override

from mbapi.features.schema import SchemaRegistry
from mbapi.ui.cli.args.options import IncludesArgs
from mbapi.ui.cli.commands.executor import CommandExecutor
from mbapi.ui.cli.display.document import DocumentDisplay


class IncludesCommand(CommandExecutor):
    """Command listing accepted includes."""

    args: IncludesArgs
    display: DocumentDisplay

    def __init__(self, args: IncludesArgs, registry: SchemaRegistry | None = None) -> None:
        super().__init__(registry)
        self.args = args
        self.display = DocumentDisplay()

    @override
    def execute(self) -> frozenset[str]:
        includes = self.entity_kind(self.args.entity_type).includes(self.registry)
        self.display.show_includes(self.args.entity_type, includes)
        return includes
