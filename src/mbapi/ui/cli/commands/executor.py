"""src/mbapi/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse schema lookups and include validation across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from mbapi.features.schema import DEFAULT_REGISTRY, EntityKind, SchemaRegistry, get_entity_kind
from mbapi.platform.logging import logger


class CommandExecutor(ABC):
    """Base class for command execution."""

    registry: SchemaRegistry

    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        """Initialize command executor.

        Args:
            registry: Schema arena, the bundled catalog by default.
        """
        self.registry = registry or DEFAULT_REGISTRY

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command.

        Returns:
            The command's result, already displayed.
        """
        pass

    def entity_kind(self, entity_type: str) -> EntityKind:
        return get_entity_kind(entity_type)

    def warn_unknown_includes(self, entity_type: str, includes: Iterable[str]) -> list[str]:
        """Log and return the includes ``entity_type`` does not accept."""

        accepted = self.entity_kind(entity_type).includes(self.registry)
        unknown = [include for include in includes if include not in accepted]
        for include in unknown:
            logger.warning("Include %r has no effect on %s lookups", include, entity_type)
        return unknown
