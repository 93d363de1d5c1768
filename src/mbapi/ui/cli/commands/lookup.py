"""src/mbapi/ui/cli/commands/lookup.py
What: Execute entity lookups against the MusicBrainz API via the CLI.
Why: Let users fetch and optionally project documents from the shell.
"""

from collections.abc import Iterable
from typing import Any, override

from mbapi.features.schema import SchemaRegistry
from mbapi.features.schema.catalog import release_group_types, release_statuses
from mbapi.platform.logging import logger
from mbapi.platform.musicbrainz.client import MusicBrainzClient
from mbapi.ui.cli.args.options import LookupArgs
from mbapi.ui.cli.commands.executor import CommandExecutor
from mbapi.ui.cli.display.document import DocumentDisplay


class LookupCommand(CommandExecutor):
    """Command for looking up one entity."""

    args: LookupArgs
    client: MusicBrainzClient
    display: DocumentDisplay

    def __init__(
        self,
        args: LookupArgs,
        client: MusicBrainzClient | None = None,
        registry: SchemaRegistry | None = None,
    ) -> None:
        super().__init__(registry)
        self.args = args
        self.client = client or MusicBrainzClient(registry=self.registry)
        self.display = DocumentDisplay()

    @override
    def execute(self) -> dict[str, Any]:
        """Execute the lookup command.

        Returns:
            The decoded (and, with ``--project``, projected) document.
        """
        args = self.args
        _ = self.warn_unknown_includes(args.entity_type, args.includes)
        _warn_unknown_filters("status", args.statuses, release_statuses())
        _warn_unknown_filters("type", args.release_types, release_group_types())
        lookup = self.client.lookup_projected if args.project else self.client.lookup
        document = lookup(
            args.entity_type,
            args.mbid,
            inc=args.includes,
            status=args.statuses or None,
            release_type=args.release_types or None,
        )
        self.display.show_document(document, quiet=args.quiet)
        return document


def _warn_unknown_filters(name: str, values: Iterable[str], known: frozenset[str]) -> None:
    # Unknown values are still sent.
    for value in values:
        if value.strip().lower() not in known:
            logger.warning("Unknown %s filter value %r", name, value)
