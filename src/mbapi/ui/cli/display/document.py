"""src/mbapi/ui/cli/display/document.py
What: Print lookup documents and include listings to the console.
Why: Keep stdout machine readable while logs go to stderr.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, final

from rich.console import Console


@final
class DocumentDisplay:
    """Handles JSON document output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize document display."""
        self.console = console or Console()

    def show_document(self, document: Any, *, quiet: bool = False) -> None:
        """Print ``document`` as indented JSON.

        Args:
            document: Decoded JSON value.
            quiet: Whether to suppress output.
        """
        if quiet:
            return
        self.console.print_json(json.dumps(document, ensure_ascii=False), indent=2)

    def show_includes(self, entity_type: str, includes: Iterable[str]) -> None:
        """List the include parameters accepted for ``entity_type``."""

        ordered = sorted(includes)
        self.console.print(f"[bold]Includes for {entity_type}[/bold] ({len(ordered)}):")
        for include in ordered:
            self.console.print(f"  • {include}", highlight=False)


__all__ = ["DocumentDisplay"]
