"""Rich console handler for request lifecycle events.

Where: platform/logging/handlers.py
What: Render structured request and rate-limit events with icons and colours.
Why: Keep console output readable while file logs stay plain text.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class MBApiRichHandler(RichHandler):
    """Rich handler that highlights MusicBrainz request events."""

    _REQUEST_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "request.start": ("🌐", "blue"),
        "request.success": ("✅", "green"),
        "request.api_error": ("❌", "red"),
        "ratelimit.wait": ("⏳", "yellow"),
        "ratelimit.deadline": ("🕒", "cyan"),
        "ratelimit.rejected": ("⛔", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_request_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records carrying a ``request_event`` extra."""

        event = getattr(record, "request_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._REQUEST_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        details: list[str] = []
        endpoint = getattr(record, "endpoint", None)
        if isinstance(endpoint, str) and endpoint:
            details.append(endpoint)
        status = getattr(record, "status_code", None)
        if isinstance(status, int):
            details.append(f"status={status}")
        delay = getattr(record, "delay_seconds", None)
        if isinstance(delay, (int, float)):
            details.append(f"{delay:.2f}s")
        if details:
            _ = text.append(" [" + ", ".join(details) + "]", style=Style(color="white", dim=True))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for request events."""

        request_text = self._render_request_message(record, message)
        if request_text is not None:
            return request_text
        return super().render_message(record, message)


__all__ = ["MBApiRichHandler"]
