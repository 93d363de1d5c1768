"""Display management for CLI interface."""

from mbapi.ui.cli.display.document import DocumentDisplay
from mbapi.ui.cli.display.shape import ShapeDisplay, format_type

__all__ = ["DocumentDisplay", "ShapeDisplay", "format_type"]
