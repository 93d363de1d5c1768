"""Command execution package for CLI."""

from mbapi.ui.cli.commands.executor import CommandExecutor
from mbapi.ui.cli.commands.includes import IncludesCommand
from mbapi.ui.cli.commands.lookup import LookupCommand
from mbapi.ui.cli.commands.shape import ShapeCommand

__all__ = [
    "CommandExecutor",
    "IncludesCommand",
    "LookupCommand",
    "ShapeCommand",
]
