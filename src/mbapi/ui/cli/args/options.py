"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class LookupArgs:
    """Command line arguments for the ``lookup`` subcommand."""

    command: Literal["lookup"]
    entity_type: str
    mbid: str
    includes: list[str]
    statuses: list[str]
    release_types: list[str]
    project: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class IncludesArgs:
    """Command line arguments for the ``includes`` subcommand."""

    command: Literal["includes"]
    entity_type: str


@final
@dataclass(slots=True)
class ShapeArgs:
    """Command line arguments for the ``shape`` subcommand."""

    command: Literal["shape"]
    entity_type: str
    includes: list[str]
    depth: int


CLIArgs = LookupArgs | IncludesArgs | ShapeArgs

__all__ = ["CLIArgs", "IncludesArgs", "LookupArgs", "ShapeArgs"]
