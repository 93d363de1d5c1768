"""Command line argument handling package."""

from mbapi.ui.cli.args.parser import ArgumentParser
from mbapi.ui.cli.args.options import CLIArgs, IncludesArgs, LookupArgs, ShapeArgs

__all__ = ["ArgumentParser", "CLIArgs", "IncludesArgs", "LookupArgs", "ShapeArgs"]
