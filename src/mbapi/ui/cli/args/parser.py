"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from mbapi.config.config import Config
from mbapi.features.schema.catalog import ENTITY_TYPES
from mbapi.platform.logging import logger, setup_logger
from mbapi.ui.cli.args.options import CLIArgs, IncludesArgs, LookupArgs, ShapeArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="mbapi - Include-aware MusicBrainz API lookups.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        lookup_parser = subparsers.add_parser(
            "lookup",
            help="Look up an entity by MBID and print the JSON document",
        )
        ArgumentParser._add_entity_type(lookup_parser)
        _ = lookup_parser.add_argument(
            "mbid",
            type=str,
            help="MusicBrainz identifier of the entity",
            metavar="MBID",
        )
        ArgumentParser._add_includes(lookup_parser)
        _ = lookup_parser.add_argument(
            "--status",
            nargs="+",
            default=[],
            metavar="STATUS",
            help="Only include releases with these statuses",
        )
        _ = lookup_parser.add_argument(
            "--type",
            nargs="+",
            default=[],
            dest="release_types",
            metavar="TYPE",
            help="Only include release groups of these types",
        )
        _ = lookup_parser.add_argument(
            "--project",
            action="store_true",
            help="Drop fields the requested includes do not entitle",
        )
        _ = lookup_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show request and rate limit details",
        )
        _ = lookup_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        includes_parser = subparsers.add_parser(
            "includes",
            help="List the include parameters accepted for an entity type",
        )
        ArgumentParser._add_entity_type(includes_parser)

        shape_parser = subparsers.add_parser(
            "shape",
            help="Show the document shape produced by a set of includes",
        )
        ArgumentParser._add_entity_type(shape_parser)
        ArgumentParser._add_includes(shape_parser)
        _ = shape_parser.add_argument(
            "--depth",
            type=int,
            default=3,
            help="Expand nested schemas up to this depth",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "lookup":
            return LookupArgs(
                command="lookup",
                entity_type=parsed_args.entity_type,
                mbid=parsed_args.mbid,
                includes=list(parsed_args.inc),
                statuses=list(parsed_args.status),
                release_types=list(parsed_args.release_types),
                project=bool(parsed_args.project),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "includes":
            return IncludesArgs(command="includes", entity_type=parsed_args.entity_type)

        if command == "shape":
            if parsed_args.depth < 1:
                parser.error("--depth must be at least 1")
            return ShapeArgs(
                command="shape",
                entity_type=parsed_args.entity_type,
                includes=list(parsed_args.inc),
                depth=parsed_args.depth,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_entity_type(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "entity_type",
            type=str,
            choices=ENTITY_TYPES,
            help="Entity type such as artist or release-group",
            metavar="ENTITY_TYPE",
        )

    @staticmethod
    def _add_includes(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--inc",
            nargs="+",
            default=[],
            metavar="INCLUDE",
            help="Include parameters, e.g. --inc aliases artist-rels",
        )
