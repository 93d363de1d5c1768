"""Command line interface for mbapi."""

import sys
from typing import final

from mbapi.platform.logging import logger
from mbapi.platform.musicbrainz.errors import ApiError, MusicBrainzError
from mbapi.ui.cli.args import ArgumentParser
from mbapi.ui.cli.args.options import CLIArgs, IncludesArgs, LookupArgs
from mbapi.ui.cli.commands import IncludesCommand, LookupCommand, ShapeCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, LookupArgs):
                _ = LookupCommand(args).execute()
            elif isinstance(args, IncludesArgs):
                _ = IncludesCommand(args).execute()
            else:
                _ = ShapeCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ApiError as e:
            logger.error("MusicBrainz API error (%s): %s", e.status_code, e.message)
            sys.exit(1)
        except MusicBrainzError as e:
            logger.error("%s", str(e))
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0


if __name__ == "__main__":
    sys.exit(main())
