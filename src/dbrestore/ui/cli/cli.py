"""Command line interface for dbrestore."""

import sys
from collections.abc import Sequence
from typing import Final, final

from dbrestore.features.restoration import ConfigurationError, RestoreWorkflowError
from dbrestore.platform.logging import logger
from dbrestore.ui.cli.args import ArgumentParser
from dbrestore.ui.cli.args.options import CLIArgs, ListArgs
from dbrestore.ui.cli.commands import ListCommand, RestoreCommand

EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130

# Exception text is shown as-is; brackets in it are not rich markup.
_VERBATIM: Final[dict[str, bool]] = {"markup": False}


@final
class CommandProcessor:
    """Parse arguments, run one subcommand and map failures to exit codes."""

    @staticmethod
    def run(args: CLIArgs) -> None:
        """Dispatch parsed arguments to their command."""

        if isinstance(args, ListArgs):
            _ = ListCommand(args).execute()
        else:
            _ = RestoreCommand(args).execute()

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: Arguments to parse instead of ``sys.argv`` (for testing).
        """
        try:
            CommandProcessor.run(ArgumentParser.process_args(args_list))
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except ConfigurationError as e:
            logger.error("%s", e, extra=_VERBATIM)
            logger.info("Check the storage services and database connections in your config.toml")
            sys.exit(EXIT_FAILURE)
        except RestoreWorkflowError as e:
            logger.error("%s", e, extra=_VERBATIM)
            sys.exit(EXIT_FAILURE)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e), extra=_VERBATIM)
            sys.exit(EXIT_FAILURE)


def main() -> int:
    """Console script entry point; failures leave through ``sys.exit``."""
    CommandProcessor.process_command()
    return 0
