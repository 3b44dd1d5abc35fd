"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from dbrestore.config.config import Config
from dbrestore.features.restoration import Compression
from dbrestore.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from dbrestore.ui.cli.args.options import CLIArgs, ListArgs, RestoreArgs


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
            prog="dbrestore",
            description="dbrestore - Restore a database from a stored backup file.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        restore_parser = subparsers.add_parser(
            "restore",
            help="Restore a database backup; missing options are asked interactively",
        )
        _ = restore_parser.add_argument(
            "--source",
            type=str,
            default="",
            help="Storage service holding the backup",
            metavar="NAME",
        )
        _ = restore_parser.add_argument(
            "--source-path",
            type=str,
            default="",
            help="Path of the backup file on the storage service",
            metavar="PATH",
        )
        _ = restore_parser.add_argument(
            "--database",
            type=str,
            default="",
            help="Database connection to restore into",
            metavar="NAME",
        )
        _ = restore_parser.add_argument(
            "--compression",
            type=str,
            default="",
            help="Compression used by the backup file (none, gzip)",
            metavar="TYPE",
        )
        ArgumentParser._add_verbosity_flags(restore_parser)

        list_parser = subparsers.add_parser(
            "list",
            help="List backup files available on a storage service",
        )
        _ = list_parser.add_argument(
            "--source",
            type=str,
            default="",
            help="Storage service to list (defaults to the first configured one)",
            metavar="NAME",
        )
        _ = list_parser.add_argument(
            "--path",
            type=str,
            default="/",
            help="Directory on the storage service to list",
            metavar="PATH",
        )
        ArgumentParser._add_verbosity_flags(list_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed restore information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation of a supplied option fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file or DEFAULT_LOG_FILE,
            console_level=ArgumentParser._console_level(parsed_args),
        )

        command: str = parsed_args.command

        if command == "restore":
            return ArgumentParser._process_restore(parsed_args)

        if command == "list":
            return ArgumentParser._process_list(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _console_level(parsed_args: argparse.Namespace) -> int:
        if parsed_args.quiet:
            return logging.ERROR
        return logging.DEBUG if parsed_args.verbose else logging.INFO

    @staticmethod
    def _process_restore(parsed_args: argparse.Namespace) -> RestoreArgs:
        compression = parsed_args.compression.strip()
        if compression:
            try:
                compression = Compression.from_user_input(compression).value
            except ValueError as e:
                logger.error("%s", e, extra={"markup": False})
                sys.exit(1)

        return RestoreArgs(
            command="restore",
            source=parsed_args.source.strip(),
            source_path=parsed_args.source_path.strip(),
            database=parsed_args.database.strip(),
            compression=compression,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_list(parsed_args: argparse.Namespace) -> ListArgs:
        return ListArgs(
            command="list",
            source=parsed_args.source.strip(),
            path=parsed_args.path.strip() or "/",
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
