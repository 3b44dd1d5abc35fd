"""Command line argument handling package."""

from dbrestore.ui.cli.args.parser import ArgumentParser
from dbrestore.ui.cli.args.options import CLIArgs, ListArgs, RestoreArgs

__all__ = ["ArgumentParser", "CLIArgs", "ListArgs", "RestoreArgs"]
