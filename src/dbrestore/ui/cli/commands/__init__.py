"""Command execution package for CLI."""

from dbrestore.ui.cli.commands.listing import ListCommand
from dbrestore.ui.cli.commands.restore import RestoreCommand

__all__ = ["ListCommand", "RestoreCommand"]
