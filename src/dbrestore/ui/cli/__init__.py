"""Command line interface package."""

from dbrestore.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
