"""src/dbrestore/ui/cli/display/backups.py
What: Render storage listings as a table of restorable dumps.
Why: Share one table layout between the interactive prompt and the list command.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final, final

from rich import box
from rich.console import Console
from rich.table import Table

from dbrestore.features.restoration import FileEntry
from dbrestore.shared.formatting import format_bytes, format_timestamp

COLUMNS: Final[tuple[str, ...]] = ("Name", "Extension", "Size", "Created")


@final
class BackupListingDisplay:
    """Render file entries of a storage listing; directories are never shown."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @staticmethod
    def backup_files(entries: Iterable[FileEntry]) -> list[FileEntry]:
        """Keep only the file entries of a listing."""

        return [entry for entry in entries if entry.is_file]

    @staticmethod
    def build_rows(entries: Iterable[FileEntry]) -> list[list[str]]:
        return [
            [
                entry.basename,
                entry.extension,
                format_bytes(entry.size),
                format_timestamp(entry.timestamp),
            ]
            for entry in entries
            if entry.is_file
        ]

    def build_table(self, entries: Iterable[FileEntry]) -> Table:
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        for column in COLUMNS:
            table.add_column(column, justify="right" if column == "Size" else "left")
        for row in self.build_rows(entries):
            table.add_row(*row)
        return table

    def show(self, entries: Iterable[FileEntry]) -> bool:
        """Print the dumps table; returns False when there was nothing to show."""

        files = self.backup_files(entries)
        if not files:
            self.console.print("[yellow]No backups were found at this path.[/yellow]")
            return False

        self.console.print("[green]Available database dumps:[/green]")
        self.console.print(self.build_table(files))
        return True
