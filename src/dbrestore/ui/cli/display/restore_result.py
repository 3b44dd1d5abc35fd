"""Display utilities for restore answers and outcomes."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import final

from rich.console import Console
from rich.markup import escape

from dbrestore.features.restoration import RestoreParameters


def dump_name(source_path: str) -> str:
    """Return the file name portion of a storage path."""

    return PurePosixPath(source_path).name


@final
class RestoreResultDisplay:
    """Render the answers awaiting confirmation and the final restore summary."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_answers(self, params: RestoreParameters) -> None:
        self.console.print("[green]You've filled in the following answers:[/green]")
        self.console.print(f"Source: [yellow]{escape(params.source)}[/yellow]")
        self.console.print(f"Source path: [yellow]{escape(params.source_path)}[/yellow]")
        self.console.print(f"Database dump: [yellow]{escape(dump_name(params.source_path))}[/yellow]")
        self.console.print(f"Database: [yellow]{escape(params.database)}[/yellow]")
        self.console.print(f"Compression: [yellow]{escape(params.compression)}[/yellow]")
        self.console.print("")

    @staticmethod
    def success_message(params: RestoreParameters) -> str:
        return (
            f'Backup "{dump_name(params.source_path)}" from service "{params.source}" '
            f'has been successfully restored to "{params.database}".'
        )

    def show_success(self, params: RestoreParameters) -> None:
        self.console.print("")
        self.console.print(f"[bold green]{escape(self.success_message(params))}[/bold green]")
