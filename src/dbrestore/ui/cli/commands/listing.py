"""src/dbrestore/ui/cli/commands/listing.py
What: Implement the ``list`` command showing restorable dumps on a storage service.
Why: Let operators browse backups without entering the interactive restore.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.console import Console

from dbrestore.application.services.restore_service import RestoreDatabaseService
from dbrestore.features.restoration import ConfigurationError
from dbrestore.ui.cli.args.options import ListArgs
from dbrestore.ui.cli.display.backups import BackupListingDisplay


@final
class ListCommand:
    """Render the backup table for one storage service directory."""

    def __init__(
        self,
        args: ListArgs,
        *,
        service_factory: Callable[[], RestoreDatabaseService] | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._service_factory = service_factory or RestoreDatabaseService
        self._console = console or Console()

    def execute(self) -> bool:
        """Print the listing; returns False when no backups were found."""

        service = self._service_factory()
        source = self._args.source
        if not source:
            providers = service.filesystems.list_providers()
            if not providers:
                raise ConfigurationError("No storage services are configured.")
            source = providers[0]

        filesystem = service.filesystems.get(source)
        self._console.print(f"[bold]{source}[/bold]: {self._args.path}")
        display = BackupListingDisplay(self._console)
        return display.show(filesystem.list_contents(self._args.path))
