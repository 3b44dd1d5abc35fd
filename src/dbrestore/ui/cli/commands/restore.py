"""Restore command implementation for the CLI."""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.console import Console

from dbrestore.application.services.restore_service import RestoreDatabaseService
from dbrestore.features.restoration import RestoreParameters
from dbrestore.ui.cli.args.options import RestoreArgs
from dbrestore.ui.cli.workflow.restore import RestoreWorkflow


@final
class RestoreCommand:
    """Command that resolves restore parameters interactively and runs the restore."""

    def __init__(
        self,
        args: RestoreArgs,
        *,
        service_factory: Callable[[], RestoreDatabaseService] | None = None,
        console: Console | None = None,
    ) -> None:
        self.args = args
        self._service_factory = service_factory or RestoreDatabaseService
        self._console = console or Console()

    def execute(self) -> RestoreParameters:
        """Execute the restore command."""

        self._console.print("[green]Starting restore process...[/green]")
        self._console.print("")

        service = self._service_factory()
        workflow = RestoreWorkflow(
            filesystems=service.filesystems,
            databases=service.databases,
            operation=service.operation,
            console=self._console,
        )
        return workflow.run(self.args.to_parameters())
