"""Interactive resolution and confirmation of restore parameters.

The workflow alternates between two states until the operator accepts:

* RESOLVING: discard invalid values, then prompt for every empty field in the
  fixed order source, source path, database, compression. Passes repeat until
  nothing is missing.
* CONFIRMING: show the answers and ask for a yes/no. Rejecting clears every
  field and returns to RESOLVING; accepting runs the restore once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from logging import Logger, getLogger
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from dbrestore.features.restoration import (
    Compression,
    ConfigurationError,
    RestoreField,
    RestoreParameters,
    WorkflowState,
    missing_fields,
)
from dbrestore.features.restoration.usecases.ports import (
    DatabaseRegistry,
    FilesystemRegistry,
    RestoreOperation,
)
from dbrestore.ui.cli.display.backups import BackupListingDisplay
from dbrestore.ui.cli.display.restore_result import RestoreResultDisplay

DEFAULT_DIRECTORY = "/"


def join_storage_path(directory: str, basename: str) -> str:
    """Compose ``{directory}/{basename}`` without doubling the separator."""

    return f"{directory.rstrip('/')}/{basename}"


@final
class RestoreWorkflow:
    """Resolve a complete, confirmed set of restore parameters and execute it."""

    def __init__(
        self,
        *,
        filesystems: FilesystemRegistry,
        databases: DatabaseRegistry,
        operation: RestoreOperation,
        console: Console | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._filesystems = filesystems
        self._databases = databases
        self._operation = operation
        self._console = console or Console()
        self._logger = logger or getLogger(__name__)
        self._listing = BackupListingDisplay(self._console)
        self._result = RestoreResultDisplay(self._console)
        self._prompts: dict[RestoreField, Callable[[RestoreParameters], None]] = {
            RestoreField.SOURCE: self._ask_source,
            RestoreField.SOURCE_PATH: self._ask_source_path,
            RestoreField.DATABASE: self._ask_database,
            RestoreField.COMPRESSION: self._ask_compression,
        }

    def run(self, initial: RestoreParameters) -> RestoreParameters:
        """Resolve, confirm and execute a restore starting from ``initial``.

        Args:
            initial: Values supplied on the command line; empty strings are prompted for.

        Returns:
            RestoreParameters: The confirmed values handed to the restore operation.

        Raises:
            ConfigurationError: When no storage service or database connection is configured.
            RestoreWorkflowError: Propagated unchanged from the restore operation.
        """

        params = replace(initial)
        state = WorkflowState.RESOLVING

        while state is not WorkflowState.DONE:
            if state is WorkflowState.RESOLVING:
                self._resolve(params)
                state = WorkflowState.CONFIRMING
            elif self._confirm(params):
                state = WorkflowState.DONE
            else:
                params.reset()
                self._console.print("")
                self._console.print("[green]Answers have been reset and re-asking questions.[/green]")
                self._console.print("")
                state = WorkflowState.RESOLVING

        self._logger.debug(
            "Restoring %s from %s into %s (compression=%s)",
            params.source_path,
            params.source,
            params.database,
            params.compression,
        )
        self._operation.execute(
            params.source,
            params.source_path,
            params.database,
            params.compression,
        )
        self._result.show_success(params)
        return params

    def _resolve(self, params: RestoreParameters) -> None:
        first_pass = True
        while True:
            self._discard_invalid(params)
            missing = missing_fields(params)
            if not missing:
                return

            self._announce_missing(missing, first_pass=first_pass)
            first_pass = False
            for field in missing:
                self._prompts[field](params)

    def _announce_missing(self, missing: tuple[RestoreField, ...], *, first_pass: bool) -> None:
        flags = ", ".join(field.flag for field in missing)
        if first_pass:
            self._console.print("[green]These arguments haven't been filled yet:[/green]")
            self._console.print(flags)
            self._console.print("[green]The following questions will fill these in for you.[/green]")
        else:
            self._console.print("[yellow]Some answers are still missing:[/yellow]")
            self._console.print(flags)
        self._console.print("")

    def _discard_invalid(self, params: RestoreParameters) -> None:
        """Clear values that do not name a configured backend or an existing backup."""

        if params.source and params.source not in self._filesystems.list_providers():
            self._discard(params, RestoreField.SOURCE, "is not a configured storage service")

        if params.database and params.database not in self._databases.list_connections():
            self._discard(params, RestoreField.DATABASE, "is not a configured database connection")

        if params.compression:
            try:
                params.compression = Compression.from_user_input(params.compression).value
            except ValueError:
                self._discard(params, RestoreField.COMPRESSION, "is not a supported compression type")

        if params.source and params.source_path:
            filesystem = self._filesystems.get(params.source)
            if not filesystem.is_file(params.source_path):
                self._discard(
                    params,
                    RestoreField.SOURCE_PATH,
                    f"is not a backup file on storage service '{params.source}'",
                )

    def _discard(self, params: RestoreParameters, field: RestoreField, reason: str) -> None:
        value = params.value_of(field)
        self._logger.debug("%s '%s' %s", field.label, value, reason, extra={"markup": False})
        self._console.print(
            f"[yellow]{escape(field.label)} '{escape(value)}' {escape(reason)}; it will be asked again.[/yellow]"
        )
        params.assign(field, "")

    def _choose(self, heading: str, question: str, choices: list[str], default: str) -> str:
        self._console.print(f"[green]{heading}[/green]")
        self._console.print(", ".join(choices))
        answer = Prompt.ask(
            question,
            choices=choices,
            default=default,
            show_choices=False,
            console=self._console,
        )
        self._console.print("")
        return answer

    def _ask_source(self, params: RestoreParameters) -> None:
        providers = self._filesystems.list_providers()
        if not providers:
            raise ConfigurationError("No storage services are configured.")
        params.source = self._choose(
            "Available storage services:",
            "From which storage service do you want to choose?",
            providers,
            providers[0],
        )

    def _ask_source_path(self, params: RestoreParameters) -> None:
        directory = Prompt.ask(
            "From which path do you want to select?",
            default=DEFAULT_DIRECTORY,
            console=self._console,
        )
        self._console.print("")

        filesystem = self._filesystems.get(params.source)
        files = self._listing.backup_files(filesystem.list_contents(directory))
        self._logger.debug("Found %d backup file(s) at %s on %s", len(files), directory, params.source)
        if not self._listing.show(files):
            return

        self._console.print("")
        basename = Prompt.ask(
            "Which database dump do you want to restore?",
            choices=[entry.basename for entry in files],
            show_choices=False,
            console=self._console,
        )
        self._console.print("")
        params.source_path = join_storage_path(directory, basename)

    def _ask_database(self, params: RestoreParameters) -> None:
        connections = self._databases.list_connections()
        if not connections:
            raise ConfigurationError("No database connections are configured.")
        params.database = self._choose(
            "Available database connections:",
            "Into which database connection do you want to restore?",
            connections,
            connections[0],
        )

    def _ask_compression(self, params: RestoreParameters) -> None:
        params.compression = self._choose(
            "Available compression types:",
            "Which compression type was used for the backup?",
            Compression.choices(),
            Compression.NONE.value,
        )

    def _confirm(self, params: RestoreParameters) -> bool:
        self._result.show_answers(params)
        return Confirm.ask("Are these correct?", console=self._console)


__all__ = ["DEFAULT_DIRECTORY", "RestoreWorkflow", "join_storage_path"]
