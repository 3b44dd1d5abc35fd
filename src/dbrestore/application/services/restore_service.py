"""Application service wiring configured backends into the restore use case."""

from __future__ import annotations

from logging import Logger, getLogger
from typing import final

from dbrestore.config.config import Config
from dbrestore.features.restoration import RestoreProcedure
from dbrestore.features.restoration.adapters.compression import CompressorProvider
from dbrestore.features.restoration.adapters.database import DatabaseProvider
from dbrestore.features.restoration.adapters.filesystem import FilesystemProvider
from dbrestore.features.restoration.usecases.ports import (
    CompressorRegistry,
    DatabaseRegistry,
    FilesystemRegistry,
    RestoreOperation,
)


@final
class RestoreDatabaseService:
    """Application façade exposing the registries and restore operation to the CLI."""

    filesystems: FilesystemRegistry
    databases: DatabaseRegistry
    compressors: CompressorRegistry
    operation: RestoreOperation

    def __init__(
        self,
        *,
        config: Config | None = None,
        filesystems: FilesystemRegistry | None = None,
        databases: DatabaseRegistry | None = None,
        compressors: CompressorRegistry | None = None,
        operation: RestoreOperation | None = None,
        logger: Logger | None = None,
    ) -> None:
        if (filesystems is None or databases is None) and config is None:
            config = Config.load()

        if filesystems is None:
            assert config is not None
            filesystems = FilesystemProvider(config.filesystems)
        if databases is None:
            assert config is not None
            databases = DatabaseProvider(config.databases)

        self.filesystems = filesystems
        self.databases = databases
        self.compressors = compressors or CompressorProvider()
        self.operation = operation or RestoreProcedure(
            filesystems=self.filesystems,
            databases=self.databases,
            compressors=self.compressors,
            working_path=config.working_path if config is not None else None,
            logger=logger or getLogger(__name__),
        )
