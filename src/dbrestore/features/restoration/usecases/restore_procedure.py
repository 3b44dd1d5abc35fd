"""Use case fetching, decompressing and importing a stored backup."""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import Path

from dbrestore.platform.filesystem import scratch_directory

from ..domain.errors import RestoreError
from .ports import CompressorRegistry, DatabaseRegistry, FilesystemRegistry, RestoreOperation


class RestoreProcedure(RestoreOperation):
    """Restore a backup file from a storage service into a database connection."""

    _filesystems: FilesystemRegistry
    _databases: DatabaseRegistry
    _compressors: CompressorRegistry
    _working_path: Path | None
    _logger: Logger

    def __init__(
        self,
        *,
        filesystems: FilesystemRegistry,
        databases: DatabaseRegistry,
        compressors: CompressorRegistry,
        working_path: Path | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._filesystems = filesystems
        self._databases = databases
        self._compressors = compressors
        self._working_path = working_path
        self._logger = logger or getLogger(__name__)

    def execute(self, source: str, source_path: str, database: str, compression: str) -> None:
        """Run the restore; the local working copy is removed afterwards."""

        filesystem = self._filesystems.get(source)
        target = self._databases.get(database)
        compressor = self._compressors.get(compression)

        with scratch_directory(self._working_path) as scratch:
            try:
                self._logger.info(
                    "Fetching %s from %s",
                    source_path,
                    source,
                    extra={"restore_event": "restore.fetch", "source_path": source_path, "source": source},
                )
                local_copy = filesystem.fetch(source_path, scratch)

                self._logger.debug(
                    "Decompressing %s",
                    local_copy.name,
                    extra={
                        "restore_event": "restore.decompress",
                        "source_path": local_copy.name,
                        "compression": compression,
                    },
                )
                dump = compressor.decompress(local_copy)

                self._logger.info(
                    "Importing %s into %s",
                    dump.name,
                    database,
                    extra={"restore_event": "restore.import", "source_path": dump.name, "database": database},
                )
                target.restore(dump)
            except RestoreError as exc:
                self._logger.debug(
                    "Restore failed: %s",
                    exc,
                    extra={
                        "restore_event": "restore.error",
                        "source_path": source_path,
                        "error_message": str(exc),
                    },
                )
                raise

        self._logger.debug(
            "Restored %s into %s",
            source_path,
            database,
            extra={"restore_event": "restore.complete", "source_path": source_path, "database": database},
        )


__all__ = ["RestoreProcedure"]
