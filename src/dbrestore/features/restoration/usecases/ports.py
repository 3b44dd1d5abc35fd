"""Ports for the restoration feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.models import FileEntry


class Filesystem(Protocol):
    """A storage service holding backup files."""

    def list_contents(self, path: str) -> list[FileEntry]:
        """Return the immediate entries at ``path``; missing directories yield an empty list."""

        ...

    def is_file(self, path: str) -> bool:
        """Return True when ``path`` points to an existing non-directory entry."""

        ...

    def fetch(self, path: str, destination: Path) -> Path:
        """Copy the file at ``path`` into the local ``destination`` directory."""

        ...


class FilesystemRegistry(Protocol):
    """Named storage services available for restores."""

    def list_providers(self) -> list[str]:
        ...

    def get(self, name: str) -> Filesystem:
        ...


class Database(Protocol):
    """A database connection able to import a plain dump file."""

    def restore(self, dump_path: Path) -> None:
        ...


class DatabaseRegistry(Protocol):
    """Named database connections available as restore targets."""

    def list_connections(self) -> list[str]:
        ...

    def get(self, name: str) -> Database:
        ...


class Compressor(Protocol):
    """Turns a stored backup file into a plain dump."""

    def decompress(self, path: Path) -> Path:
        """Return the path of the decompressed dump."""

        ...


class CompressorRegistry(Protocol):
    def get(self, name: str) -> Compressor:
        ...


class RestoreOperation(Protocol):
    """Execute a restore for fully resolved parameters."""

    def execute(self, source: str, source_path: str, database: str, compression: str) -> None:
        ...
