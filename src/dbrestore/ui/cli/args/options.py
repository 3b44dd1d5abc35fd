"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from dbrestore.features.restoration import RestoreParameters


@final
@dataclass(slots=True)
class RestoreArgs:
    """Command line arguments for the ``restore`` subcommand; empty values are prompted for."""

    command: Literal["restore"]
    source: str
    source_path: str
    database: str
    compression: str
    verbose: bool
    quiet: bool

    def to_parameters(self) -> RestoreParameters:
        return RestoreParameters(
            source=self.source,
            source_path=self.source_path,
            database=self.database,
            compression=self.compression,
        )


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    source: str
    path: str
    verbose: bool
    quiet: bool


CLIArgs = RestoreArgs | ListArgs

__all__ = ["CLIArgs", "ListArgs", "RestoreArgs"]
