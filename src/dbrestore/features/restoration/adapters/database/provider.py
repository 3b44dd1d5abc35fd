"""Registry of configured database connections."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from typing import Any, Final

from ...domain.errors import ConfigurationError, UnknownProviderError
from ...usecases.ports import Database, DatabaseRegistry
from .engines import CommandRunner, MySqlDatabase, PostgresqlDatabase, SqliteDatabase

DATABASE_TYPES: Final[tuple[str, ...]] = ("mysql", "postgresql", "sqlite")


class DatabaseProvider(DatabaseRegistry):
    """Build database connections lazily from configuration tables."""

    def __init__(
        self,
        configs: Mapping[str, Mapping[str, Any]],
        *,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        self._configs = dict(configs)
        self._runner = runner
        self._instances: dict[str, Database] = {}

    def list_connections(self) -> list[str]:
        return list(self._configs)

    def get(self, name: str) -> Database:
        if name in self._instances:
            return self._instances[name]
        if name not in self._configs:
            raise UnknownProviderError("database connection", name, self.list_connections())

        options = self._configs[name]
        kind = str(options.get("type", "")).strip().lower()
        if kind == "mysql":
            database: Database = MySqlDatabase(options, runner=self._runner)
        elif kind in {"postgresql", "pgsql", "postgres"}:
            database = PostgresqlDatabase(options, runner=self._runner)
        elif kind == "sqlite":
            database = SqliteDatabase(options)
        else:
            valid = ", ".join(DATABASE_TYPES)
            raise ConfigurationError(
                f"Database connection '{name}' has unsupported type '{kind}'. Valid types: {valid}"
            )
        self._instances[name] = database
        return database


__all__ = ["DATABASE_TYPES", "DatabaseProvider"]
