"""Database connections that import plain SQL dumps.

MySQL and PostgreSQL imports shell out to the vendor command line clients;
SQLite dumps are executed in-process.
"""

from __future__ import annotations

import os
import sqlite3
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import IO, Any

from ...domain.errors import ConfigurationError, RestoreError
from ...usecases.ports import Database

CommandRunner = Callable[..., "subprocess.CompletedProcess[str]"]


def _require(options: Mapping[str, Any], key: str, kind: str) -> str:
    value = options.get(key)
    if value is None or str(value).strip() == "":
        raise ConfigurationError(f"{kind} connections require a '{key}' option")
    return str(value)


class _CommandLineDatabase(Database, ABC):
    """Shared plumbing for databases restored through a client binary.

    Passwords reach the client through ``password_env_var`` so they never show
    up in the process list.
    """

    client_name: str = ""
    password_env_var: str = ""

    def __init__(self, options: Mapping[str, Any], *, runner: CommandRunner = subprocess.run) -> None:
        self.host = str(options.get("host", "localhost"))
        self.port = int(options.get("port", self.default_port()))
        self.user = str(options.get("user", ""))
        self.password = str(options.get("password", "") or "")
        self.database = _require(options, "database", self.client_name)
        self._runner = runner

    @staticmethod
    @abstractmethod
    def default_port() -> int: ...

    @abstractmethod
    def build_command(self, dump_path: Path) -> list[str]: ...

    def build_env(self) -> dict[str, str] | None:
        if not self.password:
            return None
        env = dict(os.environ)
        env[self.password_env_var] = self.password
        return env

    def uses_stdin(self) -> bool:
        return False

    def _run(self, command: Sequence[str], *, stdin: IO[str] | None) -> None:
        try:
            completed = self._runner(
                list(command),
                stdin=stdin,
                capture_output=True,
                text=True,
                env=self.build_env(),
                check=False,
            )
        except FileNotFoundError as exc:
            raise RestoreError(f"The '{command[0]}' client is not installed or not on PATH") from exc
        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exit code {completed.returncode}"
            raise RestoreError(f"{self.client_name} restore into '{self.database}' failed: {detail}")

    def restore(self, dump_path: Path) -> None:
        command = self.build_command(dump_path)
        if not self.uses_stdin():
            self._run(command, stdin=None)
            return
        with open(dump_path, "r", encoding="utf-8") as dump:
            self._run(command, stdin=dump)


class MySqlDatabase(_CommandLineDatabase):
    """Restore through the ``mysql`` client, piping the dump to stdin."""

    client_name = "mysql"
    password_env_var = "MYSQL_PWD"

    @staticmethod
    def default_port() -> int:
        return 3306

    def uses_stdin(self) -> bool:
        return True

    def build_command(self, dump_path: Path) -> list[str]:
        _ = dump_path
        command = ["mysql", f"--host={self.host}", f"--port={self.port}"]
        if self.user:
            command.append(f"--user={self.user}")
        command.append(self.database)
        return command


class PostgresqlDatabase(_CommandLineDatabase):
    """Restore through ``psql`` reading the dump with ``--file``."""

    client_name = "postgresql"
    password_env_var = "PGPASSWORD"

    @staticmethod
    def default_port() -> int:
        return 5432

    def build_command(self, dump_path: Path) -> list[str]:
        command = ["psql", f"--host={self.host}", f"--port={self.port}"]
        if self.user:
            command.append(f"--username={self.user}")
        command.extend([f"--dbname={self.database}", f"--file={dump_path}"])
        return command


class SqliteDatabase(Database):
    """Execute a SQL dump against a SQLite database file."""

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.path = Path(_require(options, "path", "sqlite")).expanduser()

    def restore(self, dump_path: Path) -> None:
        try:
            script = dump_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RestoreError(f"Could not read dump {dump_path.name}: {exc}") from exc

        conn = sqlite3.connect(self.path)
        try:
            conn.executescript(script)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise RestoreError(f"sqlite restore into '{self.path}' failed: {exc}") from exc
        finally:
            conn.close()


__all__ = ["CommandRunner", "MySqlDatabase", "PostgresqlDatabase", "SqliteDatabase"]
