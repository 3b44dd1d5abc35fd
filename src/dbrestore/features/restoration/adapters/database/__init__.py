"""Database connection adapters."""

from .engines import MySqlDatabase, PostgresqlDatabase, SqliteDatabase
from .provider import DatabaseProvider

__all__ = ["DatabaseProvider", "MySqlDatabase", "PostgresqlDatabase", "SqliteDatabase"]
