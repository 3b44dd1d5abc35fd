"""Shared fixtures providing fake storage services and database connections."""

from __future__ import annotations

import pytest

from dbrestore.features.restoration import EntryType, FileEntry
from restore_fakes import (
    FakeDatabaseRegistry,
    FakeFilesystem,
    FakeFilesystemRegistry,
    RecordingOperation,
)

BACKUP_TIMESTAMP = 1_704_067_200


@pytest.fixture
def backup_listing() -> dict[str, list[FileEntry]]:
    """Directory listings of the ``s3`` storage service."""

    return {
        "/backups": [
            FileEntry("dump.sql", EntryType.FILE, "sql", 2048, BACKUP_TIMESTAMP),
            FileEntry("dump.sql.gz", EntryType.FILE, "gz", 1536, BACKUP_TIMESTAMP),
            FileEntry("old", EntryType.DIR, "", 0, BACKUP_TIMESTAMP),
        ],
        "/empty": [
            FileEntry("archive", EntryType.DIR, "", 0, BACKUP_TIMESTAMP),
        ],
    }


@pytest.fixture
def filesystems(backup_listing: dict[str, list[FileEntry]]) -> FakeFilesystemRegistry:
    return FakeFilesystemRegistry(
        {
            "s3": FakeFilesystem(backup_listing),
            "local": FakeFilesystem(
                {"/": [FileEntry("nightly.sql", EntryType.FILE, "sql", 10, BACKUP_TIMESTAMP)]}
            ),
        }
    )


@pytest.fixture
def databases() -> FakeDatabaseRegistry:
    return FakeDatabaseRegistry(["default", "reporting"])


@pytest.fixture
def operation() -> RecordingOperation:
    return RecordingOperation()
