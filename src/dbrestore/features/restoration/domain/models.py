"""Data structures describing a database restore request and backup listings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class RestoreField(str, Enum):
    """Required restore parameters, declared in prompting priority order."""

    SOURCE = "source"
    SOURCE_PATH = "source_path"
    DATABASE = "database"
    COMPRESSION = "compression"

    @property
    def flag(self) -> str:
        """Command line flag that supplies this field."""

        return "--" + self.value.replace("_", "-")

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


REQUIRED_FIELDS: Final[tuple[RestoreField, ...]] = (
    RestoreField.SOURCE,
    RestoreField.SOURCE_PATH,
    RestoreField.DATABASE,
    RestoreField.COMPRESSION,
)


class Compression(str, Enum):
    """Encodings a stored backup file may use."""

    NONE = "none"
    GZIP = "gzip"

    @staticmethod
    def from_user_input(value: str) -> "Compression":
        """Translate raw CLI input into the matching compression type."""

        normalized = value.strip().lower()
        if normalized == "null":
            return Compression.NONE
        for compression in Compression:
            if compression.value == normalized:
                return compression
        valid: Final[str] = ", ".join(c.value for c in Compression)
        msg = f"Unsupported compression type '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    @staticmethod
    def choices() -> list[str]:
        return [compression.value for compression in Compression]


class EntryType(str, Enum):
    """Kinds of entries a storage listing may contain."""

    FILE = "file"
    DIR = "dir"


@dataclass(slots=True, frozen=True)
class FileEntry:
    """Describe a single entry returned by a storage service listing."""

    basename: str
    type: EntryType
    extension: str = ""
    size: int = 0
    timestamp: int = 0

    @property
    def is_file(self) -> bool:
        return self.type is EntryType.FILE


@dataclass(slots=True)
class RestoreParameters:
    """Mutable record threaded through one restore workflow run.

    Empty strings mark values that still have to be resolved.
    """

    source: str = ""
    source_path: str = ""
    database: str = ""
    compression: str = ""

    def value_of(self, field: RestoreField) -> str:
        """Return the current value stored for ``field``."""

        return str(getattr(self, field.value))

    def assign(self, field: RestoreField, value: str) -> None:
        """Store ``value`` for ``field``."""

        setattr(self, field.value, value)

    def reset(self) -> None:
        """Clear every field so all of them are resolved again."""

        for field in REQUIRED_FIELDS:
            self.assign(field, "")


def missing_fields(params: RestoreParameters) -> tuple[RestoreField, ...]:
    """Return the empty fields of ``params`` in prompting priority order."""

    return tuple(field for field in REQUIRED_FIELDS if not params.value_of(field))


class WorkflowState(Enum):
    """States of the interactive resolve/confirm loop."""

    RESOLVING = "resolving"
    CONFIRMING = "confirming"
    DONE = "done"
