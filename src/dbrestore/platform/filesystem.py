"""Scratch space for downloaded and decompressed dumps."""

from __future__ import annotations

import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` if needed; refuse paths occupied by a file."""

    if directory.exists() and not directory.is_dir():
        raise NotADirectoryError(f"Working path is not a directory: {directory}")
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@contextmanager
def scratch_directory(working_path: Path | None = None) -> Iterator[Path]:
    """Yield a private ``dbrestore-*`` directory removed on exit, even after errors.

    It is created under ``working_path`` when given, otherwise in the system
    temporary directory.
    """

    parent = str(ensure_directory(working_path)) if working_path is not None else None
    with tempfile.TemporaryDirectory(prefix="dbrestore-", dir=parent) as scratch:
        yield Path(scratch)


__all__ = ["ensure_directory", "scratch_directory"]
