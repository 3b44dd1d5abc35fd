"""Persistence helpers for the configuration file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Database passwords are stored in the configuration file.
CONFIG_FILE_MODE = 0o600


def write_text_file(path: Path, content: str, *, mode: int = CONFIG_FILE_MODE) -> None:
    """Replace ``path`` with ``content`` in one step, readable only by its owner.

    The text goes to a sibling temporary file first so an interrupted save
    never leaves a truncated configuration behind.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            _ = handle.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["CONFIG_FILE_MODE", "write_text_file"]
