"""Filesystem adapter serving backups from a local directory tree."""

from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from ...domain.errors import ConfigurationError, RestoreError
from ...domain.models import EntryType, FileEntry
from ...usecases.ports import Filesystem


class LocalFilesystem(Filesystem):
    """Expose a local directory as a storage service; ``/`` maps to ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = root.expanduser().resolve()

    @classmethod
    def from_config(cls, options: Mapping[str, Any]) -> "LocalFilesystem":
        root = options.get("root")
        if not root:
            raise ConfigurationError("Local storage services require a 'root' option")
        return cls(Path(str(root)))

    def _resolve(self, path: str) -> Path | None:
        relative = PurePosixPath("/", path).relative_to("/")
        candidate = (self.root / relative).resolve()
        if candidate != self.root and not candidate.is_relative_to(self.root):
            return None
        return candidate

    def list_contents(self, path: str) -> list[FileEntry]:
        directory = self._resolve(path)
        if directory is None:
            return []
        try:
            children = sorted(directory.iterdir(), key=lambda child: child.name)
        except OSError:
            return []

        entries: list[FileEntry] = []
        for child in children:
            try:
                stat = child.stat()
            except OSError:
                continue
            is_dir = child.is_dir()
            entries.append(
                FileEntry(
                    basename=child.name,
                    type=EntryType.DIR if is_dir else EntryType.FILE,
                    extension="" if is_dir else child.suffix.lstrip("."),
                    size=0 if is_dir else stat.st_size,
                    timestamp=int(stat.st_mtime),
                )
            )
        return entries

    def is_file(self, path: str) -> bool:
        target = self._resolve(path)
        return target is not None and target.is_file()

    def fetch(self, path: str, destination: Path) -> Path:
        target = self._resolve(path)
        if target is None or not target.is_file():
            raise RestoreError(f"Backup file not found: {path}")
        local_copy = destination / target.name
        try:
            _ = shutil.copyfile(target, local_copy)
        except OSError as exc:
            raise RestoreError(f"Could not copy {path}: {exc}") from exc
        return local_copy


__all__ = ["LocalFilesystem"]
