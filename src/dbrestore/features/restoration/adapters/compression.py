"""Decompressors for stored backup files."""

from __future__ import annotations

import gzip
import shutil
import zlib
from pathlib import Path

from ..domain.errors import RestoreError, UnknownProviderError
from ..domain.models import Compression
from ..usecases.ports import Compressor, CompressorRegistry


class NullCompressor(Compressor):
    """Backups stored as plain dumps."""

    def decompress(self, path: Path) -> Path:
        return path


class GzipCompressor(Compressor):
    """Backups stored as gzip streams."""

    def decompress(self, path: Path) -> Path:
        if path.suffix == ".gz":
            target = path.with_suffix("")
        else:
            target = path.with_name(path.name + ".out")
        try:
            with gzip.open(path, "rb") as compressed, open(target, "wb") as plain:
                shutil.copyfileobj(compressed, plain)
        except (OSError, EOFError, zlib.error) as exc:
            raise RestoreError(f"Could not decompress {path.name}: {exc}") from exc
        return target


class CompressorProvider(CompressorRegistry):
    """Map compression names onto decompressors."""

    def __init__(self) -> None:
        self._compressors: dict[Compression, Compressor] = {
            Compression.NONE: NullCompressor(),
            Compression.GZIP: GzipCompressor(),
        }

    def get(self, name: str) -> Compressor:
        try:
            compression = Compression.from_user_input(name)
        except ValueError as exc:
            raise UnknownProviderError("compression type", name, Compression.choices()) from exc
        return self._compressors[compression]


__all__ = ["CompressorProvider", "GzipCompressor", "NullCompressor"]
