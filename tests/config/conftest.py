"""Fixtures isolating configuration files inside a temporary repository root."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Provide a temporary repository root and a fresh configuration singleton."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import dbrestore.config.paths as paths
    from dbrestore.config.config import Config

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("DBRESTORE_DATA_DIR", raising=False)
    monkeypatch.delenv("DBRESTORE_CONFIG", raising=False)

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield tmp_path
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
