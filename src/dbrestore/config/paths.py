"""Locations of the configuration file, data directory and log file.

Everything lives under the repository root unless an environment variable
points elsewhere:

- ``DBRESTORE_CONFIG``: the TOML configuration file
  (default ``<repo_root>/config/config.toml``).
- ``DBRESTORE_DATA_DIR``: the data directory holding the default ``local``
  storage service (default ``<repo_root>/.data``).

Logs always go to ``<repo_root>/logs/dbrestore.log`` unless ``log_file`` is set
in the configuration.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_FILE: Final[str] = "DBRESTORE_CONFIG"
ENV_DATA_DIR: Final[str] = "DBRESTORE_DATA_DIR"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of ``explicit_path``, ``env[env_var]`` or the default.

    Blank environment values count as unset. The result is always absolute.
    """

    chosen: Path | str | None = explicit_path
    if chosen is None and env_var:
        value = (env if env is not None else os.environ).get(env_var, "").strip()
        chosen = value or None
    path = Path(chosen) if chosen is not None else default_factory()
    return path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (this module by default) to the project root.

    Falls back to the current working directory for installed copies that
    carry no root marker.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_data_dir() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=ENV_DATA_DIR,
        default_factory=lambda: _detect_repo_root() / ".data",
    )


def default_backup_dir() -> Path:
    """Root directory of the ``local`` storage service created by default."""

    return default_data_dir() / "backups"


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "dbrestore.log"


__all__ = [
    "ENV_CONFIG_FILE",
    "ENV_DATA_DIR",
    "default_backup_dir",
    "default_config_path",
    "default_data_dir",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
