"""Registry of configured storage services."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

from ...domain.errors import ConfigurationError, UnknownProviderError
from ...usecases.ports import Filesystem, FilesystemRegistry
from .local import LocalFilesystem

FILESYSTEM_FACTORIES: Final[dict[str, Callable[[Mapping[str, Any]], Filesystem]]] = {
    "local": LocalFilesystem.from_config,
}


class FilesystemProvider(FilesystemRegistry):
    """Build storage service adapters lazily from configuration tables."""

    def __init__(self, configs: Mapping[str, Mapping[str, Any]]) -> None:
        self._configs = dict(configs)
        self._instances: dict[str, Filesystem] = {}

    def list_providers(self) -> list[str]:
        return list(self._configs)

    def get(self, name: str) -> Filesystem:
        if name in self._instances:
            return self._instances[name]
        if name not in self._configs:
            raise UnknownProviderError("storage service", name, self.list_providers())

        options = self._configs[name]
        kind = str(options.get("type", "")).strip().lower()
        factory = FILESYSTEM_FACTORIES.get(kind)
        if factory is None:
            valid = ", ".join(FILESYSTEM_FACTORIES)
            raise ConfigurationError(
                f"Storage service '{name}' has unsupported type '{kind}'. Valid types: {valid}"
            )
        filesystem = factory(options)
        self._instances[name] = filesystem
        return filesystem


__all__ = ["FILESYSTEM_FACTORIES", "FilesystemProvider"]
