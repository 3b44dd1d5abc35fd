"""Storage service adapters."""

from .local import LocalFilesystem
from .provider import FilesystemProvider

__all__ = ["FilesystemProvider", "LocalFilesystem"]
