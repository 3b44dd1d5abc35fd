"""Summary: Error hierarchy raised by the restore workflow and its collaborators.
Why: Let the CLI surface expected failures verbatim and abort cleanly.
"""

from __future__ import annotations


class RestoreWorkflowError(Exception):
    """Base class for expected restore failures."""


class ConfigurationError(RestoreWorkflowError):
    """Raised when storage services or database connections are misconfigured."""


class UnknownProviderError(ConfigurationError):
    """Raised when a storage service or database connection name is not configured."""

    def __init__(self, kind: str, name: str, available: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.available = available
        listed = ", ".join(available) if available else "none configured"
        super().__init__(f"Unknown {kind} '{name}'. Available: {listed}")


class RestoreError(RestoreWorkflowError):
    """Raised when fetching, decompressing or importing a backup fails."""


__all__ = [
    "ConfigurationError",
    "RestoreError",
    "RestoreWorkflowError",
    "UnknownProviderError",
]
