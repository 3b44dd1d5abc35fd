"""Public surface for the restoration feature."""

from .domain.errors import (
    ConfigurationError,
    RestoreError,
    RestoreWorkflowError,
    UnknownProviderError,
)
from .domain.models import (
    REQUIRED_FIELDS,
    Compression,
    EntryType,
    FileEntry,
    RestoreField,
    RestoreParameters,
    WorkflowState,
    missing_fields,
)
from .usecases.restore_procedure import RestoreProcedure

__all__ = [
    "REQUIRED_FIELDS",
    "Compression",
    "ConfigurationError",
    "EntryType",
    "FileEntry",
    "RestoreError",
    "RestoreField",
    "RestoreParameters",
    "RestoreProcedure",
    "RestoreWorkflowError",
    "UnknownProviderError",
    "WorkflowState",
    "missing_fields",
]
