"""Interactive workflows driven from the CLI."""

from dbrestore.ui.cli.workflow.restore import RestoreWorkflow

__all__ = ["RestoreWorkflow"]
