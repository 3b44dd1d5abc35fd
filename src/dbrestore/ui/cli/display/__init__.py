"""Display management for CLI interface."""

from dbrestore.ui.cli.display.backups import BackupListingDisplay
from dbrestore.ui.cli.display.restore_result import RestoreResultDisplay

__all__ = ["BackupListingDisplay", "RestoreResultDisplay"]
