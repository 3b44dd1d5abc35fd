"""dbrestore - interactive database restores from stored backups."""

__version__ = "0.1.0"
