# Where: dbrestore.shared.__init__
# What: Provide a concise import surface for shared formatting helpers.
# Why: Keep CLI rendering and log output on the same units and date format.

"""Shared cross-cutting utilities exposed at the package level."""

from .formatting import format_bytes, format_timestamp

__all__ = ["format_bytes", "format_timestamp"]
