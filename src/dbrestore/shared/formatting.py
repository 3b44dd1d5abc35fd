"""Summary: Human-readable renderings of byte counts and file timestamps.
Why: Backup listings show sizes and creation times in a compact, stable form.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

BYTE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")
_UNIT_BASE: Final[int] = 1024


def format_bytes(size: int, precision: int = 2) -> str:
    """Render ``size`` using binary units, e.g. ``1536 -> "1.5 KB"``.

    The unit is the largest power of 1024 not exceeding ``size`` (capped at TB);
    the value is rounded to ``precision`` decimals with trailing zeros dropped.
    """

    size = max(size, 0)
    unit_index = 0
    scaled = size
    while scaled >= _UNIT_BASE and unit_index < len(BYTE_UNITS) - 1:
        scaled //= _UNIT_BASE
        unit_index += 1

    value = round(size / _UNIT_BASE**unit_index, precision)
    rendered = f"{value:.{precision}f}".rstrip("0").rstrip(".") if precision > 0 else f"{value:.0f}"
    return f"{rendered} {BYTE_UNITS[unit_index]}"


def format_timestamp(timestamp: int) -> str:
    """Render epoch seconds in local time as ``"Mon 5 2024  13:04:05"``."""

    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%a} {moment.day} {moment:%Y  %H:%M:%S}"


__all__ = ["BYTE_UNITS", "format_bytes", "format_timestamp"]
