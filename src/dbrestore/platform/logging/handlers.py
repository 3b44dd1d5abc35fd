"""Rich console handler rendering restore progress events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RestoreEventRichHandler(RichHandler):
    """Rich handler that renders ``restore_event`` records with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "restore.fetch": ("📥", "cyan", "Fetching "),
        "restore.decompress": ("🗜️", "magenta", "Decompressing "),
        "restore.import": ("🛢️", "blue", "Importing "),
        "restore.complete": ("✅", "green", "Restored "),
        "restore.error": ("❌", "red", "Failed "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments, separators highlighted."""

        pure_path: PurePath = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = anchor
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_restore_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured restore events with dedicated styling."""

        event = getattr(record, "restore_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        details: list[str] = []
        for key in ("source", "database", "compression"):
            value = getattr(record, key, None)
            if value:
                details.append(f"{key}={value}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for restore events."""

        event_text = self._render_restore_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)
