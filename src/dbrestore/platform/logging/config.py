"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``dbrestore`` logger from a rich console handler and an optional rotating file.
Why: The CLI can attach the file only after the configuration has named it.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from dbrestore.config.paths import default_log_file

from .handlers import RestoreEventRichHandler

LOGGER_NAME: Final[str] = "dbrestore"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps prompts and tables on stdout free of log lines
    handler = RestoreEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Args:
        log_file: Rotating log destination; ``None`` logs to the console only.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the log file.

    Returns:
        logging.Logger: The ``dbrestore`` logger with fresh handlers.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    app_logger.propagate = False

    for stale in list(app_logger.handlers):
        app_logger.removeHandler(stale)
        stale.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))
    return app_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
