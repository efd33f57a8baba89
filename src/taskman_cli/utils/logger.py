"""Application log for taskman.

Records go to a rotating file under the platform's user log directory and
never to the terminal, so command output stays exactly what was asked for.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "taskman_cli"
_LOG_FILE = "taskman.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Path of the active log file (the directory may not exist yet)."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_file_handler(logger: logging.Logger) -> logging.FileHandler | None:
    """Return the handler writing *logger* to the current log file, if attached.

    Handlers installed by anything else (test capture, embedding apps) are
    ignored.
    """
    target = os.path.abspath(get_log_file())
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler) and (
            handler.baseFilename == target
        ):
            return handler
    return None


def _make_file_handler(log_file: Path) -> logging.handlers.RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def get_logger() -> logging.Logger:
    """Return the application logger, attaching the file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if get_file_handler(logger) is None:
        logger.addHandler(_make_file_handler(get_log_file()))
    logger.propagate = False

    _logger = logger
    return _logger
