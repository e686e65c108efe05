"""Logger hierarchy for brandkit.

Log records are debug tracing only; user-facing progress and error lines are
printed by the commands themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "brandkit"
_CONSOLE_FORMAT = "[brandkit] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``brandkit.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send brandkit records to stderr and, with ``log_file``, append them to that file.

    The file always records DEBUG so a run can be diagnosed after the fact;
    stderr shows DEBUG only with ``verbose``.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(console_level)
        return logger

    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
