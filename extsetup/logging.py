"""Loggers for setup runs.

Interactive output goes through the prompter; these loggers carry diagnostics
only, so the console handler is quiet unless ``--verbose`` is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "extsetup"

CONSOLE_FORMAT = "[extsetup] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``extsetup.<name>``, or the package logger when no name is given."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console and optional file handlers on the package logger.

    The console shows warnings, or everything with ``verbose``. A ``log_file``
    always receives debug records. Calling this again replaces the handlers.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False
    logger.handlers.clear()

    logger.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT))
    if log_file is not None:
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)
        )
    return logger


__all__ = ["configure_logging", "get_logger"]
