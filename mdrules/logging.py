"""Logging setup shared by the pipeline and the mdrules CLI."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mdrules"
_CONSOLE_FORMAT = "[mdrules] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``mdrules.<name>``, or the package logger when ``name`` is empty."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger.

    ``quiet`` limits the console to warnings so commands that print machine
    readable output keep stdout and stderr uncluttered. The log file always
    records at least INFO, and DEBUG when ``verbose`` is set.
    """
    console_level = _console_level(verbose, quiet)
    file_level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
        logger.setLevel(min(console_level, file_level))
    else:
        logger.setLevel(console_level)
    return logger


__all__ = ["configure_logging", "get_logger"]
