"""Logging setup for the doctoc command line.

Progress messages go to stderr so that TOCs printed with ``--stdout`` can be
piped without log noise.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "doctoc"
CONSOLE_FORMAT = "[doctoc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``doctoc.<name>``, or the package logger itself."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity switches to a level; ``verbose`` beats ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach a stderr handler, and optionally a file handler, to the doctoc logger.

    Calling it again replaces the handlers installed by the previous call.
    """
    level = level_for(verbose=verbose, quiet=quiet)
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger", "level_for"]
