"""Logging setup shared by the locc command line and report runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

ROOT_LOGGER = "locc"
CONSOLE_FORMAT = "[locc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``locc`` or one of its children, e.g. ``locc.reports.xml``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route locc log records to the console and, optionally, a run log.

    The console shows INFO and above unless ``verbose`` is set. A ``log_file``
    always receives DEBUG records, so a quiet run still leaves a full account
    of which reports were written and where. Calling this again replaces the
    handlers installed by the previous call.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        logger.setLevel(console_level)
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    run_log = logging.FileHandler(log_file, encoding="utf-8")
    run_log.setLevel(logging.DEBUG)
    run_log.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(run_log)
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
