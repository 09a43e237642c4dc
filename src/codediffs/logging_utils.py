"""Logging setup for the codediffs command.

Library code only creates module loggers below the ``codediffs`` namespace and
never installs handlers. The command line entry point calls
:func:`configure_logging` once, which attaches handlers to the package logger
so that applications embedding codediffs keep their own root configuration.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "codediffs"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``, falling back to WARNING."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach the command line handlers to the ``codediffs`` logger.

    Handlers installed by an earlier call are replaced, so calling this twice
    does not duplicate messages. Records are not propagated to the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. "DEBUG")
    log_file : str, optional
        File receiving a copy of the log messages
    trace_mode : bool, default False
        Include timestamps and logger names

    Returns
    -------
    logging.Logger
        The configured package logger

    """
    level = resolve_log_level(log_level)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    # Diff output goes to stdout, so logs must never share it
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
