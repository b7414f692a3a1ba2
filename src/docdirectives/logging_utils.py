#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docdirectives/logging_utils.py
"""Logging setup for the docdirectives command line.

Library modules only create loggers (``logging.getLogger(__name__)``); the
handlers are installed here, on the ``docdirectives`` package logger, when
the CLI starts.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "docdirectives"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int or str
        Numeric level or level name such as ``"DEBUG"``
    log_file : str, optional
        Append log records to this file as well
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The ``docdirectives`` logger

    """
    level = _resolve_level(log_level)
    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else DEFAULT_FORMAT,
        datefmt=TRACE_DATE_FORMAT if trace_mode else None,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # stdout carries the transformed tree
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    package_logger.addHandler(stderr_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger


__all__ = [
    "configure_logging",
]
