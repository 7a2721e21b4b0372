#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/logging_utils.py
"""Log output for the deckedit command line.

Library code only creates module loggers under the ``deckedit`` namespace;
handlers are installed by :func:`configure_logging`, which the CLI calls once
its arguments are parsed. Only the handlers it installed itself are replaced
on later calls, so handlers added by a host application or a test runner stay
in place.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "deckedit"

BRIEF_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers owned by configure_logging
_OWNED_ATTR = "_deckedit_handler"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_ATTR, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    logger_name: str = PACKAGE_LOGGER,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Send deckedit log records to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : int | str
        Level number or name, e.g. ``"DEBUG"``
    log_file : str, optional
        File that also receives the records (appended to)
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name
    logger_name : str, default "deckedit"
        Logger to configure; its module loggers inherit the handlers
    stream : TextIO, optional
        Console stream, ``sys.stderr`` by default

    Returns
    -------
    logging.Logger
        The configured logger

    """
    level = resolve_level(log_level)
    target = logging.getLogger(logger_name)
    target.setLevel(level)

    for handler in [h for h in target.handlers if getattr(h, _OWNED_ATTR, False)]:
        target.removeHandler(handler)
        handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(BRIEF_FORMAT)

    target.addHandler(_own(logging.StreamHandler(stream or sys.stderr), level, formatter))

    if log_file:
        try:
            target.addHandler(_own(logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter))
        except OSError as e:
            target.warning("Cannot write log file %s: %s", log_file, e)
        else:
            target.debug("Writing log records to %s", log_file)

    return target
