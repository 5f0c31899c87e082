#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2html/logging_utils.py
"""Logging setup for the lex2html command line.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
install handlers; handlers are installed here, once, by the CLI.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    # getLevelName returns "Level <name>" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(trace_mode: bool, rich_console: bool) -> logging.Handler:
    if rich_console:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=trace_mode,
            show_path=trace_mode,
            rich_tracebacks=trace_mode,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    handler = logging.StreamHandler(sys.stderr)
    if trace_mode:
        handler.setFormatter(logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    rich_console: bool = False,
) -> logging.Logger:
    """Install the CLI's log handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (``"INFO"``); unknown names
        fall back to INFO
    log_file : str, optional
        File that receives a copy of every message, always in the
        timestamped format. A file that cannot be opened is reported and
        skipped.
    trace_mode : bool, default False
        Timestamps and logger names on the console
    rich_console : bool, default False
        Colorized console output through ``rich``

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = _console_handler(trace_mode, rich_console)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            root_logger.warning(f"Could not open log file {log_file}: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT))
            root_logger.addHandler(file_handler)
            root_logger.debug(f"Logging to file: {log_file}")

    return root_logger


__all__ = ["configure_logging"]
