"""Logging setup for the plugdoc command-line interface.

The library itself only creates module loggers; handlers are installed here,
once, by :func:`plugdoc.cli.main`. Records go to stderr so they never mix with
converted text or colored output on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from plugdoc.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, NOISY_LOGGERS

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str | None = None) -> int:
    """Resolve a numeric logging level.

    An explicit ``log_level`` wins, then ``PLUGDOC_LOG_LEVEL``, then
    ``WARNING``. Unrecognized level names also resolve to ``WARNING``.

    Parameters
    ----------
    log_level : int | str, optional
        Numeric level or level name such as ``"debug"``

    Returns
    -------
    int
        Numeric logging level

    """
    if isinstance(log_level, int):
        return log_level

    name = log_level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.getLevelName(DEFAULT_LOG_LEVEL)


def configure_logging(
    log_level: int | str | None = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the CLI's log handlers on the root logger.

    Calling this again replaces the previous handlers.

    Parameters
    ----------
    log_level : int | str, optional
        Level to log at; see :func:`resolve_log_level`.
    log_file : str, optional
        Also append records to this file. If it cannot be opened a warning is
        logged and only stderr is used.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Per-request chatter from the HTTP client is only useful when debugging
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
