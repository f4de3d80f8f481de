#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/logging_utils.py
"""Centralized logging setup for the textbridge command line.

The effective level comes from, in order: trace mode, an explicit level
(``--log-level``), the ``log_level`` key of the loaded configuration, and
finally :data:`textbridge.constants.DEFAULT_LOG_LEVEL`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Mapping, Optional

from textbridge.constants import DEFAULT_LOG_LEVEL

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

# chardet logs each detector it tries at DEBUG level
NOISY_LOGGERS = ("chardet",)


def resolve_log_level(log_level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).strip().upper(), logging.INFO)


def select_log_level(
    log_level: int | str | None = None,
    config: Optional[Mapping[str, Any]] = None,
    trace_mode: bool = False,
) -> int:
    """Pick the effective level from trace mode, an explicit level and the config."""
    if trace_mode:
        return logging.DEBUG
    if log_level is not None:
        return resolve_log_level(log_level)
    if config and config.get("log_level") is not None:
        return resolve_log_level(config["log_level"])
    return resolve_log_level(DEFAULT_LOG_LEVEL)


def configure_logging(
    log_level: int | str | None = None,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    config: Optional[Mapping[str, Any]] = None,
) -> logging.Logger:
    """Configure root logging handlers for the CLI.

    Parameters
    ----------
    log_level : int | str, optional
        Numeric logging level or string name (e.g., "INFO"). When omitted the
        ``log_level`` entry of ``config`` is used.
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        Force DEBUG, emit timestamps and logger names, and keep third-party
        detector chatter.
    config : Mapping, optional
        Loaded CLI configuration.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = select_log_level(log_level, config, trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if trace_mode else logging.WARNING)

    format_str = TRACE_FORMAT if trace_mode else SIMPLE_FORMAT
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(resolved_level)}")
    return root_logger
