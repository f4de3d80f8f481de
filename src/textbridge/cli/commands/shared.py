#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/commands/shared.py
"""Argument and setup helpers shared by the textbridge subcommands."""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable, Dict, Tuple, Union

from textbridge.cli.config import load_cli_config
from textbridge.cli.output import print_error
from textbridge.constants import DEFAULT_LOG_LEVEL, EXIT_FILE_ERROR, EXIT_VALIDATION_ERROR
from textbridge.exceptions import ConfigError
from textbridge.logging_utils import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_version() -> str:
    """Get the version of the textbridge package."""
    try:
        return version("textbridge")
    except PackageNotFoundError:
        from textbridge import __version__

        return __version__


def add_global_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the logging and configuration flags every subcommand accepts."""
    group = parser.add_argument_group("global options")
    group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}, or log_level from the config file)",
    )
    group.add_argument("--log-file", type=str, default=None, help="Also write log output to this file")
    group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    group.add_argument("--config", type=str, default=None, help="Path to a configuration file (TOML, YAML or JSON)")


def parse_command_args(
    parser_factory: Callable[[], argparse.ArgumentParser],
    args: list[str] | None,
) -> Union[Tuple[argparse.Namespace, Dict[str, Any]], int]:
    """Parse a subcommand's arguments, load configuration and set up logging.

    Returns
    -------
    tuple or int
        ``(parsed_args, config)`` on success. An int is an exit code the
        command must return immediately (``--help``, a usage error or an
        unreadable configuration file).

    """
    parser = parser_factory()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        # argparse calls sys.exit() on --help or error
        return e.code if isinstance(e.code, int) else EXIT_VALIDATION_ERROR

    try:
        config = load_cli_config(parsed.config)
    except ConfigError as e:
        print_error(e.message)
        return EXIT_FILE_ERROR

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace, config=config)
    logger.debug(f"Running {parser.prog} with {vars(parsed)}")
    return parsed, config
