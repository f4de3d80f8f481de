#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/commands/__init__.py
"""CLI command handlers for textbridge.

Each subcommand owns its argument parser. Handlers are imported lazily in
:func:`dispatch_command` so ``--help`` and ``--version`` stay fast.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)

COMMANDS = {
    "ini": "Parse INI-style text leniently and print the result",
    "quote": "Quote text or bytes as a printable-ASCII literal",
    "dequote": "Decode a quoted literal",
    "length": "Interpret a length such as 12mm or 2p3, optionally converting it",
    "bool": "Interpret a value as a boolean",
}


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Run the subcommand named by the first argument.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int or None
        Exit code if a subcommand was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    command, command_args = args[0], args[1:]

    if command == "ini":
        from textbridge.cli.commands.ini import handle_ini_command

        return handle_ini_command(command_args)

    if command == "quote":
        from textbridge.cli.commands.quoting import handle_quote_command

        return handle_quote_command(command_args)

    if command == "dequote":
        from textbridge.cli.commands.quoting import handle_dequote_command

        return handle_dequote_command(command_args)

    if command == "length":
        from textbridge.cli.commands.values import handle_length_command

        return handle_length_command(command_args)

    if command == "bool":
        from textbridge.cli.commands.values import handle_bool_command

        return handle_bool_command(command_args)

    return None
