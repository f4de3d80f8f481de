#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/__init__.py
"""Command-line interface for textbridge.

Examples
--------
Inspect the settings typed into a text frame export::

    $ textbridge ini settings.txt --section "Page Setup"

Print the same as JSON or as rich tables::

    $ textbridge ini settings.txt --json
    $ textbridge ini settings.txt --rich

Quote a string for a generated script, and decode it again::

    $ textbridge quote 'Café "Zürich"'
    "Caf\\u00e9 \\"Z\\u00fcrich\\""
    $ textbridge dequote '"Caf\\u00e9"'
    Café

Convert a length::

    $ textbridge length 2p3 --unit in
    0.208333

Configuration
-------------
Defaults come from ``.textbridge.toml``, ``.textbridge.yaml``,
``.textbridge.yml`` or ``.textbridge.json`` in the working directory or a
parent, a ``[tool.textbridge]`` table in ``pyproject.toml``, or the same
files in the home directory. ``TEXTBRIDGE_CONFIG`` or ``--config`` names a
file explicitly. Command-line flags always win.

"""

from __future__ import annotations

import argparse
import sys

from textbridge.cli.commands import COMMANDS, dispatch_command
from textbridge.cli.commands.shared import get_version
from textbridge.constants import EXIT_VALIDATION_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level parser used for ``--help``, ``--version`` and unknown commands."""
    epilog = "\n".join(f"  {name:<10} {summary}" for name, summary in COMMANDS.items())
    parser = argparse.ArgumentParser(
        prog="textbridge",
        description="Text and data codecs for scripts that drive layout applications.",
        epilog=f"commands:\n{epilog}\n\nRun 'textbridge <command> --help' for command options.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-v", action="version", version=f"textbridge {get_version()}")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    if args is None:
        args = sys.argv[1:]

    result = dispatch_command(args)
    if result is not None:
        return result

    # Only --help, --version, no command or an unknown command get here
    parser = create_parser()
    try:
        parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_VALIDATION_ERROR

    parser.print_usage(sys.stderr)
    return EXIT_VALIDATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
