#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/commands/ini.py
"""INI inspection command for the textbridge CLI.

Parses a file with the lenient parser and prints the result as canonical INI
text, JSON, or rich tables.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from textbridge.cli.commands.shared import add_global_arguments, parse_command_args
from textbridge.cli.output import print_document, print_error, print_rich_document
from textbridge.constants import EXIT_FILE_ERROR, EXIT_NO_RESULT, EXIT_SUCCESS
from textbridge.document import IniDocument
from textbridge.exceptions import FileError
from textbridge.parsers.ini import LenientIniParser
from textbridge.utils.text import normalize_section_name

logger = logging.getLogger(__name__)


def _create_ini_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbridge ini",
        description="Parse INI-style text leniently and print what was understood.",
    )
    parser.add_argument("file", help="File to parse, or - to read standard input")
    parser.add_argument("--section", type=str, default=None, help="Only print this section")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print JSON instead of INI text")
    output.add_argument("--rich", action="store_true", help="Use rich terminal output")
    add_global_arguments(parser)
    return parser


def handle_ini_command(args: list[str] | None = None) -> int:
    """Handle the ``ini`` command.

    Parameters
    ----------
    args : list[str], optional
        Arguments following the command name

    Returns
    -------
    int
        0 on success, 1 when nothing (or not the requested section) was
        found, 2 for usage errors, 3 when the file cannot be read

    """
    result = parse_command_args(_create_ini_parser, args)
    if isinstance(result, int):
        return result
    parsed, config = result

    parser = LenientIniParser()
    try:
        if parsed.file == "-":
            document = parser.parse(sys.stdin.buffer.read())
        else:
            document = parser.parse(Path(parsed.file))
    except FileError as e:
        print_error(e.message)
        return EXIT_FILE_ERROR

    if document is None:
        print_error(f"No sections found in {parsed.file}")
        return EXIT_NO_RESULT

    section_name = parsed.section or config.get("section")
    if section_name:
        section_name = str(section_name)
        key = section_name if section_name in document else normalize_section_name(section_name)
        if key not in document:
            print_error(f"Section [{section_name}] not found in {parsed.file}")
            return EXIT_NO_RESULT
        document = IniDocument({key: document[key]})

    logger.info(f"Parsed {len(document)} section(s) from {parsed.file}")

    if parsed.rich:
        print_rich_document(document)
    else:
        print_document(document, as_json=parsed.json)
    return EXIT_SUCCESS
