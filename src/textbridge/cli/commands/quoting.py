#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/commands/quoting.py
"""Quote and dequote commands for the textbridge CLI."""

from __future__ import annotations

import argparse
import logging

from textbridge.cli.commands.shared import add_global_arguments, parse_command_args
from textbridge.cli.output import print_error
from textbridge.codecs.quoting import dequote, enquote
from textbridge.codecs.utf8 import decode_utf8
from textbridge.constants import (
    DEFAULT_QUOTE_CHAR,
    EXIT_NO_RESULT,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    SINGLE_QUOTE,
)
from textbridge.options.quoting import QuoteOptions

logger = logging.getLogger(__name__)


def _create_quote_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbridge quote",
        description="Print TEXT as a printable-ASCII quoted literal.",
    )
    parser.add_argument("text", help="Text to quote (or hex digits with --bytes-hex)")
    parser.add_argument("--single", action="store_true", help="Use single quotes")
    parser.add_argument("--bytes-hex", action="store_true", help="Treat TEXT as hex-encoded bytes, e.g. 00ff7f")
    add_global_arguments(parser)
    return parser


def _create_dequote_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbridge dequote",
        description="Decode a quoted literal produced by 'textbridge quote'.",
    )
    parser.add_argument("literal", help="Quoted literal, including its quotes")
    parser.add_argument("--binary", action="store_true", help="Print the decoded bytes as hex")
    add_global_arguments(parser)
    return parser


def handle_quote_command(args: list[str] | None = None) -> int:
    """Handle the ``quote`` command."""
    result = parse_command_args(_create_quote_parser, args)
    if isinstance(result, int):
        return result
    parsed, config = result

    try:
        options = QuoteOptions(quote_char=config.get("quote_char", DEFAULT_QUOTE_CHAR))
    except ValueError as e:
        print_error(f"Invalid quote_char in configuration: {e}")
        return EXIT_VALIDATION_ERROR
    if parsed.single:
        options = options.create_updated(quote_char=SINGLE_QUOTE)

    data: str | bytes = parsed.text
    if parsed.bytes_hex:
        try:
            data = bytes.fromhex(parsed.text)
        except ValueError as e:
            print_error(f"Invalid hex bytes {parsed.text!r}: {e}")
            return EXIT_VALIDATION_ERROR

    print(enquote(data, options.quote_char))
    return EXIT_SUCCESS


def handle_dequote_command(args: list[str] | None = None) -> int:
    """Handle the ``dequote`` command.

    Returns 1 when the literal is malformed, or when its bytes are not
    valid UTF-8 and ``--binary`` was not given.
    """
    result = parse_command_args(_create_dequote_parser, args)
    if isinstance(result, int):
        return result
    parsed, _config = result

    data = dequote(parsed.literal)
    if data is None:
        print_error(f"Malformed quoted literal: {parsed.literal}")
        return EXIT_NO_RESULT

    if parsed.binary:
        print(data.hex())
        return EXIT_SUCCESS

    text = decode_utf8(data)
    if text is None:
        print_error("Decoded bytes are not valid UTF-8; use --binary to see them")
        return EXIT_NO_RESULT

    print(text)
    return EXIT_SUCCESS
