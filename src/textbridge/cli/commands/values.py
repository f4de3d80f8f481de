#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/commands/values.py
"""Value interpretation commands (``length`` and ``bool``) for the textbridge CLI."""

from __future__ import annotations

import argparse

from textbridge.cli.commands.shared import add_global_arguments, parse_command_args
from textbridge.cli.output import print_error
from textbridge.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR, LengthUnit
from textbridge.interpreters import get_boolean, get_float_with_unit, resolve_unit_name
from textbridge.options.length import LengthOptions


def _create_length_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbridge length",
        description="Interpret VALUE as a length such as 12mm, 3.5in or 2p3 and print its magnitude.",
    )
    parser.add_argument("value", help="Length to interpret")
    parser.add_argument(
        "--unit",
        type=str,
        default=None,
        help="Unit to convert to (in, cm, mm, cicero, pica, px, pt). Without a unit no conversion happens.",
    )
    add_global_arguments(parser)
    return parser


def _create_bool_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbridge bool",
        description="Interpret VALUE as a boolean and print true or false.",
    )
    parser.add_argument("value", help="Value to interpret (yes, true, 1, no, 0...)")
    add_global_arguments(parser)
    return parser


def handle_length_command(args: list[str] | None = None) -> int:
    """Handle the ``length`` command."""
    result = parse_command_args(_create_length_parser, args)
    if isinstance(result, int):
        return result
    parsed, config = result

    try:
        options = LengthOptions(default_unit=config.get("default_unit", LengthUnit.NONE))
    except ValueError as e:
        print_error(f"Invalid default_unit in configuration: {e}")
        return EXIT_VALIDATION_ERROR

    target = options.default_unit
    if parsed.unit is not None:
        resolved = resolve_unit_name(parsed.unit)
        if resolved is None:
            print_error(f"Unknown unit: {parsed.unit}")
            return EXIT_VALIDATION_ERROR
        target = resolved

    print(f"{get_float_with_unit(parsed.value, target):.6g}")
    return EXIT_SUCCESS


def handle_bool_command(args: list[str] | None = None) -> int:
    """Handle the ``bool`` command."""
    result = parse_command_args(_create_bool_parser, args)
    if isinstance(result, int):
        return result
    parsed, _config = result

    print("true" if get_boolean(parsed.value) else "false")
    return EXIT_SUCCESS
