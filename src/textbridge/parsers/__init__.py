#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/parsers/__init__.py
"""Parsers for configuration text embedded in documents."""

from textbridge.parsers.ini import IniState, LenientIniParser, find_ini_config, read_ini, strip_value_quotes

__all__ = [
    "IniState",
    "LenientIniParser",
    "find_ini_config",
    "read_ini",
    "strip_value_quotes",
]
