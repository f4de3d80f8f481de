#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/options/__init__.py
"""Option dataclasses for the parser, codecs and interpreters."""

from textbridge.options.base import BaseParserOptions, CloneFrozenMixin
from textbridge.options.ini import IniParserOptions
from textbridge.options.length import LengthOptions
from textbridge.options.quoting import QuoteOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "IniParserOptions",
    "LengthOptions",
    "QuoteOptions",
]
