#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for textbridge.

This module centralizes the fixed tokens, lookup tables and default values
shared by the codecs, the lenient INI parser and the typed value
interpreters.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Quoting - Quote characters and escape tables
3. Lenient INI Parsing - Reserved keys, quote families and name filters
4. Length Units - Unit tokens and inch conversion factors
5. CLI Defaults - Exit codes and configuration file names
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

QuoteChar = Literal['"', "'"]


class LengthUnit(str, Enum):
    """Length unit tokens understood by the typed value interpreters.

    The values are the exact tokens callers pass around, so ``LengthUnit("cm")``
    and ``LengthUnit.CM`` are interchangeable.
    """

    NONE = "NONE"
    INCH = '"'
    CM = "cm"
    MM = "mm"
    CICERO = "cicero"
    PICA = "pica"
    PIXEL = "px"
    POINT = "pt"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Quoting
# =============================================================================

DOUBLE_QUOTE: QuoteChar = '"'
SINGLE_QUOTE: QuoteChar = "'"
QUOTE_CHARS: frozenset[str] = frozenset({DOUBLE_QUOTE, SINGLE_QUOTE})
DEFAULT_QUOTE_CHAR: QuoteChar = DOUBLE_QUOTE

# Characters with a dedicated two-character escape (quote chars handled separately)
NAMED_ESCAPES = MappingProxyType({0x5C: "\\\\", 0x0A: "\\n", 0x0D: "\\r", 0x09: "\\t"})

# Escape letters that decode to a control byte
ESCAPE_BYTES = MappingProxyType({"t": 0x09, "r": 0x0D, "n": 0x0A})

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Highest codepoint the UTF-8 codec handles (no 4-byte sequences)
MAX_CODEPOINT = 0xFFFF

# =============================================================================
# Lenient INI Parsing
# =============================================================================

# Reserved section attribute holding the unnormalized header text. The
# uppercase letters keep it out of the normalized attribute key space.
RAW_SECTION_NAME_KEY = "__rawSectionName"

DEFAULT_DUPLICATE_SEPARATOR = "_"

COMMENT_CHAR = "#"
SECTION_OPEN_CHAR = "["
SECTION_CLOSE_CHAR = "]"
ASSIGNMENT_CHAR = "="
LINE_END_CHARS: frozenset[str] = frozenset({"\r", "\n"})

# Quote families for stripping one outer pair off a value. Curly quotes of
# either direction pair with each other and with the ASCII quote of the family.
DOUBLE_QUOTE_FAMILY: frozenset[str] = frozenset({'"', "“", "”"})
SINGLE_QUOTE_FAMILY: frozenset[str] = frozenset({"'", "‘", "’"})
VALUE_QUOTE_FAMILIES: tuple[frozenset[str], ...] = (DOUBLE_QUOTE_FAMILY, SINGLE_QUOTE_FAMILY)

WHITESPACE_RE = re.compile(r"\s+")
SECTION_NAME_STRIP_RE = re.compile(r"[^-A-Za-z0-9_$:]+")
ATTRIBUTE_NAME_STRIP_RE = re.compile(r"[^-A-Za-z0-9_$]+")

# =============================================================================
# Length Units
# =============================================================================

UNIT_TO_INCH_FACTORS = MappingProxyType(
    {
        LengthUnit.NONE: 1.0,
        LengthUnit.INCH: 1.0,
        LengthUnit.CM: 1.0 / 2.54,
        LengthUnit.MM: 1.0 / 25.4,
        LengthUnit.CICERO: 0.17762,
        LengthUnit.PICA: 1.0 / 12.0,
        LengthUnit.PIXEL: 1.0 / 72.0,
        LengthUnit.POINT: 1.0 / 72.0,
    }
)

# Points per pica/cicero in the "<n>p<points>" and "<n>c<points>" notations
POINTS_PER_PICA = 6.0

PICAS_RE = re.compile(r"^(\d+)p((\d*)(\.(\d+)?)?)?$", re.ASCII)
CICEROS_RE = re.compile(r"^(\d+)c((\d*)(\.(\d+)?)?)?$", re.ASCII)
NUMBER_ONLY_RE = re.compile(r"^([\d.]+).*$", re.DOTALL | re.ASCII)
UNIT_ONLY_RE = re.compile(r"^[\d.]+\s*(.*)$", re.DOTALL | re.ASCII)

# Leading numeric prefixes; anything after the number is ignored
FLOAT_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
INT_PREFIX_RE = re.compile(r"^[+-]?\d+", re.ASCII)

# =============================================================================
# CLI Defaults
# =============================================================================

EXIT_SUCCESS = 0
EXIT_NO_RESULT = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

CONFIG_ENV_VAR = "TEXTBRIDGE_CONFIG"
CONFIG_FILENAMES = (".textbridge.toml", ".textbridge.yaml", ".textbridge.yml", ".textbridge.json")

DEFAULT_LOG_LEVEL = "WARNING"

# Encoding detection for byte input that is not valid UTF-8
DEFAULT_CHARDET_SAMPLE_SIZE = 8192
DEFAULT_CHARDET_CONFIDENCE = 0.7
FALLBACK_ENCODINGS = ("utf-8", "latin-1")
