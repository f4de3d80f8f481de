#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/__init__.py
"""textbridge - text and data codecs for scripts that drive layout applications.

Scripts that automate desktop publishing tools pass data back and forth as
generated script text, and read their settings from INI-like notes typed into
the documents they work on. textbridge provides the pieces for both sides of
that exchange.

Key Features
------------
- UTF-8 encoding and decoding limited to the Basic Multilingual Plane
- Reversible quoting of strings and bytes into printable 7-bit ASCII literals
- A lenient INI-style parser that never rejects input
- Typed interpretation of values: booleans, numeric arrays and lengths in
  inches, centimeters, millimeters, picas, ciceros, pixels or points
- Raw byte strings and base64 helpers
- A ``textbridge`` command line for quick inspection

Requirements
------------
- Python 3.10+

Examples
--------
Quote a value for embedding in generated script text:

    >>> from textbridge import double_quote, dequote_text
    >>> literal = double_quote("Café\\n")
    >>> literal
    '"Caf\\\\u00e9\\\\n"'
    >>> dequote_text(literal)
    'Café\\n'

Read settings from a text frame:

    >>> from textbridge import read_ini
    >>> doc = read_ini("[Export]\\nresolution = 300\\nbleed = 3mm\\n")
    >>> doc["export"].get_int("resolution")
    300
    >>> round(doc["export"].get_length("bleed", "pt"), 4)
    8.5039

"""

__version__ = "0.3.0"

from textbridge.codecs import (
    base64_decode,
    base64_encode,
    bytes_to_raw_string,
    decode_utf8,
    dequote,
    dequote_text,
    double_quote,
    encode_utf8,
    enquote,
    raw_string_to_bytes,
    single_quote,
)
from textbridge.constants import LengthUnit
from textbridge.document import IniDocument, IniSection, render_ini
from textbridge.exceptions import (
    ConfigError,
    FileError,
    InputFileNotFoundError,
    InvalidOptionsError,
    TextBridgeError,
    ValidationError,
)
from textbridge.interpreters import (
    convert_length,
    get_boolean,
    get_float_values,
    get_float_with_unit,
    get_int_values,
    get_unit,
    resolve_unit_name,
    unit_to_inch_factor,
)
from textbridge.options import IniParserOptions, LengthOptions, QuoteOptions
from textbridge.parsers.ini import IniState, LenientIniParser, find_ini_config, read_ini

__all__ = [
    "__version__",
    # Codecs
    "encode_utf8",
    "decode_utf8",
    "enquote",
    "double_quote",
    "single_quote",
    "dequote",
    "dequote_text",
    "bytes_to_raw_string",
    "raw_string_to_bytes",
    "base64_encode",
    "base64_decode",
    # Parsing
    "IniState",
    "LenientIniParser",
    "IniDocument",
    "IniSection",
    "read_ini",
    "find_ini_config",
    "render_ini",
    # Interpreters
    "LengthUnit",
    "get_boolean",
    "get_float_values",
    "get_int_values",
    "get_unit",
    "resolve_unit_name",
    "get_float_with_unit",
    "unit_to_inch_factor",
    "convert_length",
    # Options
    "IniParserOptions",
    "QuoteOptions",
    "LengthOptions",
    # Exceptions
    "TextBridgeError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InputFileNotFoundError",
    "ConfigError",
]
