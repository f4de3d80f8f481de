#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/codecs/__init__.py
"""Codecs for moving text and binary payloads across a process boundary.

- :mod:`textbridge.codecs.utf8` - UTF-8 encoding limited to the Basic Multilingual Plane
- :mod:`textbridge.codecs.quoting` - reversible printable-ASCII quoted literals
- :mod:`textbridge.codecs.raw` - raw byte strings and base64 helpers
"""

from textbridge.codecs.quoting import (
    DequoteState,
    dequote,
    dequote_text,
    double_quote,
    enquote,
    single_quote,
)
from textbridge.codecs.raw import (
    base64_decode,
    base64_encode,
    bytes_to_raw_string,
    raw_string_to_bytes,
)
from textbridge.codecs.utf8 import decode_utf8, encode_codepoint, encode_utf8

__all__ = [
    "DequoteState",
    "base64_decode",
    "base64_encode",
    "bytes_to_raw_string",
    "decode_utf8",
    "dequote",
    "dequote_text",
    "double_quote",
    "encode_codepoint",
    "encode_utf8",
    "enquote",
    "raw_string_to_bytes",
    "single_quote",
]
