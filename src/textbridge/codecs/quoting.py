#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/codecs/quoting.py
"""Reversible ASCII quoting for strings and byte sequences.

``enquote`` turns a string or a byte sequence into a quoted literal made of
printable 7-bit ASCII only, so it can be embedded verbatim in generated
script text that is sent to another process. ``dequote`` reverses it and
always produces bytes: ``\\uHHHH`` escapes are re-encoded as UTF-8.

Escapes written by ``enquote``:

- ``\\\\`` for a backslash and ``\\"`` or ``\\'`` for the active quote character
- ``\\n``, ``\\r`` and ``\\t``
- ``\\xHH`` for other control characters, DEL, and (byte input only) bytes
  ``0x80`` and up
- ``\\uHHHH`` for string characters ``U+0080`` and up

Examples
--------
    >>> double_quote('say "hi"\\n')
    '"say \\\\"hi\\\\"\\\\n"'
    >>> dequote(single_quote(b"\\x00\\xff"))
    b'\\x00\\xff'
    >>> dequote('"unterminated') is None
    True

"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Union

from textbridge.codecs.utf8 import decode_utf8, encode_codepoint
from textbridge.constants import (
    DOUBLE_QUOTE,
    ESCAPE_BYTES,
    HEX_DIGITS,
    MAX_CODEPOINT,
    NAMED_ESCAPES,
    QUOTE_CHARS,
    SINGLE_QUOTE,
)
from textbridge.exceptions import ValidationError
from textbridge.utils.text import to_hex

logger = logging.getLogger(__name__)

ByteSequence = Union[bytes, bytearray, memoryview, Iterable[int]]

_HEX_ESCAPE_DIGITS = 2
_UNICODE_ESCAPE_DIGITS = 4


class DequoteState(Enum):
    """States of the escape-parsing machine used by :func:`dequote`."""

    DEFAULT = auto()
    ESCAPE = auto()
    HEX_DIGITS = auto()
    UNICODE_DIGITS = auto()
    FAILED = auto()


def _as_codes(data: str | ByteSequence) -> tuple[list[int], bool]:
    """Return the element values of ``data`` and whether it was a string."""
    if isinstance(data, str):
        codes: list[int] = []
        for char in data:
            codepoint = ord(char)
            if codepoint > MAX_CODEPOINT:
                # Written as a UTF-16 surrogate pair so the output stays ASCII
                codepoint -= 0x10000
                codes.append(0xD800 | (codepoint >> 10))
                codes.append(0xDC00 | (codepoint & 0x3FF))
            else:
                codes.append(codepoint)
        return codes, True

    if isinstance(data, (bytes, bytearray, memoryview)):
        return list(bytes(data)), False

    codes = []
    for value in data:
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValidationError(
                f"Byte sequence values must be integers in 0-255, got {value!r}",
                parameter_name="data",
                parameter_value=value,
            )
        codes.append(value)
    return codes, False


def enquote(data: str | ByteSequence, quote_char: str = DOUBLE_QUOTE) -> str:
    """Escape a string or byte sequence and wrap it in quotes.

    Parameters
    ----------
    data : str or byte sequence
        A Unicode string, or bytes / an iterable of integers in 0-255
    quote_char : str, default '"'
        Either ``"`` or ``'``

    Returns
    -------
    str
        Quoted literal containing only printable ASCII

    Raises
    ------
    ValidationError
        If ``quote_char`` is not a supported quote character, or a byte
        sequence holds a value outside 0-255

    """
    if quote_char not in QUOTE_CHARS:
        raise ValidationError(
            f"quote_char must be one of {sorted(QUOTE_CHARS)}, got {quote_char!r}",
            parameter_name="quote_char",
            parameter_value=quote_char,
        )

    codes, is_string = _as_codes(data)
    quote_code = ord(quote_char)

    parts: list[str] = [quote_char]
    for code in codes:
        if code in NAMED_ESCAPES:
            parts.append(NAMED_ESCAPES[code])
        elif code == quote_code:
            parts.append("\\" + quote_char)
        elif code < 0x20 or code == 0x7F or (not is_string and code >= 0x80):
            parts.append("\\x" + to_hex(code, 2))
        elif code >= 0x80:
            parts.append("\\u" + to_hex(code, 4))
        else:
            parts.append(chr(code))
    parts.append(quote_char)

    return "".join(parts)


def double_quote(data: str | ByteSequence) -> str:
    """Quote ``data`` using double quotes. See :func:`enquote`."""
    return enquote(data, DOUBLE_QUOTE)


def single_quote(data: str | ByteSequence) -> str:
    """Quote ``data`` using single quotes. See :func:`enquote`."""
    return enquote(data, SINGLE_QUOTE)


def dequote(literal: str) -> bytes | None:
    """Reverse :func:`enquote`, producing the raw bytes.

    The literal must be at least two characters long and start and end with
    the same quote character (``"`` or ``'``). Plain characters become one
    byte each; ``\\uHHHH`` escapes are expanded to their UTF-8 bytes.

    Parameters
    ----------
    literal : str
        A quoted literal as produced by :func:`double_quote` or :func:`single_quote`

    Returns
    -------
    bytes or None
        The decoded bytes, or None if the literal is malformed: wrong or
        missing quotes, a bad hex digit, an unterminated escape, or a plain
        character that does not fit in a byte

    Raises
    ------
    ValidationError
        If ``literal`` is not a string

    """
    if not isinstance(literal, str):
        raise ValidationError(
            f"dequote expects a str, got {type(literal).__name__}",
            parameter_name="literal",
            parameter_value=literal,
        )

    if len(literal) < 2:
        return None

    quote_char = literal[0]
    if quote_char not in QUOTE_CHARS or literal[-1] != quote_char:
        return None

    buffer = bytearray()
    state = DequoteState.DEFAULT
    hex_digits: list[str] = []

    for char in literal[1:-1]:
        if state is DequoteState.DEFAULT:
            if char == "\\":
                state = DequoteState.ESCAPE
            elif ord(char) > 0xFF:
                state = DequoteState.FAILED
            else:
                buffer.append(ord(char))

        elif state is DequoteState.ESCAPE:
            if char == "x":
                hex_digits = []
                state = DequoteState.HEX_DIGITS
            elif char == "u":
                hex_digits = []
                state = DequoteState.UNICODE_DIGITS
            elif char in ESCAPE_BYTES:
                buffer.append(ESCAPE_BYTES[char])
                state = DequoteState.DEFAULT
            elif ord(char) > 0xFF:
                state = DequoteState.FAILED
            else:
                buffer.append(ord(char))
                state = DequoteState.DEFAULT

        elif state is DequoteState.HEX_DIGITS:
            if char not in HEX_DIGITS:
                state = DequoteState.FAILED
            else:
                hex_digits.append(char)
                if len(hex_digits) == _HEX_ESCAPE_DIGITS:
                    buffer.append(int("".join(hex_digits), 16))
                    state = DequoteState.DEFAULT

        elif state is DequoteState.UNICODE_DIGITS:
            if char not in HEX_DIGITS:
                state = DequoteState.FAILED
            else:
                hex_digits.append(char)
                if len(hex_digits) == _UNICODE_ESCAPE_DIGITS:
                    encoded = encode_codepoint(int("".join(hex_digits), 16))
                    if encoded is None:
                        state = DequoteState.FAILED
                    else:
                        buffer += encoded
                        state = DequoteState.DEFAULT

        if state is DequoteState.FAILED:
            break

    if state is not DequoteState.DEFAULT:
        logger.debug(f"Could not dequote literal (ended in state {state.name})")
        return None

    return bytes(buffer)


def dequote_text(literal: str) -> str | None:
    """Dequote a literal and decode the resulting bytes as UTF-8.

    Parameters
    ----------
    literal : str
        A quoted literal

    Returns
    -------
    str or None
        The decoded text, or None if either step fails

    """
    data = dequote(literal)
    if data is None:
        return None
    return decode_utf8(data)
