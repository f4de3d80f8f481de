#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/codecs/utf8.py
"""Byte-accurate UTF-8 encoding and decoding.

This codec works one codepoint at a time and only covers the Basic
Multilingual Plane: codepoints up to ``U+FFFF`` encode to one, two or three
bytes, and four-byte sequences are rejected. Lone surrogates are encoded like
any other codepoint in that range.

Failures are reported by returning ``None``; decoding is all-or-nothing, so
a single malformed byte discards the whole result.

Examples
--------
    >>> encode_utf8("é")
    b'\\xc3\\xa9'
    >>> decode_utf8(b"\\xc3\\xa9")
    'é'
    >>> decode_utf8(b"\\x80") is None
    True

"""

from __future__ import annotations

import logging
from typing import Iterable

from textbridge.constants import MAX_CODEPOINT

logger = logging.getLogger(__name__)


def encode_codepoint(codepoint: int) -> bytes | None:
    """Encode a single codepoint as a 1 to 3 byte UTF-8 sequence.

    Parameters
    ----------
    codepoint : int
        Codepoint in the range ``0..0xFFFF``

    Returns
    -------
    bytes or None
        The encoded bytes, or None if the codepoint is outside the supported range

    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        return None

    if codepoint <= 0x7F:
        return bytes((codepoint,))

    if codepoint <= 0x7FF:
        return bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))

    return bytes(
        (
            0xE0 | (codepoint >> 12),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        )
    )


def encode_utf8(text: str) -> bytes | None:
    """Encode a string to UTF-8 bytes.

    Parameters
    ----------
    text : str
        String to encode

    Returns
    -------
    bytes or None
        The UTF-8 bytes, or None if the string holds a character above ``U+FFFF``

    """
    encoded = bytearray()
    for char in text:
        char_bytes = encode_codepoint(ord(char))
        if char_bytes is None:
            logger.debug(f"Cannot UTF-8 encode codepoint U+{ord(char):X}")
            return None
        encoded += char_bytes

    return bytes(encoded)


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def decode_utf8(data: bytes | bytearray | Iterable[int]) -> str | None:
    """Decode UTF-8 bytes to a string.

    Parameters
    ----------
    data : bytes, bytearray or iterable of int
        Bytes holding a UTF-8 encoded string

    Returns
    -------
    str or None
        The decoded string, or None if any byte sequence is malformed, truncated
        or a four-byte sequence

    """
    byte_seq = data if isinstance(data, (bytes, bytearray)) else bytes(data)
    length = len(byte_seq)
    chars: list[str] = []

    idx = 0
    while idx < length:
        lead = byte_seq[idx]

        if lead < 0x80:
            chars.append(chr(lead))
            idx += 1
            continue

        if lead < 0xC0:
            # Continuation byte where a lead byte was expected
            logger.debug(f"Stray continuation byte 0x{lead:02x} at offset {idx}")
            return None

        if lead < 0xE0:
            num_continuation = 1
            codepoint = lead & 0x1F
        elif lead < 0xF0:
            num_continuation = 2
            codepoint = lead & 0x0F
        else:
            logger.debug(f"Unsupported 4-byte lead 0x{lead:02x} at offset {idx}")
            return None

        if idx + num_continuation >= length:
            logger.debug(f"Truncated sequence at offset {idx}")
            return None

        for offset in range(1, num_continuation + 1):
            byte = byte_seq[idx + offset]
            if not _is_continuation(byte):
                logger.debug(f"Invalid continuation byte 0x{byte:02x} at offset {idx + offset}")
                return None
            codepoint = (codepoint << 6) | (byte & 0x3F)

        chars.append(chr(codepoint))
        idx += num_continuation + 1

    return "".join(chars)
