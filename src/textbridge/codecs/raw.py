#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/codecs/raw.py
"""Raw byte/string views and base64 transport helpers.

A *raw string* holds one character per byte (``U+0000`` to ``U+00FF``) and is
not UTF-8 aware; it is the form some hosts use to shuttle binary data through
string-only APIs. The base64 helpers route text through the UTF-8 codec so
that encoding and decoding agree with :mod:`textbridge.codecs.utf8`.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Iterable, Literal, overload

from textbridge.codecs.utf8 import decode_utf8, encode_utf8

logger = logging.getLogger(__name__)


def bytes_to_raw_string(data: bytes | bytearray | Iterable[int]) -> str:
    """Map each byte to the character with the same code."""
    return "".join(chr(byte) for byte in bytes(data))


def raw_string_to_bytes(text: str) -> bytes | None:
    """Map each character of a raw string back to a byte.

    Returns None if a character is above ``U+00FF`` and so cannot be a byte.
    """
    codes = [ord(char) for char in text]
    if any(code > 0xFF for code in codes):
        return None
    return bytes(codes)


def base64_encode(data: str | bytes | bytearray | Iterable[int]) -> str | None:
    """Base64-encode a string (as UTF-8) or a byte sequence.

    Parameters
    ----------
    data : str or byte sequence
        Strings are UTF-8 encoded first; bytes are encoded as they are

    Returns
    -------
    str or None
        The base64 text, or None if the string cannot be UTF-8 encoded

    """
    if isinstance(data, str):
        payload = encode_utf8(data)
        if payload is None:
            return None
    else:
        payload = bytes(data)

    return base64.b64encode(payload).decode("ascii")


@overload
def base64_decode(text: str, binary: Literal[True]) -> bytes | None: ...


@overload
def base64_decode(text: str, binary: Literal[False] = ...) -> str | None: ...


def base64_decode(text: str, binary: bool = False) -> bytes | str | None:
    """Decode base64 text to bytes, or to a string via the UTF-8 codec.

    Parameters
    ----------
    text : str
        Base64 encoded data
    binary : bool, default False
        Return the raw bytes instead of decoding them as UTF-8

    Returns
    -------
    bytes, str or None
        The decoded payload, or None if the base64 or the UTF-8 is malformed

    """
    try:
        payload = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Invalid base64 input: {e}")
        return None

    if binary:
        return payload
    return decode_utf8(payload)
