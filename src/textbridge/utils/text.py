#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/utils/text.py
"""Small text helpers shared by the parser and the codecs.

Functions
---------
make_unique_name : Disambiguate a repeated name with a numeric suffix
normalize_section_name : Canonical key for a section header
normalize_attribute_name : Canonical key for an attribute name
to_hex : Fixed-width lowercase hexadecimal formatting
left_pad : Pad or cut a string to an exact length, keeping its tail
right_pad : Pad or cut a string to an exact length, keeping its head

Examples
--------
Unique name generation with counter:

    >>> seen = {}
    >>> make_unique_name("color", seen)
    'color'
    >>> make_unique_name("color", seen)
    'color_2'

"""

from __future__ import annotations

from typing import Any, Container

from textbridge.constants import (
    ATTRIBUTE_NAME_STRIP_RE,
    DEFAULT_DUPLICATE_SEPARATOR,
    SECTION_NAME_STRIP_RE,
    WHITESPACE_RE,
)


def make_unique_name(
    name: str,
    seen_names: dict[str, int],
    taken: Container[str] | None = None,
    separator: str = DEFAULT_DUPLICATE_SEPARATOR,
) -> str:
    """Generate a unique name with duplicate handling.

    The first occurrence of a name is returned unchanged; the Nth occurrence
    gets the suffix ``<separator>N``. The ``seen_names`` dictionary tracks
    occurrence counts per base name and is mutated in-place.

    Parameters
    ----------
    name : str
        Base name to make unique
    seen_names : dict[str, int]
        Occurrence counts per base name (mutated in-place)
    taken : Container[str] or None, default = None
        Names already in use. When a candidate is taken (for example because
        the input literally contained ``color_2``), the counter keeps
        increasing until a free name is found.
    separator : str, default = "_"
        Separator placed before the numeric suffix

    Returns
    -------
    str
        Unique name (with numeric suffix if needed)

    Examples
    --------
        >>> seen = {}
        >>> make_unique_name("a", seen, taken={"a_2"})
        'a'
        >>> make_unique_name("a", seen, taken={"a", "a_2"})
        'a_3'

    """
    count = seen_names.get(name, 0) + 1
    candidate = name if count == 1 else f"{name}{separator}{count}"

    if taken is not None:
        while candidate in taken:
            count += 1
            candidate = f"{name}{separator}{count}"

    seen_names[name] = count
    return candidate


def normalize_section_name(raw_name: str) -> str:
    """Turn raw section header text into a section key.

    Whitespace is trimmed and collapsed, every character outside
    ``[A-Za-z0-9_$:-]`` is dropped and the result is lowercased. An empty
    result means the header cannot name a section.

    Examples
    --------
        >>> normalize_section_name("  Page Setup: A4 ")
        'pagesetup:a4'
        >>> normalize_section_name("???")
        ''

    """
    collapsed = WHITESPACE_RE.sub(" ", raw_name.strip())
    return SECTION_NAME_STRIP_RE.sub("", collapsed).lower()


def normalize_attribute_name(raw_name: str) -> str:
    """Turn a raw attribute name into an attribute key (``[a-z0-9_$-]`` only)."""
    return ATTRIBUTE_NAME_STRIP_RE.sub("", WHITESPACE_RE.sub("", raw_name)).lower()


def to_hex(value: int, num_digits: int = 4) -> str:
    """Format an integer as exactly ``num_digits`` lowercase hex digits.

    Values wider than ``num_digits`` keep their lowest digits; negative values
    are written in two's complement.

    Examples
    --------
        >>> to_hex(255, 2)
        'ff'
        >>> to_hex(0x12345, 4)
        '2345'
        >>> to_hex(-1, 2)
        'ff'

    """
    if num_digits <= 0:
        num_digits = 4
    mask = (1 << (num_digits * 4)) - 1
    return format(value & mask, f"0{num_digits}x")


def left_pad(s: Any, pad_char: str, length: int) -> str:
    """Extend ``s`` on the left with ``pad_char``, or cut it to its last ``length`` characters."""
    text = str(s)
    if length <= 0:
        return ""
    if len(text) >= length:
        return text[len(text) - length :]
    return pad_char * (length - len(text)) + text


def right_pad(s: Any, pad_char: str, length: int) -> str:
    """Extend ``s`` on the right with ``pad_char``, or cut it to its first ``length`` characters."""
    text = str(s)
    if length <= 0:
        return ""
    if len(text) >= length:
        return text[:length]
    return text + pad_char * (length - len(text))


__all__ = [
    "make_unique_name",
    "normalize_section_name",
    "normalize_attribute_name",
    "to_hex",
    "left_pad",
    "right_pad",
]
