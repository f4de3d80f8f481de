#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/utils/__init__.py
"""Utility modules for the textbridge package.

This package contains text helpers (unique naming, hex formatting, padding)
and byte-input decoding for the lenient parser.
"""

from textbridge.utils.text import (
    left_pad,
    make_unique_name,
    normalize_attribute_name,
    normalize_section_name,
    right_pad,
    to_hex,
)

__all__ = [
    "make_unique_name",
    "normalize_section_name",
    "normalize_attribute_name",
    "to_hex",
    "left_pad",
    "right_pad",
]
