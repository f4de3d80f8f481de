#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/options/ini.py
"""Options for the lenient INI-style parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from textbridge.constants import DEFAULT_DUPLICATE_SEPARATOR, RAW_SECTION_NAME_KEY
from textbridge.options.base import BaseParserOptions

_NORMALIZED_ATTRIBUTE_RE = re.compile(r"[a-z0-9_$-]+")


@dataclass(frozen=True)
class IniParserOptions(BaseParserOptions):
    """Configuration options for the lenient INI-style parser.

    Parameters
    ----------
    raw_section_key : str, default = "__rawSectionName"
        Attribute key under which each section stores its original header
        text. Must contain a character that normalized attribute names can
        never hold (an uppercase letter, for instance), otherwise it could
        collide with a user attribute.
    store_raw_section_name : bool, default = True
        If False, sections do not carry the raw header attribute. The
        ``IniSection.raw_name`` property is populated either way.
    duplicate_separator : str, default = "_"
        Separator placed between a repeated name and its occurrence number.

    """

    raw_section_key: str = field(
        default=RAW_SECTION_NAME_KEY,
        metadata={"help": "Attribute key holding the original section header text", "importance": "advanced"},
    )
    store_raw_section_name: bool = field(
        default=True,
        metadata={"help": "Store the original header text inside each section", "importance": "core"},
    )
    duplicate_separator: str = field(
        default=DEFAULT_DUPLICATE_SEPARATOR,
        metadata={"help": "Separator between a repeated name and its counter", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the raw section key and the duplicate separator.

        Raises
        ------
        ValueError
            If a field value cannot be used by the parser.

        """
        super().__post_init__()

        if not self.raw_section_key:
            raise ValueError("raw_section_key must be a non-empty string")
        if _NORMALIZED_ATTRIBUTE_RE.fullmatch(self.raw_section_key):
            raise ValueError(
                f"raw_section_key {self.raw_section_key!r} could collide with a normalized attribute name"
            )
        if not self.duplicate_separator:
            raise ValueError("duplicate_separator must be a non-empty string")
