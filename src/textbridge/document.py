#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/document.py
"""Parsed INI-style documents.

:class:`IniDocument` maps section keys to :class:`IniSection` objects, and
each section maps attribute keys to raw string values. Both are plain
``dict`` subclasses, so they compare equal to ordinary nested dicts and
serialize to JSON directly.

Examples
--------
    >>> from textbridge.parsers.ini import read_ini
    >>> doc = read_ini("[Page]\\nwidth = 210mm\\nfacing = yes\\n")
    >>> round(doc.find_section("page").get_length("width", "cm"), 6)
    21.0
    >>> doc["page"].get_bool("facing")
    True
    >>> print(render_ini(doc), end="")
    [Page]
    width = "210mm"
    facing = "yes"

"""

from __future__ import annotations

import logging
from typing import Any

from textbridge.constants import RAW_SECTION_NAME_KEY, LengthUnit
from textbridge.interpreters import (
    UnitLike,
    get_boolean,
    get_float_values,
    get_float_with_unit,
    get_int_values,
    parse_float,
    parse_int,
)
from textbridge.utils.text import normalize_attribute_name, normalize_section_name

logger = logging.getLogger(__name__)


class IniSection(dict):
    """Attributes of one section, keyed by normalized attribute name.

    Parameters
    ----------
    raw_name : str, default ""
        The header text exactly as it appeared between the brackets
    *args, **kwargs
        Initial attributes, as for ``dict``

    """

    def __init__(self, raw_name: str = "", *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._raw_name = raw_name

    @property
    def raw_name(self) -> str:
        """Original, unnormalized header text of this section."""
        return self._raw_name

    def attributes(self, raw_section_key: str = RAW_SECTION_NAME_KEY) -> dict[str, str]:
        """Return the user attributes, without the stored raw header text."""
        return {key: value for key, value in self.items() if key != raw_section_key}

    def _lookup(self, key: str) -> str | None:
        if key in self:
            return self[key]
        return self.get(normalize_attribute_name(key))

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return attribute ``key`` as a boolean, or ``default`` when it is missing."""
        value = self._lookup(key)
        if value is None:
            return default
        return get_boolean(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Return the leading integer of attribute ``key``, or ``default``."""
        value = self._lookup(key)
        number = parse_int(value) if value is not None else None
        if number is None:
            return default
        return number

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return the leading number of attribute ``key``, or ``default``."""
        value = self._lookup(key)
        number = parse_float(value) if value is not None else None
        if number is None:
            return default
        return number

    def get_float_values(self, key: str) -> list[float] | None:
        return get_float_values(self._lookup(key))

    def get_int_values(self, key: str) -> list[int] | None:
        return get_int_values(self._lookup(key))

    def get_length(self, key: str, convert_to: UnitLike = LengthUnit.NONE, default: float = 0.0) -> float:
        """Return attribute ``key`` as a length converted to ``convert_to``.

        Parameters
        ----------
        key : str
            Attribute key (normalized if not found as given)
        convert_to : LengthUnit or str, default LengthUnit.NONE
            Target unit, see :func:`textbridge.interpreters.get_float_with_unit`
        default : float, default 0.0
            Returned when the attribute is missing

        Returns
        -------
        float

        """
        value = self._lookup(key)
        if value is None:
            return default
        return get_float_with_unit(value, convert_to)

    def __repr__(self) -> str:
        return f"IniSection({self._raw_name!r}, {dict.__repr__(self)})"


class IniDocument(dict):
    """Sections of a parsed document, keyed by normalized section name."""

    def find_section(self, name: str) -> IniSection | None:
        """Look up a section by key or by header text as a user would write it.

        Examples
        --------
            >>> doc = IniDocument(setup=IniSection("Setup"))
            >>> doc.find_section("  SETUP ") is doc["setup"]
            True

        """
        if name in self:
            return self[name]
        return self.get(normalize_section_name(name))

    def __repr__(self) -> str:
        return f"IniDocument({dict.__repr__(self)})"


def _quote_value(value: str) -> str:
    # Re-reading strips exactly one outer pair
    return f'"{value}"'


def render_ini(document: IniDocument | dict[str, Any], raw_section_key: str = RAW_SECTION_NAME_KEY) -> str:
    """Serialize a document back to INI-style text.

    Each section is written as ``[raw header]`` followed by one
    ``key = "value"`` line per attribute. Parsing the result yields the same
    mapping as the document that was rendered.

    Parameters
    ----------
    document : IniDocument or dict
        Parsed document, or a plain mapping of section key to attributes
    raw_section_key : str, default "__rawSectionName"
        Attribute key holding the raw header text; it is used for the header
        and not written as an attribute

    Returns
    -------
    str
        The INI text, one trailing newline per line; empty for an empty
        document

    """
    lines: list[str] = []
    for key, section in document.items():
        raw_name = getattr(section, "raw_name", "") or section.get(raw_section_key) or key
        lines.append(f"[{raw_name}]")
        for name, value in section.items():
            if name == raw_section_key:
                continue
            lines.append(f"{name} = {_quote_value(str(value))}")

    logger.debug(f"Rendered {len(document)} section(s) as INI text")
    return "".join(f"{line}\n" for line in lines)


__all__ = [
    "IniDocument",
    "IniSection",
    "render_ini",
]
