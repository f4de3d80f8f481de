#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/parsers/ini.py
"""Lenient INI-style parser.

This module reads the loosely written ``[section]`` / ``name = value`` text
that users type into document text frames to configure scripts. Unlike
:mod:`configparser` it never rejects input: anything it does not recognise
is skipped, so a stray line or a typo costs one attribute, not the whole
configuration.

Rules
-----
- ``#`` at the start of a line (or token) begins a comment running to the
  end of the line.
- ``[`` opens a section header that runs, across lines if need be, to ``]``.
  The rest of that line is ignored. Section keys keep only
  ``[A-Za-z0-9_$:-]`` and are lowercased; headers that normalize to nothing
  are skipped.
- ``name = value`` lines add an attribute to the open section. Attribute
  keys drop whitespace, keep only ``[A-Za-z0-9_$-]`` and are lowercased.
  Values are trimmed and lose one outer pair of matching quotes (ASCII or
  typographic).
- A repeated section or attribute name gets a ``_2``, ``_3``... suffix.
- Each section records its header text under ``__rawSectionName``.

Examples
--------
Input text::

    # Export settings
    [Page Setup]
    Width = 210mm
    width = 297mm
    title = “Annual Report”

Parsed document::

    {"pagesetup": {"__rawSectionName": "Page Setup",
                   "width": "210mm",
                   "width_2": "297mm",
                   "title": "Annual Report"}}

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import IO, Callable, Iterable, Union

from textbridge.constants import (
    ASSIGNMENT_CHAR,
    COMMENT_CHAR,
    LINE_END_CHARS,
    SECTION_CLOSE_CHAR,
    SECTION_OPEN_CHAR,
    VALUE_QUOTE_FAMILIES,
)
from textbridge.document import IniDocument, IniSection
from textbridge.exceptions import FileError, InputFileNotFoundError, InvalidOptionsError
from textbridge.options.base import BaseParserOptions
from textbridge.options.ini import IniParserOptions
from textbridge.utils.encoding import read_stream_text, read_text
from textbridge.utils.text import make_unique_name, normalize_attribute_name, normalize_section_name

logger = logging.getLogger(__name__)

IniInput = Union[str, bytes, Path, IO[bytes], IO[str]]


class IniState(Enum):
    """States of the character-level scanner."""

    IDLE = auto()
    IN_SECTION_HEADER = auto()
    IN_ATTR_NAME = auto()
    AFTER_ATTR_NAME = auto()
    IN_VALUE = auto()
    ERROR = auto()
    AFTER_SECTION_HEADER = auto()
    IN_COMMENT = auto()


@dataclass
class _ScanContext:
    """Mutable state for one parse call."""

    document: IniDocument = field(default_factory=IniDocument)
    section: IniSection | None = None
    raw_section_name: list[str] = field(default_factory=list)
    attr_name: list[str] = field(default_factory=list)
    pending_spaces: int = 0
    value: list[str] = field(default_factory=list)
    section_counts: dict[str, int] = field(default_factory=dict)
    attr_counts: dict[str, int] = field(default_factory=dict)
    created_section: bool = False


def strip_value_quotes(value: str) -> str:
    """Remove one outer pair of matching quotes from a trimmed value.

    Straight and typographic quotes of the same family pair with each other
    in any combination, so ``“x”``, ``"x”`` and ``”x“`` all yield ``x``.
    Values shorter than two characters are returned unchanged.

        >>> strip_value_quotes("'it''s'")
        "it''s"
        >>> strip_value_quotes('"open')
        '"open'

    """
    if len(value) < 2:
        return value
    for family in VALUE_QUOTE_FAMILIES:
        if value[0] in family and value[-1] in family:
            return value[1:-1]
    return value


class LenientIniParser:
    r"""Parse INI-style configuration text that may be sloppily written.

    Parameters
    ----------
    options : IniParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = LenientIniParser()
        >>> doc = parser.parse("[Grid]\ncolumns = 3\ncolumns = 4\n")
        >>> doc["grid"].attributes()
        {'columns': '3', 'columns_2': '4'}

    Without the stored header text:

        >>> parser = LenientIniParser(IniParserOptions(store_raw_section_name=False))
        >>> parser.parse("[Grid]\ncolumns = 3\n")
        IniDocument({'grid': IniSection('Grid', {'columns': '3'})})

    """

    def __init__(self, options: IniParserOptions | None = None) -> None:
        self._validate_options_type(options, IniParserOptions, "ini")
        self.options: IniParserOptions = options or IniParserOptions()
        self._transitions: dict[IniState, Callable[[_ScanContext, str], IniState]] = {
            IniState.IDLE: self._on_idle,
            IniState.IN_COMMENT: self._on_comment,
            IniState.AFTER_SECTION_HEADER: self._on_after_section_header,
            IniState.IN_SECTION_HEADER: self._on_section_header,
            IniState.IN_ATTR_NAME: self._on_attr_name,
            IniState.AFTER_ATTR_NAME: self._on_after_attr_name,
            IniState.IN_VALUE: self._on_value,
        }

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def parse(self, input_data: IniInput) -> IniDocument | None:
        """Parse INI-style input.

        Parameters
        ----------
        input_data : str, bytes, Path, or file-like object
            A ``str`` is always treated as the text itself. Bytes and binary
            streams are decoded as UTF-8 with encoding detection as fallback.
            A ``Path`` is read from disk.

        Returns
        -------
        IniDocument or None
            The parsed document, or None when the input is empty or holds no
            section

        Raises
        ------
        InputFileNotFoundError
            If a ``Path`` input does not exist
        FileError
            If a ``Path`` input cannot be read

        """
        return self.parse_text(self._load_text_content(input_data))

    @staticmethod
    def _load_text_content(input_data: IniInput) -> str:
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, (bytes, bytearray)):
            return read_text(bytes(input_data))
        if isinstance(input_data, Path):
            if not input_data.is_file():
                raise InputFileNotFoundError(str(input_data))
            try:
                return read_text(input_data.read_bytes())
            except OSError as e:
                raise FileError(
                    f"Could not read {input_data}: {e}", file_path=str(input_data), original_error=e
                ) from e
        return read_stream_text(input_data)

    def parse_text(self, text: str) -> IniDocument | None:
        """Parse INI-style text. Non-``str`` and empty input yield None."""
        if not text or not isinstance(text, str):
            return None

        ctx = _ScanContext()
        state = IniState.IDLE
        # A trailing CR terminates a final line that has no line ending
        for char in text + "\r":
            transition = self._transitions.get(state)
            state = transition(ctx, char) if transition is not None else IniState.ERROR
            if state is IniState.ERROR:
                logger.debug("INI scanner reached the error state; stopping")
                break

        if not ctx.created_section:
            logger.debug("No section found in INI text")
            return None
        return ctx.document

    def _on_idle(self, ctx: _ScanContext, char: str) -> IniState:
        if char == SECTION_OPEN_CHAR:
            ctx.raw_section_name = []
            return IniState.IN_SECTION_HEADER
        if char == COMMENT_CHAR:
            return IniState.IN_COMMENT
        if char > " ":
            ctx.attr_name = [char]
            ctx.pending_spaces = 0
            return IniState.IN_ATTR_NAME
        return IniState.IDLE

    def _on_comment(self, ctx: _ScanContext, char: str) -> IniState:
        return IniState.IDLE if char in LINE_END_CHARS else IniState.IN_COMMENT

    def _on_after_section_header(self, ctx: _ScanContext, char: str) -> IniState:
        return IniState.IDLE if char in LINE_END_CHARS else IniState.AFTER_SECTION_HEADER

    def _on_section_header(self, ctx: _ScanContext, char: str) -> IniState:
        if char != SECTION_CLOSE_CHAR:
            ctx.raw_section_name.append(char)
            return IniState.IN_SECTION_HEADER

        self._open_section(ctx, "".join(ctx.raw_section_name))
        return IniState.AFTER_SECTION_HEADER

    def _on_attr_name(self, ctx: _ScanContext, char: str) -> IniState:
        if char == ASSIGNMENT_CHAR:
            ctx.value = []
            return IniState.IN_VALUE
        if char in LINE_END_CHARS:
            return IniState.IDLE
        if char == " ":
            ctx.pending_spaces = 1
            return IniState.AFTER_ATTR_NAME
        ctx.attr_name.append(char)
        return IniState.IN_ATTR_NAME

    def _on_after_attr_name(self, ctx: _ScanContext, char: str) -> IniState:
        if char == " ":
            ctx.pending_spaces += 1
            return IniState.AFTER_ATTR_NAME
        if char == ASSIGNMENT_CHAR or char in LINE_END_CHARS:
            return self._on_attr_name(ctx, char)
        # Spaces between name characters are kept
        ctx.attr_name.append(" " * ctx.pending_spaces)
        ctx.pending_spaces = 0
        return self._on_attr_name(ctx, char)

    def _on_value(self, ctx: _ScanContext, char: str) -> IniState:
        if char not in LINE_END_CHARS:
            ctx.value.append(char)
            return IniState.IN_VALUE

        self._store_attribute(ctx, "".join(ctx.attr_name), "".join(ctx.value))
        return IniState.IDLE

    def _open_section(self, ctx: _ScanContext, raw_name: str) -> None:
        base_name = normalize_section_name(raw_name)
        if not base_name:
            logger.debug(f"Skipping section header with no usable name: {raw_name!r}")
            return

        key = make_unique_name(
            base_name,
            ctx.section_counts,
            taken=ctx.document,
            separator=self.options.duplicate_separator,
        )
        section = IniSection(raw_name)
        if self.options.store_raw_section_name:
            section[self.options.raw_section_key] = raw_name

        ctx.document[key] = section
        ctx.section = section
        ctx.attr_counts = {}
        ctx.created_section = True

    def _store_attribute(self, ctx: _ScanContext, raw_name: str, raw_value: str) -> None:
        value = strip_value_quotes(raw_value.strip())

        if ctx.section is None:
            logger.debug(f"Discarding attribute {raw_name!r} outside of any section")
            return

        base_name = normalize_attribute_name(raw_name)
        if not base_name:
            logger.debug(f"Discarding attribute with no usable name: {raw_name!r}")
            return

        key = make_unique_name(
            base_name,
            ctx.attr_counts,
            taken=ctx.section,
            separator=self.options.duplicate_separator,
        )
        ctx.section[key] = value


def read_ini(text: str) -> IniDocument | None:
    """Parse INI-style text with default options.

    Parameters
    ----------
    text : str
        The text to parse

    Returns
    -------
    IniDocument or None
        Section key to attributes, or None for empty or non-string input and
        for text without any section

    Examples
    --------
        >>> doc = read_ini("[a]\\nx=1\\n[a]\\nx=2\\n")
        >>> sorted(doc)
        ['a', 'a_2']
        >>> doc["a_2"]["x"]
        '2'
        >>> read_ini("no sections here") is None
        True

    """
    return LenientIniParser().parse_text(text)


def find_ini_config(
    texts: Iterable[str],
    section_name: str,
    options: IniParserOptions | None = None,
) -> IniDocument | None:
    """Find the configuration block that defines a given section.

    A document can hold many text blocks (stories, frames, notes). This scans
    them in order and returns the parsed document of the last block that
    contains a ``[section_name]`` header, compared case-insensitively after
    normalization.

    Parameters
    ----------
    texts : iterable of str
        Candidate text blocks
    section_name : str
        Section to look for, written as in the header
    options : IniParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    IniDocument or None
        The parsed document of the last matching block, or None

    """
    target = normalize_section_name(section_name)
    if not target:
        return None

    parser = LenientIniParser(options)
    found: IniDocument | None = None
    for index, text in enumerate(texts):
        if not isinstance(text, str) or SECTION_OPEN_CHAR not in text:
            continue
        document = parser.parse_text(text)
        if document is not None and target in document:
            logger.debug(f"Text block {index} defines section {target!r}")
            found = document

    return found


__all__ = [
    "IniState",
    "LenientIniParser",
    "find_ini_config",
    "read_ini",
    "strip_value_quotes",
]
