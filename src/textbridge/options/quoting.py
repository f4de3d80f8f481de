#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/options/quoting.py
"""Options for the quoting codec."""

from __future__ import annotations

from dataclasses import dataclass, field

from textbridge.constants import DEFAULT_QUOTE_CHAR, QUOTE_CHARS, QuoteChar
from textbridge.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class QuoteOptions(CloneFrozenMixin):
    """Configuration options for quoting strings and bytes.

    Parameters
    ----------
    quote_char : {'"', "'"}, default = '"'
        Quote character wrapped around literals produced by ``enquote``.

    """

    quote_char: QuoteChar = field(
        default=DEFAULT_QUOTE_CHAR,
        metadata={"help": "Quote character for generated literals", "choices": sorted(QUOTE_CHARS)},
    )

    def __post_init__(self) -> None:
        if self.quote_char not in QUOTE_CHARS:
            raise ValueError(f"quote_char must be one of {sorted(QUOTE_CHARS)}, got {self.quote_char!r}")
