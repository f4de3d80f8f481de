#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/cli/output.py
"""Output helpers for the textbridge CLI."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from textbridge.constants import RAW_SECTION_NAME_KEY
from textbridge.document import IniSection, render_ini


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def document_to_json(document: dict[str, Any]) -> str:
    """Serialize a parsed document (or a single section) as indented JSON."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def print_document(document: dict[str, Any], as_json: bool = False, stream: TextIO | None = None) -> None:
    """Print a parsed document as canonical INI text or JSON."""
    target = stream or sys.stdout
    if as_json:
        print(document_to_json(document), file=target)
    else:
        print(render_ini(document), end="", file=target)


def _section_table(key: str, section: dict[str, Any]) -> Table:
    raw_name = section.raw_name if isinstance(section, IniSection) else section.get(RAW_SECTION_NAME_KEY, key)
    # Text keeps header brackets and values from being read as markup
    table = Table(title=Text(f"[{raw_name}]"))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for name, value in section.items():
        if name == RAW_SECTION_NAME_KEY:
            continue
        table.add_row(Text(name), Text(str(value)))
    return table


def print_rich_document(document: dict[str, Any], console: Console | None = None) -> None:
    """Print each section of a document as a rich table."""
    console = console or Console()
    if not document:
        console.print(Panel("No sections", style="yellow"))
        return
    for key, section in document.items():
        console.print(_section_table(key, section))
