#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_document.py
"""Unit tests for IniDocument, IniSection and render_ini."""

import json

import pytest

from textbridge.constants import LengthUnit
from textbridge.document import IniDocument, IniSection, render_ini
from textbridge.parsers.ini import read_ini


@pytest.fixture
def page_section():
    return IniSection(
        "Page Setup",
        {
            "__rawSectionName": "Page Setup",
            "width": "210mm",
            "facingpages": "yes",
            "columns": "3 cols",
            "gutter": "4.5",
            "swatch": "[ 255, 128, 0 ]",
            "weights": "0.5, 1.25",
        },
    )


@pytest.mark.unit
class TestIniSection:
    """Tests for typed accessors on a section."""

    def test_compares_as_dict(self, page_section):
        assert page_section["width"] == "210mm"
        assert IniSection("x", {"a": "1"}) == {"a": "1"}

    def test_raw_name(self, page_section):
        assert page_section.raw_name == "Page Setup"
        assert IniSection().raw_name == ""

    def test_attributes_exclude_raw_key(self, page_section):
        assert "__rawSectionName" not in page_section.attributes()
        assert page_section.attributes()["width"] == "210mm"

    def test_lookup_normalizes_key(self, page_section):
        assert page_section.get_bool("Facing Pages") is True
        assert page_section.get_length("WIDTH", "cm") == pytest.approx(21.0)

    def test_get_bool(self, page_section):
        assert page_section.get_bool("facingpages") is True
        assert page_section.get_bool("missing") is False
        assert page_section.get_bool("missing", default=True) is True

    def test_get_int(self, page_section):
        assert page_section.get_int("columns") == 3
        assert page_section.get_int("missing", default=-1) == -1
        assert page_section.get_int("facingpages", default=7) == 7

    def test_get_float(self, page_section):
        assert page_section.get_float("gutter") == 4.5
        assert page_section.get_float("facingpages", default=1.5) == 1.5

    def test_arrays(self, page_section):
        assert page_section.get_int_values("swatch") == [255, 128, 0]
        assert page_section.get_float_values("weights") == [0.5, 1.25]
        assert page_section.get_float_values("missing") is None

    def test_get_length(self, page_section):
        assert page_section.get_length("width") == 210.0
        assert page_section.get_length("width", LengthUnit.INCH) == pytest.approx(210 / 25.4)
        assert page_section.get_length("missing", "cm", default=2.0) == 2.0

    def test_repr(self):
        assert repr(IniSection("Grid", {"a": "1"})) == "IniSection('Grid', {'a': '1'})"


@pytest.mark.unit
class TestIniDocument:
    """Tests for the document mapping."""

    def test_find_section(self):
        section = IniSection("Page Setup")
        doc = IniDocument(pagesetup=section)
        assert doc.find_section("pagesetup") is section
        assert doc.find_section("  Page   Setup ") is section
        assert doc.find_section("other") is None

    def test_json_serializable(self):
        doc = read_ini("[A]\nx = 1\n")
        assert json.loads(json.dumps(doc)) == {"a": {"__rawSectionName": "A", "x": "1"}}

    def test_repr(self):
        assert repr(IniDocument()) == "IniDocument({})"


@pytest.mark.unit
class TestRenderIni:
    """Tests for serializing documents back to text."""

    def test_render(self, sample_ini_text):
        rendered = render_ini(read_ini(sample_ini_text))
        assert rendered.splitlines() == [
            "[Page Setup]",
            'width = "210mm"',
            'width_2 = "297mm"',
            'bleedsize = "3 mm"',
            'title = "Annual Report"',
            "[Colors]",
            'swatch = "[ 255, 128, 0 ]"',
            'facingpages = "yes"',
        ]
        assert rendered.endswith("\n")

    def test_render_then_parse(self, sample_ini_text):
        doc = read_ini(sample_ini_text)
        assert read_ini(render_ini(doc)) == doc

    def test_quotes_kept_through_render(self):
        doc = read_ini("[s]\nx = \"'inner'\"\ny = “curly”\n")
        assert doc["s"]["x"] == "'inner'"
        assert read_ini(render_ini(doc)) == doc

    def test_plain_mapping(self):
        text = render_ini({"grid": {"__rawSectionName": "Grid", "columns": "3"}, "other": {"a": 1}})
        assert text == '[Grid]\ncolumns = "3"\n[other]\na = "1"\n'

    def test_custom_raw_key(self):
        assert render_ini({"g": {"RAW": "G", "x": "1"}}, raw_section_key="RAW") == '[G]\nx = "1"\n'

    def test_empty_document(self):
        assert render_ini(IniDocument()) == ""
