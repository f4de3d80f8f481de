"""Property-based tests for the lenient INI-style parser.

Test Coverage:
- Parsing never raises on arbitrary text
- Every key is normalized and unique
- Rendering a parsed document and parsing it again gives the same document
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textbridge.document import render_ini
from textbridge.parsers.ini import read_ini

RAW = "__rawSectionName"

names = st.text(alphabet=st.sampled_from("abcXYZ09_$-: .!\t"), min_size=0, max_size=8)
values = st.text(alphabet=st.characters(blacklist_characters="\r\n"), max_size=16)
attribute_lines = st.builds(lambda n, v: f"{n}={v}", names, values)
header_lines = st.builds(lambda n, tail: f"[{n}]{tail}", names, st.sampled_from(["", " trailing", " # c"]))
noise_lines = st.sampled_from(["", "# comment", "   ", "stray words", "=orphan", "[unclosed"])
ini_texts = st.lists(st.one_of(attribute_lines, header_lines, noise_lines), max_size=20).map("\n".join)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestIniParserProperties:
    """Property-based tests for the parser using Hypothesis."""

    @given(st.text())
    def test_never_raises(self, text):
        doc = read_ini(text)
        assert doc is None or isinstance(doc, dict)

    @given(ini_texts)
    def test_keys_are_normalized(self, text):
        doc = read_ini(text)
        if doc is None:
            return
        for key, section in doc.items():
            assert re.fullmatch(r"[a-z0-9_$:-]+", key)
            assert section[RAW] == section.raw_name
            for name in section.attributes():
                assert re.fullmatch(r"[a-z0-9_$-]+", name)

    @given(ini_texts)
    def test_render_then_parse_is_stable(self, text):
        doc = read_ini(text)
        if doc is None:
            return
        assert read_ini(render_ini(doc)) == doc

    @given(st.text())
    def test_render_then_parse_is_stable_for_any_text(self, text):
        doc = read_ini(text)
        if doc is None:
            return
        assert read_ini(render_ini(doc)) == doc
