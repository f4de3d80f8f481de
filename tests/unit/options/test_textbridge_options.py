#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_textbridge_options.py
"""Unit tests for the frozen options dataclasses."""

import dataclasses

import pytest

from textbridge.constants import LengthUnit
from textbridge.options import IniParserOptions, LengthOptions, QuoteOptions


@pytest.mark.unit
class TestIniParserOptions:
    """Tests for IniParserOptions."""

    def test_defaults(self):
        options = IniParserOptions()
        assert options.raw_section_key == "__rawSectionName"
        assert options.store_raw_section_name is True
        assert options.duplicate_separator == "_"

    def test_frozen(self):
        options = IniParserOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.duplicate_separator = "-"  # type: ignore[misc]

    def test_create_updated(self):
        options = IniParserOptions()
        updated = options.create_updated(duplicate_separator="-")
        assert updated.duplicate_separator == "-"
        assert options.duplicate_separator == "_"

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            IniParserOptions().create_updated(duplicate_separator="")

    @pytest.mark.parametrize("key", ["", "raw", "raw_name", "$x-1"])
    def test_rejects_keys_that_could_collide(self, key):
        with pytest.raises(ValueError):
            IniParserOptions(raw_section_key=key)

    @pytest.mark.parametrize("key", ["Raw", "raw name", "raw.name"])
    def test_accepts_keys_outside_attribute_space(self, key):
        assert IniParserOptions(raw_section_key=key).raw_section_key == key

    def test_from_mapping_ignores_unknown_keys(self):
        options = IniParserOptions.from_mapping({"duplicate_separator": ".", "quote_char": "'"})
        assert options.duplicate_separator == "."


@pytest.mark.unit
class TestQuoteOptions:
    """Tests for QuoteOptions."""

    def test_default(self):
        assert QuoteOptions().quote_char == '"'

    def test_single(self):
        assert QuoteOptions(quote_char="'").quote_char == "'"

    @pytest.mark.parametrize("char", ["`", "", '""', "“"])
    def test_invalid(self, char):
        with pytest.raises(ValueError):
            QuoteOptions(quote_char=char)  # type: ignore[arg-type]


@pytest.mark.unit
class TestLengthOptions:
    """Tests for LengthOptions."""

    def test_default(self):
        assert LengthOptions().default_unit is LengthUnit.NONE

    def test_token_coerced_to_enum(self):
        assert LengthOptions(default_unit="mm").default_unit is LengthUnit.MM  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "name,expected",
        [("in", LengthUnit.INCH), ("inches", LengthUnit.INCH), ("Centimeters", LengthUnit.CM)],
    )
    def test_unit_name_resolved(self, name, expected):
        assert LengthOptions(default_unit=name).default_unit is expected

    def test_invalid_unit(self):
        with pytest.raises(ValueError, match="default_unit"):
            LengthOptions(default_unit="furlong")  # type: ignore[arg-type]

    def test_from_mapping(self):
        assert LengthOptions.from_mapping({"default_unit": "pt", "log_level": "DEBUG"}).default_unit is LengthUnit.POINT
