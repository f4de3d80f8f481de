#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_interpreters.py
"""Unit tests for typed value interpretation.

Tests cover:
- Leading number parsing
- Boolean interpretation
- Numeric arrays
- Unit recognition and length conversion
"""

import pytest

from textbridge.constants import LengthUnit
from textbridge.exceptions import ValidationError
from textbridge.interpreters import (
    coerce_unit,
    convert_length,
    get_boolean,
    get_float_values,
    get_float_with_unit,
    get_int_values,
    get_unit,
    parse_float,
    parse_int,
    resolve_unit_name,
    unit_to_inch_factor,
)


@pytest.mark.unit
class TestLeadingNumbers:
    """Tests for parse_float and parse_int."""

    @pytest.mark.parametrize(
        "value,expected",
        [("12.5px", 12.5), ("  -3e2x", -300.0), (".5", 0.5), ("7.", 7.0), ("+4", 4.0)],
    )
    def test_parse_float(self, value, expected):
        assert parse_float(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["px", "", "-", ".", "e5"])
    def test_parse_float_without_number(self, value):
        assert parse_float(value) is None

    @pytest.mark.parametrize("value,expected", [("42abc", 42), ("1.9", 1), ("-7", -7), (" 08 ", 8)])
    def test_parse_int(self, value, expected):
        assert parse_int(value) == expected

    def test_parse_int_without_number(self):
        assert parse_int("x1") is None


@pytest.mark.unit
class TestGetBoolean:
    """Tests for boolean interpretation."""

    @pytest.mark.parametrize("value", ["Yes", "y", "TRUE", "t", "1", "9", " yes ", "Totally"])
    def test_truthy(self, value):
        assert get_boolean(value) is True

    @pytest.mark.parametrize("value", ["", None, "0", "no", "false", "off", "on", "   ", "-1", "٣"])
    def test_falsy(self, value):
        assert get_boolean(value) is False


@pytest.mark.unit
class TestNumberArrays:
    """Tests for get_float_values and get_int_values."""

    def test_float_values_with_brackets(self):
        assert get_float_values("[ 255, 128.2, 1.7 ]") == pytest.approx([255.0, 128.2, 1.7])

    def test_float_values_without_brackets(self):
        assert get_float_values("1.5, 2.5") == pytest.approx([1.5, 2.5])

    def test_empty_elements_are_zero(self):
        assert get_float_values("1,,3") == [1.0, 0.0, 3.0]
        assert get_int_values("[4, ,6]") == [4, 0, 6]

    def test_int_values_truncate(self):
        assert get_int_values("[1.9, 2]") == [1, 2]

    def test_trailing_text_in_element_ignored(self):
        assert get_int_values("10pt, 20pt") == [10, 20]

    @pytest.mark.parametrize("value", ["1, x", "[a, b]", "", None])
    def test_invalid_arrays(self, value):
        assert get_float_values(value) is None
        assert get_int_values(value) is None


@pytest.mark.unit
class TestGetUnit:
    """Tests for unit recognition."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ('"', LengthUnit.INCH),
            ("in", LengthUnit.INCH),
            ("Inches", LengthUnit.INCH),
            ("cm", LengthUnit.CM),
            ("Centimeters", LengthUnit.CM),
            ("mm", LengthUnit.MM),
            ("millimetres", LengthUnit.MM),
            ("cicero", LengthUnit.CICERO),
            ("pica", LengthUnit.PICA),
            ("picas", LengthUnit.PICA),
            ("px", LengthUnit.PIXEL),
            ("pixels", LengthUnit.PIXEL),
            ("pt", LengthUnit.POINT),
            ("points", LengthUnit.POINT),
        ],
    )
    def test_recognised_units(self, value, expected):
        assert get_unit(value) is expected

    @pytest.mark.parametrize("value", ["furlong", "p", "", None])
    def test_unrecognised_returns_default(self, value):
        assert get_unit(value) is LengthUnit.NONE
        assert get_unit(value, "mm") is LengthUnit.MM

    def test_bad_default(self):
        with pytest.raises(ValidationError) as exc_info:
            get_unit("cm", default="bogus")
        assert exc_info.value.parameter_name == "default"

    def test_coerce_unit(self):
        assert coerce_unit("pt") is LengthUnit.POINT
        assert coerce_unit(LengthUnit.CM) is LengthUnit.CM

    def test_coerce_unknown_unit(self):
        with pytest.raises(ValidationError) as exc_info:
            coerce_unit("inches")
        assert exc_info.value.parameter_name == "unit"
        assert exc_info.value.parameter_value == "inches"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("NONE", LengthUnit.NONE),
            ('"', LengthUnit.INCH),
            ("in", LengthUnit.INCH),
            ("Inches", LengthUnit.INCH),
            ("millimetres", LengthUnit.MM),
            (LengthUnit.PICA, LengthUnit.PICA),
            ("furlong", None),
            ("", None),
        ],
    )
    def test_resolve_unit_name(self, name, expected):
        assert resolve_unit_name(name) is expected


@pytest.mark.unit
class TestLengthConversion:
    """Tests for convert_length and unit factors."""

    def test_factors(self):
        assert unit_to_inch_factor("pt") == pytest.approx(1 / 72)
        assert unit_to_inch_factor(LengthUnit.NONE) == 1.0
        assert unit_to_inch_factor("cicero") == pytest.approx(0.17762)

    def test_convert(self):
        assert convert_length(2.54, "cm", '"') == pytest.approx(1.0)
        assert convert_length(1, LengthUnit.INCH, LengthUnit.POINT) == pytest.approx(72.0)
        assert convert_length(12, "pica", "\"") == pytest.approx(1.0)

    def test_none_unit_leaves_magnitude(self):
        assert convert_length(5, "NONE", "cm") == 5.0
        assert convert_length(5, "cm", LengthUnit.NONE) == 5.0

    def test_unknown_unit(self):
        with pytest.raises(ValidationError):
            convert_length(1, "cm", "yards")


@pytest.mark.unit
class TestGetFloatWithUnit:
    """Tests for reading unit-tagged lengths."""

    def test_picas_to_inches(self):
        assert get_float_with_unit("2p3", LengthUnit.INCH) == pytest.approx(0.208333, abs=1e-6)

    def test_picas_without_points(self):
        assert get_float_with_unit("2p") == pytest.approx(2.0)
        assert get_float_with_unit("2p", "pt") == pytest.approx(12.0)

    def test_ciceros(self):
        assert get_float_with_unit("1c3") == pytest.approx(1.5)
        assert get_float_with_unit("1c6") == pytest.approx(2.0)
        assert get_float_with_unit("1c3", '"') == pytest.approx(1.5 * 0.17762)

    @pytest.mark.parametrize(
        "value,unit,expected",
        [
            ("12.5mm", LengthUnit.NONE, 12.5),
            ("12.5mm", "cm", 1.25),
            ("25.4 mm", "cm", 2.54),
            ("-3 in", "cm", -7.62),
            ('1"', "pt", 72.0),
            ("72pt", '"', 1.0),
            ("+1 inch", "mm", 25.4),
            (".5in", "pt", 36.0),
            ("3 mm", "pt", 8.503937),
        ],
    )
    def test_lengths(self, value, unit, expected):
        assert get_float_with_unit(value, unit) == pytest.approx(expected, abs=1e-6)

    def test_no_unit_means_no_conversion(self):
        assert get_float_with_unit("10", "cm") == 10.0

    @pytest.mark.parametrize("value", ["abc", "", None, "mm"])
    def test_no_number(self, value):
        assert get_float_with_unit(value, "cm") == 0.0

    def test_bad_target_unit(self):
        with pytest.raises(ValidationError) as exc_info:
            get_float_with_unit("1in", "yards")
        assert exc_info.value.parameter_name == "convert_to"
