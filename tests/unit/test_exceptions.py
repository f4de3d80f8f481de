#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the textbridge exception hierarchy."""

import pytest

from textbridge.exceptions import (
    ConfigError,
    FileError,
    InputFileNotFoundError,
    InvalidOptionsError,
    TextBridgeError,
    ValidationError,
)
from textbridge.options import IniParserOptions, QuoteOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test the exception class hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad"),
            InvalidOptionsError("ini", IniParserOptions, QuoteOptions),
            FileError("io"),
            InputFileNotFoundError("missing.txt"),
            ConfigError("broken"),
        ],
    )
    def test_all_derive_from_base(self, error):
        assert isinstance(error, TextBridgeError)
        assert str(error) == error.message

    def test_invalid_options_is_validation_error(self):
        assert issubclass(InvalidOptionsError, ValidationError)

    def test_not_found_is_file_error(self):
        assert issubclass(InputFileNotFoundError, FileError)


@pytest.mark.unit
class TestExceptionDetails:
    """Test the attributes carried by each exception."""

    def test_validation_error(self):
        original = ValueError("inner")
        error = ValidationError("bad unit", parameter_name="unit", parameter_value="yd", original_error=original)
        assert error.parameter_name == "unit"
        assert error.parameter_value == "yd"
        assert error.original_error is original

    def test_invalid_options_message(self):
        error = InvalidOptionsError("ini", IniParserOptions, QuoteOptions)
        assert error.message == "ini expected options of type 'IniParserOptions' but received 'QuoteOptions'."
        assert error.parameter_name == "options"
        assert error.received_type is QuoteOptions

    def test_input_file_not_found(self):
        error = InputFileNotFoundError("missing.txt")
        assert error.file_path == "missing.txt"
        assert error.message == "File not found: missing.txt"

    def test_config_error(self):
        error = ConfigError("Invalid TOML", config_path="/tmp/cfg.toml")
        assert error.config_path == "/tmp/cfg.toml"
        assert error.original_error is None
