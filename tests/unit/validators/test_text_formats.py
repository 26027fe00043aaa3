"""
Tests for the boolean, line, text, regex and JSON validators.

Tests cover:
- Boolean words, integers and native booleans
- Line emptiness policy and control characters
- Multi-line text line breaks and control characters
- Full-match regular expressions
- JSON parsing and expected top-level type
"""

import json
import re

import pytest

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import (
    BooleanError,
    BooleanErrorKind,
    ConfigurationError,
    JsonError,
    JsonErrorKind,
    LineError,
    LineErrorKind,
    RegexError,
    RegexErrorKind,
    TextError,
    TextErrorKind,
)
from policy_validators.validators.boolean import BooleanValidator
from policy_validators.validators.json_text import JsonValidator
from policy_validators.validators.text import LineValidator, RegexValidator, TextValidator


@pytest.mark.unit
class TestBooleanValidator:
    """Test boolean validation."""

    @pytest.mark.parametrize(
        "raw", [True, 1, "true", "TRUE", "t", "Yes", "y", "on", "1"]
    )
    def test_true(self, raw):
        assert BooleanValidator().parse(raw) is True

    @pytest.mark.parametrize(
        "raw", [False, 0, "false", "F", "no", "N", "off", "0"]
    )
    def test_false(self, raw):
        assert BooleanValidator().parse(raw) is False

    @pytest.mark.parametrize("raw", [2, -1, "", "maybe", " true", 1.0, None])
    def test_invalid(self, raw):
        with pytest.raises(BooleanError) as exc_info:
            BooleanValidator().parse(raw)

        assert exc_info.value.kind is BooleanErrorKind.INVALID


@pytest.mark.unit
class TestLineValidator:
    """Test single-line validation."""

    @pytest.mark.parametrize("raw", ["", "hello world", "tab\tseparated", "  "])
    def test_allow(self, raw):
        assert LineValidator().parse(raw) == raw

    @pytest.mark.parametrize("raw", ["two\nlines", "carriage\r", "bell\x07", "del\x7f"])
    def test_control_characters(self, raw):
        with pytest.raises(LineError) as exc_info:
            LineValidator().parse(raw)

        assert exc_info.value.kind is LineErrorKind.INVALID

    def test_must_be_empty(self):
        validator = LineValidator(empty=TriAllow.MUST)

        assert validator.is_valid("")
        assert validator.is_valid(" \t ")
        with pytest.raises(LineError) as exc_info:
            validator.parse("x")
        assert exc_info.value.kind is LineErrorKind.EMPTY_MUST

    def test_disallow_empty(self):
        validator = LineValidator(empty=TriAllow.DISALLOW)

        assert validator.is_valid("  value")
        for raw in ("", "   ", "\n"):
            with pytest.raises(LineError) as exc_info:
                validator.parse(raw)
            assert exc_info.value.kind is LineErrorKind.EMPTY_DISALLOW

    def test_disallow_rejects_control_characters_after_content(self):
        with pytest.raises(LineError) as exc_info:
            LineValidator(empty=TriAllow.DISALLOW).parse("value\nmore")

        assert exc_info.value.kind is LineErrorKind.INVALID


@pytest.mark.unit
class TestTextValidator:
    """Test multi-line text validation."""

    @pytest.mark.parametrize(
        "raw", ["", "two\nlines", "windows\r\nline", "tab\tand\vvertical tab"]
    )
    def test_allow(self, raw):
        assert TextValidator().parse(raw) == raw

    @pytest.mark.parametrize("raw", ["bell\x07", "form\x0cfeed", "escape\x1b", "del\x7f"])
    def test_control_characters(self, raw):
        with pytest.raises(TextError) as exc_info:
            TextValidator().parse(raw)

        assert exc_info.value.kind is TextErrorKind.INVALID

    def test_must_be_empty(self):
        validator = TextValidator(empty=TriAllow.MUST)

        assert validator.is_valid(" \n\t ")
        with pytest.raises(TextError) as exc_info:
            validator.parse("a\nb")
        assert exc_info.value.kind is TextErrorKind.EMPTY_MUST

    def test_disallow_empty(self):
        validator = TextValidator(empty=TriAllow.DISALLOW)

        assert validator.is_valid("\n\nfirst\nsecond")
        with pytest.raises(TextError) as exc_info:
            validator.parse("\n \r\n")
        assert exc_info.value.kind is TextErrorKind.EMPTY_DISALLOW

    def test_non_string(self):
        with pytest.raises(TextError) as exc_info:
            TextValidator().parse(b"bytes")

        assert exc_info.value.kind is TextErrorKind.INVALID


@pytest.mark.unit
class TestRegexValidator:
    """Test regex validation."""

    def test_full_match(self):
        validator = RegexValidator(pattern=r"[a-z]+-\d+")

        assert validator.parse("abc-123") == "abc-123"
        with pytest.raises(RegexError) as exc_info:
            validator.parse("abc-123x")
        assert exc_info.value.kind is RegexErrorKind.INVALID

    def test_flags(self):
        assert RegexValidator(pattern="[a-z]+", flags=re.IGNORECASE).is_valid("ABC")

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError):
            RegexValidator(pattern="[unclosed")

    def test_non_string(self):
        assert not RegexValidator(pattern=".*").is_valid(None)


@pytest.mark.unit
class TestJsonValidator:
    """Test JSON validation."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [('{"a": 1}', {"a": 1}), ("[1, 2]", [1, 2]), ("3", 3), ("null", None), (b'"x"', "x")],
    )
    def test_valid(self, raw, expected):
        assert JsonValidator().parse(raw) == expected

    @pytest.mark.parametrize("raw", ["", "{", "{'a': 1}", "[1,]", None])
    def test_parse_error(self, raw):
        with pytest.raises(JsonError) as exc_info:
            JsonValidator().parse(raw)

        assert exc_info.value.kind is JsonErrorKind.PARSE_ERROR

    def test_decode_error_is_kept(self):
        with pytest.raises(JsonError) as exc_info:
            JsonValidator().parse("{")

        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_expected_type(self):
        assert JsonValidator(expect="object").is_valid('{"a": 1}')
        assert JsonValidator(expect="array").is_valid("[]")

        with pytest.raises(JsonError) as exc_info:
            JsonValidator(expect="object").parse("[]")
        assert exc_info.value.kind is JsonErrorKind.TYPE_MISMATCH

    def test_unknown_expectation(self):
        with pytest.raises(ConfigurationError):
            JsonValidator(expect="string")
