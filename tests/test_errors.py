# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the error types and their user-facing messages."""

import pytest

from pam_args.errors import (
    ConversionError,
    DelimiterConfigError,
    InvalidBoolValueError,
    InvalidCharValueError,
    InvalidEscapeSequenceError,
    InvalidIntValueError,
    InvalidKeyValueError,
    InvalidValueError,
    LoggingSetupError,
    NestedBracketsError,
    PamArgsError,
    ParserConfigError,
    TrailingEscapeError,
    UnclosedDelimiterError,
)
from pam_args.parser.formats import KeyValueFormat


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (UnclosedDelimiterError("bracket", "[a"), "UNCLOSED_DELIMITER"),
        (NestedBracketsError("a,[b]"), "NESTED_BRACKETS"),
        (TrailingEscapeError("a\\"), "TRAILING_ESCAPE"),
        (InvalidEscapeSequenceError("\\z"), "INVALID_ESCAPE_SEQUENCE"),
        (InvalidKeyValueError("A", [KeyValueFormat.KEY_VALUE], KeyValueFormat.KEY_ONLY), "INVALID_KEY_VALUE"),
        (InvalidIntValueError("x"), "INVALID_INT_VALUE"),
        (InvalidBoolValueError("x"), "INVALID_BOOL_VALUE"),
        (InvalidCharValueError("xy"), "INVALID_CHAR_VALUE"),
        (InvalidValueError("MODE", "fast"), "INVALID_VALUE"),
        (DelimiterConfigError("clash"), "INVALID_DELIMITER_CONFIG"),
        (ParserConfigError("bad"), "INVALID_PARSER_CONFIG"),
        (LoggingSetupError("no syslog"), "LOGGING_SETUP_FAILED"),
    ],
)
def test_codes(error: PamArgsError, code: str) -> None:
    """Every error carries a stable code and a non-empty description."""
    assert isinstance(error, PamArgsError)
    assert error.code == code
    assert error.details()


def test_unclosed_delimiter_message() -> None:
    error = UnclosedDelimiterError("single quote", "[K='x]")
    assert str(error) == "Unclosed single quote in: [K='x]"
    assert "single quote" in error.details()


def test_conversion_errors_share_base() -> None:
    for cls in (InvalidIntValueError, InvalidBoolValueError, InvalidCharValueError):
        assert issubclass(cls, ConversionError)


def test_char_details_count_characters() -> None:
    assert "(3 characters)" in InvalidCharValueError("abc").details()


def test_key_value_message_without_allowed_formats() -> None:
    error = InvalidKeyValueError("A", [], KeyValueFormat.KEY_EQUALS)
    assert str(error) == "Invalid format for key 'A': expected one of [<none>], got KEY_EQUALS"


def test_escape_sequence_message() -> None:
    assert str(InvalidEscapeSequenceError("\\q")) == "Invalid escape sequence \\q"


def test_invalid_value_message() -> None:
    error = InvalidValueError("MODE", "fast")
    assert str(error) == "Invalid value for MODE: 'fast'"
    assert "'fast' is not valid for the argument 'MODE'" in error.details()
    assert not isinstance(error, ConversionError)
