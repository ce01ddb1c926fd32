# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by the pam-args tokenizer, format detector and converters.

Every error carries a stable ``code`` discriminant plus the minimal data needed
to rebuild a user-facing message. None of them are recoverable: the first error
aborts processing of the argument (or batch of arguments) it belongs to.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pam_args.parser.formats import KeyValueFormat

# ###############
# Public Interface
# ###############


class PamArgsError(Exception):
    """Base class for all pam-args errors."""

    code = "PAM_ARGS_ERROR"

    def details(self) -> str:
        """Return a longer, user-facing description of the error."""
        return str(self)


class DelimiterConfigError(PamArgsError, ValueError):
    """Raised when a delimiter configuration is ambiguous or malformed."""

    code = "INVALID_DELIMITER_CONFIG"


class ParserConfigError(PamArgsError):
    """Raised when a parser configuration file is invalid or cannot be loaded."""

    code = "INVALID_PARSER_CONFIG"


class LoggingSetupError(PamArgsError):
    """Raised when log handlers cannot be installed, e.g. syslog is unreachable."""

    code = "LOGGING_SETUP_FAILED"


class UnclosedDelimiterError(PamArgsError):
    """Raised when a bracket or quote is opened but never closed.

    Attributes:
        delimiter: Which delimiter is unclosed (``"bracket"``, ``"single quote"``
            or ``"double quote"``).
        fragment: The input fragment that contains the unclosed delimiter.
    """

    code = "UNCLOSED_DELIMITER"

    def __init__(self, delimiter: str, fragment: str) -> None:
        super().__init__(f"Unclosed {delimiter} in: {fragment}")
        self.delimiter = delimiter
        self.fragment = fragment

    def details(self) -> str:
        return (
            f"An unclosed {self.delimiter} was found in '{self.fragment}'. "
            "Please ensure all quotes and brackets are properly closed."
        )


class NestedBracketsError(PamArgsError):
    """Raised when an open bracket appears inside a bracketed list."""

    code = "NESTED_BRACKETS"

    def __init__(self, fragment: str) -> None:
        super().__init__(f"Nested brackets are not supported: {fragment}")
        self.fragment = fragment

    def details(self) -> str:
        return (
            f"Nested brackets are not supported: {self.fragment}. "
            "Please restructure your arguments to avoid nested brackets."
        )


class TrailingEscapeError(PamArgsError):
    """Raised when an escape character is the last character of the input."""

    code = "TRAILING_ESCAPE"

    def __init__(self, fragment: str) -> None:
        super().__init__(f"Trailing escape character in: {fragment}")
        self.fragment = fragment

    def details(self) -> str:
        return (
            f"The input '{self.fragment}' ends with an escape character that escapes nothing. "
            "Remove it or escape it as well."
        )


class InvalidEscapeSequenceError(PamArgsError):
    """Raised when unescaping meets an escape sequence outside the fixed vocabulary.

    Attributes:
        sequence: The offending two-character sequence, e.g. ``"\\z"``.
    """

    code = "INVALID_ESCAPE_SEQUENCE"

    def __init__(self, sequence: str) -> None:
        super().__init__(f"Invalid escape sequence {sequence}")
        self.sequence = sequence


class InvalidKeyValueError(PamArgsError):
    """Raised when a token's key-value shape is not among the allowed formats.

    Attributes:
        key: The key part of the offending token.
        allowed_formats: The formats the caller accepts.
        detected_format: The format that was actually detected.
    """

    code = "INVALID_KEY_VALUE"

    def __init__(
        self,
        key: str,
        allowed_formats: Iterable[KeyValueFormat],
        detected_format: KeyValueFormat,
    ) -> None:
        self.key = key
        self.allowed_formats = tuple(allowed_formats)
        self.detected_format = detected_format
        allowed = ", ".join(fmt.name for fmt in self.allowed_formats) or "<none>"
        super().__init__(
            f"Invalid format for key '{key}': expected one of [{allowed}], got {detected_format.name}"
        )

    def details(self) -> str:
        return (
            f"The argument '{self.key}' has an invalid key-value format. "
            "Key-value pairs should be in the format 'key=value'."
        )


class InvalidValueError(PamArgsError):
    """Raised when a value is not among the values an argument allows.

    Attributes:
        key: The argument name.
        value: The rejected value.
    """

    code = "INVALID_VALUE"

    def __init__(self, key: str, value: str) -> None:
        super().__init__(f"Invalid value for {key}: {value!r}")
        self.key = key
        self.value = value

    def details(self) -> str:
        return (
            f"The value '{self.value}' is not valid for the argument '{self.key}'. "
            "Please refer to the documentation for allowed values."
        )


class ConversionError(PamArgsError):
    """Base class for failed string-to-value conversions.

    Attributes:
        value: The raw string that could not be converted.
        target_type: Name of the conversion target.
    """

    code = "CONVERSION_FAILED"
    target_type = "value"

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid {self.target_type} value: {value!r}")
        self.value = value


class InvalidIntValueError(ConversionError):
    """Raised when a string is not a valid signed 32-bit integer."""

    code = "INVALID_INT_VALUE"
    target_type = "integer"

    def details(self) -> str:
        return (
            f"The value '{self.value}' could not be parsed as an integer. "
            "Please provide a valid integer value."
        )


class InvalidBoolValueError(ConversionError):
    """Raised when a string is not one of the recognised boolean literals."""

    code = "INVALID_BOOL_VALUE"
    target_type = "boolean"

    def details(self) -> str:
        return (
            f"The value '{self.value}' could not be parsed as a boolean. "
            "Valid boolean values include 'true', 'false', 'yes', 'no', '1', '0', 'on', 'off'."
        )


class InvalidCharValueError(ConversionError):
    """Raised when a string does not hold exactly one character."""

    code = "INVALID_CHAR_VALUE"
    target_type = "character"

    def details(self) -> str:
        return f"Expected a single character, got '{self.value}' ({len(self.value)} characters)."
