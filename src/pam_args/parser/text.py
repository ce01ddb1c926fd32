# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""String helpers for quoting, escaping, trimming and splitting argument text.

The tokenizer only recognises quotes and escapes. These helpers resolve them
once a caller has decided a piece of text is a value.
"""

import re

from pam_args.errors import InvalidEscapeSequenceError, TrailingEscapeError, UnclosedDelimiterError
from pam_args.parser.delimiters import DEFAULT_DELIMITERS, DelimiterConfig

# ###############
# Public Interface
# ###############


def unescape(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> str:
    """Resolve escape sequences.

    Recognised sequences are ``\\n``, ``\\t``, ``\\r``, ``\\\\``, ``\\'``,
    ``\\"``, ``\\,``, ``\\[`` and ``\\]`` (with the configured escape character
    in place of the backslash). An escaped escape character always yields the
    escape character itself.

    Raises:
        InvalidEscapeSequenceError: On an escape sequence outside that set.
        TrailingEscapeError: If the text ends with an escape character.
    """
    escape_char = delimiters.escape_char
    chars: list[str] = []
    in_escape = False
    for ch in text:
        if in_escape:
            if ch == escape_char:
                chars.append(ch)
            elif ch in _ESCAPE_TABLE:
                chars.append(_ESCAPE_TABLE[ch])
            else:
                raise InvalidEscapeSequenceError(f"{escape_char}{ch}")
            in_escape = False
        elif ch == escape_char:
            in_escape = True
        else:
            chars.append(ch)

    if in_escape:
        raise TrailingEscapeError(text)
    return "".join(chars)


def escape(text: str, chars_to_escape: str = "", delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> str:
    """Prefix the escape character to itself and to every character in *chars_to_escape*."""
    escape_char = delimiters.escape_char
    return "".join(f"{escape_char}{ch}" if ch == escape_char or ch in chars_to_escape else ch for ch in text)


def smart_trim(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> str:
    """Trim whitespace, keeping the quotes of a quoted string and trimming inside them.

    ``'"  a b  "'`` becomes ``'"a b"'``; unquoted text is stripped as usual.
    """
    if len(text) < 2:
        return text.strip()

    first, last = text[0], text[-1]
    if first == last and first in delimiters.quotes:
        return f"{first}{text[1:-1].strip()}{first}"
    return text.strip()


def smart_split(
    text: str,
    separator: str | None = None,
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
) -> list[str]:
    """Split on *separator* outside of quotes.

    Quotes and escape sequences are kept verbatim in the parts. The separator
    defaults to the configured list delimiter.

    Raises:
        UnclosedDelimiterError: If a quote is never closed.
        TrailingEscapeError: If the text ends with an escape character.
    """
    sep = delimiters.delimiter if separator is None else separator
    parts: list[str] = []
    current: list[str] = []
    in_single_quote = False
    in_double_quote = False
    in_escape = False

    for ch in text:
        if in_escape:
            current.append(ch)
            in_escape = False
        elif ch == delimiters.escape_char:
            current.append(ch)
            in_escape = True
        elif ch == delimiters.single_quote and not in_double_quote:
            current.append(ch)
            in_single_quote = not in_single_quote
        elif ch == delimiters.double_quote and not in_single_quote:
            current.append(ch)
            in_double_quote = not in_double_quote
        elif ch == sep and not in_single_quote and not in_double_quote:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))

    if in_single_quote:
        raise UnclosedDelimiterError("single quote", text)
    if in_double_quote:
        raise UnclosedDelimiterError("double quote", text)
    if in_escape:
        raise TrailingEscapeError(text)
    return parts


def strip_quotes(text: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> str:
    """Remove one pair of matching quotes surrounding *text*, if present."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in delimiters.quotes:
        return text[1:-1]
    return text


def is_valid_key_name(key: str) -> bool:
    """True if *key* is a non-empty ASCII identifier (letters, digits, underscores)."""
    return _KEY_NAME_RE.fullmatch(key) is not None


def normalize_case(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def compare_case(a: str, b: str, case_sensitive: bool) -> bool:
    return normalize_case(a, case_sensitive) == normalize_case(b, case_sensitive)


# ################
# Implementation
# ################

_ESCAPE_TABLE: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "'": "'",
    '"': '"',
    ",": ",",
    "[": "[",
    "]": "]",
}

_KEY_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*", re.ASCII)
