# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Delimiter characters shared by the tokenizer and the string utilities."""

from dataclasses import dataclass, fields

from pam_args.errors import DelimiterConfigError

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DelimiterConfig:
    """The six structural characters of an argument string.

    Instances are immutable and may be shared freely. Construction fails if a
    field is not exactly one character or if two fields use the same character,
    since the scanner could not tell their roles apart.

    Attributes:
        escape_char: Escapes the character that follows it.
        single_quote: Opens and closes a single-quoted section.
        double_quote: Opens and closes a double-quoted section.
        open_bracket: Starts a bracketed list.
        close_bracket: Ends a bracketed list.
        delimiter: Separates the elements of a bracketed list.
    """

    escape_char: str = "\\"
    single_quote: str = "'"
    double_quote: str = '"'
    open_bracket: str = "["
    close_bracket: str = "]"
    delimiter: str = ","

    def __post_init__(self) -> None:
        seen: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or len(value) != 1:
                raise DelimiterConfigError(f"'{f.name}' must be a single character, got {value!r}")
            if value in seen:
                raise DelimiterConfigError(f"'{f.name}' and '{seen[value]}' both use the character {value!r}")
            seen[value] = f.name

    @property
    def quotes(self) -> tuple[str, str]:
        """The single and double quote characters."""
        return (self.single_quote, self.double_quote)


DEFAULT_DELIMITERS = DelimiterConfig()
