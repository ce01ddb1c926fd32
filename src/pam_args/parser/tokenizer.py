# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for PAM module arguments.

PAM hands a module its arguments already split on whitespace. The tokenizer
turns each of those arguments into one or more logical tokens: a plain argument
stays a single token, while a bracketed list such as ``[HOST=a,USER='b,c']`` is
expanded into its comma-separated elements. Quotes and escapes are recognised
only structurally, so that a quoted or escaped delimiter does not split a
token. They are kept verbatim in the output and resolved later by
:mod:`pam_args.parser.text`.
"""

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pam_args.errors import NestedBracketsError, TrailingEscapeError, UnclosedDelimiterError
from pam_args.parser.delimiters import DEFAULT_DELIMITERS, DelimiterConfig

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ScannerState(enum.Enum):
    """States of the bracket-interior scanner."""

    NORMAL = "normal"
    IN_SINGLE_QUOTE = "in_single_quote"
    IN_DOUBLE_QUOTE = "in_double_quote"
    IN_BRACKET = "in_bracket"
    ESCAPE_SEQUENCE = "escape_sequence"


@dataclass(frozen=True)
class TokenizationResult:
    """Tokens produced from one argument or a batch of arguments.

    Attributes:
        tokens: The tokens in input order.
        expanded: True if at least one bracketed list was expanded.
    """

    tokens: tuple[str, ...]
    expanded: bool


class Tokenizer:
    """Splits raw PAM arguments into tokens using a fixed set of delimiters."""

    def __init__(self, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> None:
        self._delimiters = delimiters

    @property
    def delimiters(self) -> DelimiterConfig:
        return self._delimiters

    def tokenize_one(self, arg: str) -> TokenizationResult:
        """Tokenize a single argument.

        An argument that does not start with the open bracket is returned
        unchanged as the only token. A bracketed argument is split on the list
        delimiter, honouring quotes and escapes.

        Args:
            arg: One whitespace-free argument as received from PAM.

        Returns:
            The tokens, with ``expanded`` set if the argument was a bracketed list.

        Raises:
            UnclosedDelimiterError: If the bracket or a quote inside it is never closed.
            NestedBracketsError: If an open bracket appears inside the list.
            TrailingEscapeError: If the list ends with a dangling escape character.
        """
        logger.debug("Tokenizing argument: %r", arg)
        open_bracket = self._delimiters.open_bracket
        if not arg.startswith(open_bracket):
            return TokenizationResult(tokens=(arg,), expanded=False)

        if len(arg) < 2 or not arg.endswith(self._delimiters.close_bracket):
            raise UnclosedDelimiterError("bracket", arg)

        tokens = _BracketScanner(arg[1:-1], self._delimiters).scan()
        logger.debug("Expanded %r into %d token(s): %r", arg, len(tokens), tokens)
        return TokenizationResult(tokens=tuple(tokens), expanded=True)

    def tokenize_batch(self, args: Iterable[str]) -> TokenizationResult:
        """Tokenize several arguments and concatenate their tokens in order.

        Processing stops at the first argument that fails; its error propagates
        and no partial result is returned.
        """
        tokens: list[str] = []
        expanded = False
        for arg in args:
            result = self.tokenize_one(arg)
            tokens.extend(result.tokens)
            expanded = expanded or result.expanded
        logger.debug("Tokenization complete, found %d token(s)", len(tokens))
        return TokenizationResult(tokens=tuple(tokens), expanded=expanded)


def tokenize_one(arg: str, delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> TokenizationResult:
    """Tokenize a single argument with the given delimiters."""
    return Tokenizer(delimiters).tokenize_one(arg)


def tokenize_batch(args: Iterable[str], delimiters: DelimiterConfig = DEFAULT_DELIMITERS) -> TokenizationResult:
    """Tokenize a sequence of arguments with the given delimiters."""
    return Tokenizer(delimiters).tokenize_batch(args)


# ################
# Implementation
# ################


class _CharClass(enum.Enum):
    ESCAPE = "escape"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    OPEN_BRACKET = "open_bracket"
    DELIMITER = "delimiter"
    OTHER = "other"


class _Action(enum.Enum):
    APPEND = "append"
    END_TOKEN = "end_token"
    REJECT_NESTED = "reject_nested"


# A next state of None means: go back to the state the escape interrupted.
_RESUME = None

_Transition = tuple[_Action, ScannerState | None]


def _build_transitions() -> dict[tuple[ScannerState, _CharClass], _Transition]:
    table: dict[tuple[ScannerState, _CharClass], _Transition] = {}
    for char_class in _CharClass:
        table[(ScannerState.NORMAL, char_class)] = (_Action.APPEND, ScannerState.NORMAL)
        table[(ScannerState.IN_SINGLE_QUOTE, char_class)] = (_Action.APPEND, ScannerState.IN_SINGLE_QUOTE)
        table[(ScannerState.IN_DOUBLE_QUOTE, char_class)] = (_Action.APPEND, ScannerState.IN_DOUBLE_QUOTE)
        table[(ScannerState.ESCAPE_SEQUENCE, char_class)] = (_Action.APPEND, _RESUME)
        table[(ScannerState.IN_BRACKET, char_class)] = (_Action.REJECT_NESTED, ScannerState.IN_BRACKET)

    table.update(
        {
            (ScannerState.NORMAL, _CharClass.ESCAPE): (_Action.APPEND, ScannerState.ESCAPE_SEQUENCE),
            (ScannerState.NORMAL, _CharClass.SINGLE_QUOTE): (_Action.APPEND, ScannerState.IN_SINGLE_QUOTE),
            (ScannerState.NORMAL, _CharClass.DOUBLE_QUOTE): (_Action.APPEND, ScannerState.IN_DOUBLE_QUOTE),
            (ScannerState.NORMAL, _CharClass.OPEN_BRACKET): (_Action.REJECT_NESTED, ScannerState.IN_BRACKET),
            (ScannerState.NORMAL, _CharClass.DELIMITER): (_Action.END_TOKEN, ScannerState.NORMAL),
            (ScannerState.IN_SINGLE_QUOTE, _CharClass.ESCAPE): (_Action.APPEND, ScannerState.ESCAPE_SEQUENCE),
            (ScannerState.IN_SINGLE_QUOTE, _CharClass.SINGLE_QUOTE): (_Action.APPEND, ScannerState.NORMAL),
            (ScannerState.IN_DOUBLE_QUOTE, _CharClass.ESCAPE): (_Action.APPEND, ScannerState.ESCAPE_SEQUENCE),
            (ScannerState.IN_DOUBLE_QUOTE, _CharClass.DOUBLE_QUOTE): (_Action.APPEND, ScannerState.NORMAL),
        }
    )
    return table


_TRANSITIONS = _build_transitions()

_UNCLOSED_DELIMITER_NAMES: dict[ScannerState, str] = {
    ScannerState.IN_SINGLE_QUOTE: "single quote",
    ScannerState.IN_DOUBLE_QUOTE: "double quote",
    ScannerState.IN_BRACKET: "bracket",
}


def _transition(state: ScannerState, char_class: _CharClass) -> _Transition:
    """Return the action and next state for a character of the given class."""
    return _TRANSITIONS[(state, char_class)]


class _BracketScanner:
    """Splits the interior of one bracketed list on the list delimiter."""

    def __init__(self, content: str, delimiters: DelimiterConfig) -> None:
        self._content = content
        self._state = ScannerState.NORMAL
        self._resume_state = ScannerState.NORMAL
        self._buffer: list[str] = []
        self._tokens: list[str] = []
        self._delimiter = delimiters.delimiter
        self._last_ended_token = False
        self._classes: dict[str, _CharClass] = {
            delimiters.escape_char: _CharClass.ESCAPE,
            delimiters.single_quote: _CharClass.SINGLE_QUOTE,
            delimiters.double_quote: _CharClass.DOUBLE_QUOTE,
            delimiters.open_bracket: _CharClass.OPEN_BRACKET,
            delimiters.delimiter: _CharClass.DELIMITER,
        }

    def scan(self) -> list[str]:
        """Run the scanner over the whole interior and return the tokens."""
        for ch in self._content:
            self._step(ch)
        return self._finish()

    def _step(self, ch: str) -> None:
        action, next_state = _transition(self._state, self._classes.get(ch, _CharClass.OTHER))

        if action is _Action.REJECT_NESTED:
            raise NestedBracketsError(self._content)
        self._last_ended_token = action is _Action.END_TOKEN
        if action is _Action.END_TOKEN:
            self._tokens.append("".join(self._buffer))
            self._buffer = []
        else:
            self._buffer.append(ch)

        if next_state is None:
            self._state = self._resume_state
        else:
            if next_state is ScannerState.ESCAPE_SEQUENCE:
                self._resume_state = self._state
            self._state = next_state

    def _finish(self) -> list[str]:
        if self._state is ScannerState.NORMAL:
            # The last token is kept even when empty: N delimiters give N + 1 tokens.
            self._tokens.append("".join(self._buffer))
            # A final delimiter that did not split (escaped) still adds a trailing empty token.
            if self._content.endswith(self._delimiter) and not self._last_ended_token:
                self._tokens.append("")
            return self._tokens
        if self._state is ScannerState.ESCAPE_SEQUENCE:
            raise TrailingEscapeError(self._content)
        raise UnclosedDelimiterError(_UNCLOSED_DELIMITER_NAMES[self._state], self._content)
