# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of raw argument values into typed Python values.

The set of conversions is closed: text, signed 32-bit integer, boolean, single
character, and an optional wrapper around exactly one of those. All of them
are stateless and share the :class:`Converter` protocol.
"""

from __future__ import annotations

import logging
import re
import typing
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pam_args.errors import InvalidBoolValueError, InvalidCharValueError, InvalidIntValueError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

TRUE_VALUES: tuple[str, ...] = ("true", "yes", "1", "on")
FALSE_VALUES: tuple[str, ...] = ("false", "no", "0", "off")
NONE_VALUES: tuple[str, ...] = ("none", "null", "")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class ConverterConfig:
    """Flags governing a single conversion.

    Attributes:
        trim_whitespace: Strip leading and trailing whitespace before converting.
        handle_empty: An optional conversion of ``""`` yields ``None``.
        recognize_none_values: An optional conversion of ``none``/``null``
            (any case) yields ``None``.
    """

    trim_whitespace: bool = True
    handle_empty: bool = True
    recognize_none_values: bool = True


class Converter(Protocol[T_co]):
    """A conversion from a raw string to a typed value."""

    @property
    def name(self) -> str: ...

    def convert(self, raw: str, config: ConverterConfig) -> T_co: ...


@dataclass(frozen=True)
class TextConverter:
    """Identity conversion; never fails."""

    name = "text"

    def convert(self, raw: str, config: ConverterConfig) -> str:
        return raw


@dataclass(frozen=True)
class IntConverter:
    """Strict signed 32-bit integer: optional sign followed by ASCII digits."""

    name = "int"

    def convert(self, raw: str, config: ConverterConfig) -> int:
        if _INT_RE.fullmatch(raw) is None:
            raise InvalidIntValueError(raw)
        value = int(raw)
        if not INT_MIN <= value <= INT_MAX:
            raise InvalidIntValueError(raw)
        return value


@dataclass(frozen=True)
class BoolConverter:
    """Case-insensitive match against :data:`TRUE_VALUES` and :data:`FALSE_VALUES`."""

    name = "bool"

    def convert(self, raw: str, config: ConverterConfig) -> bool:
        lowered = raw.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise InvalidBoolValueError(raw)


@dataclass(frozen=True)
class CharConverter:
    """Exactly one character."""

    name = "char"

    def convert(self, raw: str, config: ConverterConfig) -> str:
        if len(raw) != 1:
            raise InvalidCharValueError(raw)
        return raw


@dataclass(frozen=True)
class OptionalConverter:
    """Wraps another converter so that empty and ``none`` values become ``None``.

    Only one level of wrapping is allowed.
    """

    inner: Converter[Any]

    def __post_init__(self) -> None:
        if not isinstance(self.inner, _CONVERTER_TYPES):
            raise TypeError(f"Unsupported inner converter: {self.inner!r}")
        if isinstance(self.inner, OptionalConverter):
            raise TypeError("Optional conversions cannot be nested")

    @property
    def name(self) -> str:
        return f"optional[{self.inner.name}]"

    def convert(self, raw: str, config: ConverterConfig) -> Any | None:
        if config.handle_empty and raw == "":
            return None
        if config.recognize_none_values and raw.lower() in NONE_VALUES:
            return None
        return self.inner.convert(raw, config)


TEXT = TextConverter()
INT = IntConverter()
BOOL = BoolConverter()
CHAR = CharConverter()


def optional(inner: Converter[Any]) -> OptionalConverter:
    """Return the optional wrapper around *inner*."""
    return OptionalConverter(inner)


def resolve_converter(target: object) -> Converter[Any]:
    """Map a conversion target onto one of the built-in converters.

    Args:
        target: A converter instance, one of the types ``str``, ``int`` or
            ``bool``, or ``X | None`` / ``Optional[X]`` of those types.

    Raises:
        TypeError: If the target is not supported.
    """
    if isinstance(target, _CONVERTER_TYPES):
        return target
    if isinstance(target, type) and target in _TYPE_CONVERTERS:
        return _TYPE_CONVERTERS[target]

    members = typing.get_args(target)
    if len(members) == 2 and type(None) in members:
        inner = members[0] if members[1] is type(None) else members[1]
        if isinstance(inner, type) and inner in _TYPE_CONVERTERS:
            return OptionalConverter(_TYPE_CONVERTERS[inner])
    raise TypeError(f"Unsupported conversion target: {target!r}")


def convert(raw: str, target: object, config: ConverterConfig | None = None) -> Any:
    """Convert *raw* to *target*.

    When ``config.trim_whitespace`` is set the value is stripped first, so a
    whitespace-only value reaches an optional conversion as ``""``.

    Args:
        raw: The raw value, e.g. the value part of ``PORT=8080``.
        target: See :func:`resolve_converter`.
        config: Conversion flags; defaults to :class:`ConverterConfig()`.

    Returns:
        The converted value, or ``None`` for an absent optional value.

    Raises:
        ConversionError: If the value cannot be converted.
        TypeError: If the target is not supported.
    """
    if config is None:
        config = ConverterConfig()
    converter = resolve_converter(target)
    logger.debug("Converting %r to %s (%s)", raw, converter.name, config)
    value = raw.strip() if config.trim_whitespace else raw
    return converter.convert(value, config)


# ################
# Implementation
# ################

_INT_RE = re.compile(r"[+-]?[0-9]+")

_CONVERTER_TYPES = (TextConverter, IntConverter, BoolConverter, CharConverter, OptionalConverter)

_TYPE_CONVERTERS: dict[type, Converter[Any]] = {
    str: TEXT,
    int: INT,
    bool: BOOL,
}
