# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed conversion of raw argument values."""

from pam_args.conversion.converters import (
    BOOL,
    CHAR,
    FALSE_VALUES,
    INT,
    INT_MAX,
    INT_MIN,
    NONE_VALUES,
    TEXT,
    TRUE_VALUES,
    BoolConverter,
    CharConverter,
    Converter,
    ConverterConfig,
    IntConverter,
    OptionalConverter,
    TextConverter,
    convert,
    optional,
    resolve_converter,
)

__all__ = [
    "BOOL",
    "CHAR",
    "FALSE_VALUES",
    "INT",
    "INT_MAX",
    "INT_MIN",
    "NONE_VALUES",
    "TEXT",
    "TRUE_VALUES",
    "BoolConverter",
    "CharConverter",
    "Converter",
    "ConverterConfig",
    "IntConverter",
    "OptionalConverter",
    "TextConverter",
    "convert",
    "optional",
    "resolve_converter",
]
