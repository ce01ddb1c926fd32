# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer, key-value format detection and string helpers for PAM arguments."""

from pam_args.parser.delimiters import DEFAULT_DELIMITERS, DelimiterConfig
from pam_args.parser.formats import (
    FormatDetection,
    KeyValueFormat,
    detect,
    detect_and_validate,
    validate,
)
from pam_args.parser.pipeline import scan_key_values
from pam_args.parser.text import (
    compare_case,
    escape,
    is_valid_key_name,
    normalize_case,
    smart_split,
    smart_trim,
    strip_quotes,
    unescape,
)
from pam_args.parser.tokenizer import (
    ScannerState,
    TokenizationResult,
    Tokenizer,
    tokenize_batch,
    tokenize_one,
)

__all__ = [
    # Delimiters
    "DEFAULT_DELIMITERS",
    "DelimiterConfig",
    # Tokenizer
    "ScannerState",
    "TokenizationResult",
    "Tokenizer",
    "tokenize_one",
    "tokenize_batch",
    # Formats
    "FormatDetection",
    "KeyValueFormat",
    "detect",
    "validate",
    "detect_and_validate",
    "scan_key_values",
    # Text helpers
    "unescape",
    "escape",
    "smart_trim",
    "smart_split",
    "strip_quotes",
    "is_valid_key_name",
    "normalize_case",
    "compare_case",
]
