# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Argument strings to validated (key, value) pairs.

Runs the tokenizer over a batch of arguments, classifies every token and
optionally resolves quoting and escapes in the values. Matching the pairs
against declared arguments is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import TYPE_CHECKING

from pam_args.errors import InvalidKeyValueError
from pam_args.parser.delimiters import DEFAULT_DELIMITERS, DelimiterConfig
from pam_args.parser.formats import FormatDetection, KeyValueFormat, detect, validate
from pam_args.parser.text import strip_quotes, unescape
from pam_args.parser.tokenizer import Tokenizer

if TYPE_CHECKING:
    from pam_args.storage.store import NonArgTextStore

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def scan_key_values(
    args: Iterable[str],
    allowed_formats: Iterable[KeyValueFormat] = (KeyValueFormat.KEY_ALL,),
    delimiters: DelimiterConfig = DEFAULT_DELIMITERS,
    resolve_values: bool = True,
    non_arg_text: NonArgTextStore | None = None,
) -> list[FormatDetection]:
    """Tokenize *args* and classify each token.

    Args:
        args: Raw arguments, e.g. ``["DEBUG", "[USER=admin,HOST='a,b']"]``.
        allowed_formats: Formats every token must match.
        delimiters: Structural characters used by the tokenizer and unescaping.
        resolve_values: If set, surrounding quotes are removed from values and
            escape sequences are resolved.
        non_arg_text: If given, tokens whose format is not allowed are added
            to this store and skipped instead of failing the scan.

    Returns:
        One detection per token that passed validation, in input order.

    Raises:
        PamArgsError: The first tokenizer, format or unescaping error encountered.
    """
    allowed = tuple(allowed_formats)
    result = Tokenizer(delimiters).tokenize_batch(args)
    detections: list[FormatDetection] = []
    for token in result.tokens:
        detection = detect(token)
        try:
            validate(detection, allowed)
        except InvalidKeyValueError:
            if non_arg_text is None:
                raise
            logger.debug("Collecting non-argument text: %r", token)
            non_arg_text.add(token)
            continue
        if resolve_values and detection.value:
            detection = replace(detection, value=unescape(strip_quotes(detection.value, delimiters), delimiters))
        detections.append(detection)
    logger.debug("Scanned %d key-value token(s)", len(detections))
    return detections
