# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Detection and validation of the key-value shape of a token."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from pam_args.errors import InvalidKeyValueError

# ###############
# Public Interface
# ###############


class KeyValueFormat(enum.Enum):
    """The shape of a token with respect to the ``=`` character."""

    KEY_VALUE = "key-value"  # USER=admin
    KEY_ONLY = "key-only"  # DEBUG
    KEY_EQUALS = "key-equals"  # EMPTY=

    # Accepts any of the three formats above; never produced by detect().
    KEY_ALL = "key-all"

    @classmethod
    def concrete(cls) -> tuple[KeyValueFormat, ...]:
        """Return the formats that :func:`detect` can produce."""
        return (cls.KEY_VALUE, cls.KEY_ONLY, cls.KEY_EQUALS)

    def is_compatible_with(self, other: KeyValueFormat) -> bool:
        """True if the formats are equal or either one is KEY_ALL."""
        return self is other or KeyValueFormat.KEY_ALL in (self, other)

    def is_compatible_with_any(self, formats: Iterable[KeyValueFormat]) -> bool:
        return any(self.is_compatible_with(fmt) for fmt in formats)


@dataclass(frozen=True)
class FormatDetection:
    """The result of classifying one token.

    Attributes:
        format: The detected format (never KEY_ALL).
        key: Everything before the first ``=``, or the whole token.
        value: Everything after the first ``=``; ``""`` for KEY_EQUALS and
            ``None`` for KEY_ONLY.
    """

    format: KeyValueFormat
    key: str
    value: str | None


def detect(token: str) -> FormatDetection:
    """Classify a token as KEY=VALUE, KEY or KEY= by its first ``=``."""
    key, equals, value = token.partition("=")
    if not equals:
        return FormatDetection(format=KeyValueFormat.KEY_ONLY, key=token, value=None)
    if not value:
        return FormatDetection(format=KeyValueFormat.KEY_EQUALS, key=key, value="")
    return FormatDetection(format=KeyValueFormat.KEY_VALUE, key=key, value=value)


def validate(detection: FormatDetection, allowed_formats: Iterable[KeyValueFormat]) -> None:
    """Check that a detected format is among the allowed ones.

    Args:
        detection: Result of :func:`detect`.
        allowed_formats: Formats the caller accepts; KEY_ALL accepts everything.

    Raises:
        InvalidKeyValueError: If no allowed format is compatible with the detected one.
    """
    allowed = tuple(allowed_formats)
    if not detection.format.is_compatible_with_any(allowed):
        raise InvalidKeyValueError(detection.key, allowed, detection.format)


def detect_and_validate(token: str, allowed_formats: Iterable[KeyValueFormat]) -> FormatDetection:
    """Detect the format of a token and validate it in one step."""
    detection = detect(token)
    validate(detection, allowed_formats)
    return detection
