# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Containers for scanned key-value pairs and leftover argument text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from pam_args.conversion import ConverterConfig, convert
from pam_args.parser.formats import FormatDetection
from pam_args.parser.text import normalize_case

# ###############
# Public Interface
# ###############


class KeyValueStore:
    """Keys mapped to their raw values, with optional case-insensitive lookup.

    A key stored without a value (a ``KEY`` token) maps to ``None``. Adding a
    key twice keeps the last value.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        self._values: dict[str, str | None] = {}

    @classmethod
    def from_detections(cls, detections: Iterable[FormatDetection], case_sensitive: bool = True) -> KeyValueStore:
        store = cls(case_sensitive)
        for detection in detections:
            store.add(detection.key, detection.value)
        return store

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def normalize_key(self, key: str) -> str:
        return normalize_case(key, self._case_sensitive)

    def add(self, key: str, value: str | None) -> None:
        self._values[self.normalize_key(key)] = value

    def get(self, key: str) -> str | None:
        """Return the raw value of *key*, or ``None`` if it is missing or has no value."""
        return self._values.get(self.normalize_key(key))

    def value_of(self, key: str, target: object, config: ConverterConfig | None = None) -> Any:
        """Convert the value of *key* with the conversion chain.

        Returns ``None`` when the key is missing or was given without a value.

        Raises:
            ConversionError: If the stored value cannot be converted.
        """
        raw = self.get(key)
        if raw is None:
            return None
        return convert(raw, target, config)

    def keys(self) -> list[str]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.normalize_key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)


class NonArgTextStore:
    """Collects text that did not match any declared argument, in arrival order."""

    def __init__(self) -> None:
        self._texts: list[str] = []

    def add(self, text: str) -> None:
        self._texts.append(text)

    def add_multiple(self, texts: Iterable[str]) -> None:
        self._texts.extend(texts)

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(self._texts)

    def clear(self) -> None:
        self._texts.clear()

    def __len__(self) -> int:
        return len(self._texts)
