# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations of the flags and key-value arguments a PAM module accepts.

These are plain data. Enforcing required, dependency and exclusion rules
belongs to a higher-level validator and is not done here.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator
from pydantic import Field as _Field

from pam_args.errors import InvalidKeyValueError
from pam_args.parser.formats import FormatDetection, KeyValueFormat, validate
from pam_args.parser.text import compare_case, is_valid_key_name

# ###############
# Public Interface
# ###############


class Flag(BaseModel):
    """A bare argument such as ``DEBUG``."""

    name: str
    description: str = ""
    dependencies: list[str] = _Field(default_factory=list)
    exclusions: list[str] = _Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _require_key_name(value)

    def depends_on(self, dependency: str) -> Flag:
        """Return a copy that also depends on *dependency*."""
        return self.model_copy(update={"dependencies": [*self.dependencies, dependency]})

    def excludes(self, exclusion: str) -> Flag:
        """Return a copy that also excludes *exclusion*."""
        return self.model_copy(update={"exclusions": [*self.exclusions, exclusion]})


class KeyValueArg(BaseModel):
    """A ``KEY=VALUE`` argument such as ``USER=admin``.

    Attributes:
        name: The key, e.g. ``USER``.
        description: Help text.
        required: Whether the argument must be present.
        dependencies: Names of arguments that must accompany this one.
        exclusions: Names of arguments that may not accompany this one.
        allowed_formats: Token shapes accepted for this key.
        allowed_values: If set, the only values accepted.
    """

    name: str
    description: str = ""
    required: bool = False
    dependencies: list[str] = _Field(default_factory=list)
    exclusions: list[str] = _Field(default_factory=list)
    allowed_formats: list[KeyValueFormat] = _Field(default_factory=lambda: [KeyValueFormat.KEY_VALUE])
    allowed_values: list[str] | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _require_key_name(value)

    def required_arg(self) -> KeyValueArg:
        return self.model_copy(update={"required": True})

    def depends_on(self, dependency: str) -> KeyValueArg:
        return self.model_copy(update={"dependencies": [*self.dependencies, dependency]})

    def excludes(self, exclusion: str) -> KeyValueArg:
        return self.model_copy(update={"exclusions": [*self.exclusions, exclusion]})

    def with_allowed_formats(self, *formats: KeyValueFormat) -> KeyValueArg:
        return self.model_copy(update={"allowed_formats": list(formats)})

    def with_allowed_values(self, *values: str) -> KeyValueArg:
        return self.model_copy(update={"allowed_values": list(values)})

    def is_value_allowed(self, value: str, case_sensitive: bool = True) -> bool:
        """True if there is no value restriction or *value* is one of the allowed values."""
        if self.allowed_values is None:
            return True
        return any(compare_case(value, allowed, case_sensitive) for allowed in self.allowed_values)

    def accepts(self, detection: FormatDetection) -> bool:
        """True if the detected token shape is one of this argument's allowed formats."""
        try:
            validate(detection, self.allowed_formats)
        except InvalidKeyValueError:
            return False
        return True


# ################
# Implementation
# ################


def _require_key_name(value: str) -> str:
    if not is_valid_key_name(value):
        raise ValueError(f"invalid argument name {value!r}: expected letters, digits and underscores")
    return value
