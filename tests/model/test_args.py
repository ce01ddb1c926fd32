# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for flag and key-value argument declarations."""

import pytest
from pydantic import ValidationError

from pam_args.model import Flag, KeyValueArg
from pam_args.parser.formats import KeyValueFormat, detect

# ###############
# Flags
# ###############


class TestFlag:
    def test_defaults(self) -> None:
        flag = Flag(name="DEBUG")
        assert flag.description == ""
        assert flag.dependencies == []
        assert flag.exclusions == []

    @pytest.mark.parametrize("name", ["", "1DEBUG", "DE-BUG", "DEBUG=1"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError):
            Flag(name=name)

    def test_builders_return_copies(self) -> None:
        flag = Flag(name="DEBUG", description="Enable debug output")
        extended = flag.depends_on("LOG_FILE").excludes("QUIET")
        assert extended.dependencies == ["LOG_FILE"]
        assert extended.exclusions == ["QUIET"]
        assert extended.description == "Enable debug output"
        assert flag.dependencies == []
        assert flag.exclusions == []

    def test_builders_accumulate(self) -> None:
        flag = Flag(name="A").depends_on("B").depends_on("C")
        assert flag.dependencies == ["B", "C"]


# ###############
# Key-Value Arguments
# ###############


class TestKeyValueArg:
    def test_defaults(self) -> None:
        arg = KeyValueArg(name="USER")
        assert arg.required is False
        assert arg.allowed_formats == [KeyValueFormat.KEY_VALUE]
        assert arg.allowed_values is None

    def test_invalid_name(self) -> None:
        with pytest.raises(ValidationError):
            KeyValueArg(name="user name")

    def test_required(self) -> None:
        arg = KeyValueArg(name="USER")
        assert arg.required_arg().required is True
        assert arg.required is False

    def test_dependencies_and_exclusions(self) -> None:
        arg = KeyValueArg(name="PORT").depends_on("HOST").excludes("SOCKET")
        assert arg.dependencies == ["HOST"]
        assert arg.exclusions == ["SOCKET"]

    def test_allowed_formats(self) -> None:
        arg = KeyValueArg(name="MODE").with_allowed_formats(KeyValueFormat.KEY_VALUE, KeyValueFormat.KEY_EQUALS)
        assert arg.allowed_formats == [KeyValueFormat.KEY_VALUE, KeyValueFormat.KEY_EQUALS]

    def test_allowed_formats_from_strings(self) -> None:
        arg = KeyValueArg(name="MODE", allowed_formats=["key-only", "key-equals"])
        assert arg.allowed_formats == [KeyValueFormat.KEY_ONLY, KeyValueFormat.KEY_EQUALS]


class TestAllowedValues:
    def test_unrestricted(self) -> None:
        assert KeyValueArg(name="USER").is_value_allowed("anything")

    def test_restricted(self) -> None:
        arg = KeyValueArg(name="MODE").with_allowed_values("strict", "lenient")
        assert arg.is_value_allowed("strict")
        assert not arg.is_value_allowed("other")

    def test_case_sensitivity(self) -> None:
        arg = KeyValueArg(name="MODE").with_allowed_values("strict")
        assert not arg.is_value_allowed("STRICT")
        assert arg.is_value_allowed("STRICT", case_sensitive=False)


class TestAccepts:
    @pytest.mark.parametrize(
        ("formats", "token", "expected"),
        [
            ([KeyValueFormat.KEY_VALUE], "USER=admin", True),
            ([KeyValueFormat.KEY_VALUE], "USER=", False),
            ([KeyValueFormat.KEY_VALUE], "USER", False),
            ([KeyValueFormat.KEY_VALUE, KeyValueFormat.KEY_EQUALS], "USER=", True),
            ([KeyValueFormat.KEY_ALL], "USER", True),
        ],
    )
    def test_accepts(self, formats: list[KeyValueFormat], token: str, expected: bool) -> None:
        arg = KeyValueArg(name="USER", allowed_formats=formats)
        assert arg.accepts(detect(token)) is expected
