# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the delimiter configuration."""

import dataclasses

import pytest

from pam_args.errors import DelimiterConfigError
from pam_args.parser.delimiters import DEFAULT_DELIMITERS, DelimiterConfig


class TestDefaults:
    def test_default_characters(self) -> None:
        config = DelimiterConfig()
        assert config.escape_char == "\\"
        assert config.single_quote == "'"
        assert config.double_quote == '"'
        assert config.open_bracket == "["
        assert config.close_bracket == "]"
        assert config.delimiter == ","

    def test_default_instance(self) -> None:
        assert DEFAULT_DELIMITERS == DelimiterConfig()

    def test_quotes(self) -> None:
        assert DelimiterConfig().quotes == ("'", '"')

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_DELIMITERS.delimiter = ";"  # type: ignore[misc]


class TestValidation:
    def test_each_field_can_be_overridden(self) -> None:
        config = DelimiterConfig(escape_char="%", open_bracket="(", close_bracket=")", delimiter=";")
        assert (config.escape_char, config.open_bracket, config.close_bracket, config.delimiter) == (
            "%",
            "(",
            ")",
            ";",
        )

    @pytest.mark.parametrize("value", ["", ",,", "ab"])
    def test_field_must_be_single_character(self, value: str) -> None:
        with pytest.raises(DelimiterConfigError, match="single character"):
            DelimiterConfig(delimiter=value)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"delimiter": "\\"},
            {"open_bracket": "]"},
            {"single_quote": '"'},
            {"escape_char": ","},
        ],
    )
    def test_characters_must_be_distinct(self, overrides: dict[str, str]) -> None:
        with pytest.raises(DelimiterConfigError) as exc_info:
            DelimiterConfig(**overrides)
        assert exc_info.value.code == "INVALID_DELIMITER_CONFIG"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            DelimiterConfig(delimiter="[")
