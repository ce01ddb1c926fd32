# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for scanning raw arguments into key-value detections."""

import pytest

from pam_args.errors import (
    InvalidEscapeSequenceError,
    InvalidKeyValueError,
    NestedBracketsError,
    UnclosedDelimiterError,
)
from pam_args.parser.delimiters import DelimiterConfig
from pam_args.parser.formats import FormatDetection, KeyValueFormat
from pam_args.parser.pipeline import scan_key_values
from pam_args.storage.store import NonArgTextStore


def _pairs(args: list[str], **kwargs) -> list[tuple[str, str | None]]:
    return [(d.key, d.value) for d in scan_key_values(args, **kwargs)]


class TestScanKeyValues:
    def test_mixed_arguments(self) -> None:
        detections = scan_key_values(["DEBUG", "[USER=admin,EMPTY=]", "PORT=22"])
        assert detections == [
            FormatDetection(format=KeyValueFormat.KEY_ONLY, key="DEBUG", value=None),
            FormatDetection(format=KeyValueFormat.KEY_VALUE, key="USER", value="admin"),
            FormatDetection(format=KeyValueFormat.KEY_EQUALS, key="EMPTY", value=""),
            FormatDetection(format=KeyValueFormat.KEY_VALUE, key="PORT", value="22"),
        ]

    def test_quotes_are_removed_from_values(self) -> None:
        assert _pairs(["[HOST='a,b',NAME=\"x y\"]"]) == [("HOST", "a,b"), ("NAME", "x y")]

    def test_escapes_are_resolved_in_values(self) -> None:
        assert _pairs([r"[PATH=a\,b,MSG=line\n]"]) == [("PATH", "a,b"), ("MSG", "line\n")]

    def test_escape_inside_quoted_value(self) -> None:
        assert _pairs([r"[MSG='it\'s']"]) == [("MSG", "it's")]

    def test_raw_values_are_kept(self) -> None:
        assert _pairs(["[HOST='a,b']"], resolve_values=False) == [("HOST", "'a,b'")]

    def test_key_is_not_unescaped(self) -> None:
        assert _pairs([r"[A\,B=1]"]) == [(r"A\,B", "1")]

    def test_allowed_formats_are_enforced(self) -> None:
        with pytest.raises(InvalidKeyValueError) as exc_info:
            scan_key_values(["USER=admin", "DEBUG"], allowed_formats=[KeyValueFormat.KEY_VALUE])
        assert exc_info.value.key == "DEBUG"

    def test_invalid_escape_in_value(self) -> None:
        with pytest.raises(InvalidEscapeSequenceError):
            scan_key_values([r"MSG=a\qb"])

    @pytest.mark.parametrize(
        ("args", "error"),
        [
            (["[A=1,B=2"], UnclosedDelimiterError),
            (["[A=[1]]"], NestedBracketsError),
        ],
    )
    def test_tokenizer_errors_propagate(self, args: list[str], error: type[Exception]) -> None:
        with pytest.raises(error):
            scan_key_values(args)

    def test_custom_delimiters(self) -> None:
        delimiters = DelimiterConfig(open_bracket="(", close_bracket=")", delimiter=";")
        assert _pairs(["(A=1;B='x;y')"], delimiters=delimiters) == [("A", "1"), ("B", "x;y")]

    def test_empty_batch(self) -> None:
        assert scan_key_values([]) == []


class TestNonArgumentText:
    def test_rejected_tokens_are_collected(self) -> None:
        texts = NonArgTextStore()
        detections = scan_key_values(
            ["USER=admin", "some text", "[HOST=h,EMPTY=]"],
            allowed_formats=[KeyValueFormat.KEY_VALUE],
            non_arg_text=texts,
        )
        assert [(d.key, d.value) for d in detections] == [("USER", "admin"), ("HOST", "h")]
        assert texts.texts == ("some text", "EMPTY=")

    def test_collected_text_is_kept_verbatim(self) -> None:
        texts = NonArgTextStore()
        scan_key_values([r"[A\,B]"], allowed_formats=[KeyValueFormat.KEY_VALUE], non_arg_text=texts)
        assert texts.texts == (r"A\,B",)

    def test_tokenizer_errors_still_propagate(self) -> None:
        texts = NonArgTextStore()
        with pytest.raises(UnclosedDelimiterError):
            scan_key_values(["[A=1"], allowed_formats=[KeyValueFormat.KEY_VALUE], non_arg_text=texts)
        assert len(texts) == 0

    def test_nothing_collected_when_all_tokens_match(self) -> None:
        texts = NonArgTextStore()
        assert _pairs(["DEBUG"], non_arg_text=texts) == [("DEBUG", None)]
        assert texts.texts == ()
