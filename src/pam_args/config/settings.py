# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser configuration model and its YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pam_args.config.log_setup import LogOptions
from pam_args.conversion import ConverterConfig
from pam_args.errors import DelimiterConfigError, ParserConfigError
from pam_args.parser.delimiters import DelimiterConfig
from pam_args.parser.formats import KeyValueFormat

# ###############
# Public Interface
# ###############


class ParserConfig(BaseModel):
    """Settings that control tokenizing, format checks and value conversion.

    Keys use kebab-case in YAML (``escape-char``, ``trim-values``, ...); the
    Python field names are accepted as well. The model is immutable.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    case_sensitive: bool = Field(alias="case-sensitive", default=True)
    case_sensitive_values: bool = Field(alias="case-sensitive-values", default=True)
    collect_non_argument_text: bool = Field(alias="collect-non-argument-text", default=False)
    enable_multi_key_value: bool = Field(alias="enable-multi-key-value", default=False)
    multi_key_value_formats: list[KeyValueFormat] = Field(
        alias="multi-key-value-formats",
        default_factory=lambda: [KeyValueFormat.KEY_VALUE],
    )

    escape_char: str = Field(alias="escape-char", default="\\")
    single_quote: str = Field(alias="single-quote", default="'")
    double_quote: str = Field(alias="double-quote", default='"')
    open_bracket: str = Field(alias="open-bracket", default="[")
    close_bracket: str = Field(alias="close-bracket", default="]")
    delimiter: str = ","

    trim_values: bool = Field(alias="trim-values", default=True)
    handle_empty: bool = Field(alias="handle-empty", default=True)
    recognize_none_values: bool = Field(alias="recognize-none-values", default=True)

    logging: LogOptions | None = None

    @model_validator(mode="after")
    def _check_delimiters(self) -> "ParserConfig":
        try:
            self.delimiters()
        except DelimiterConfigError as exc:
            raise ValueError(str(exc)) from exc
        return self

    def delimiters(self) -> DelimiterConfig:
        """Return the tokenizer delimiters described by this configuration."""
        return DelimiterConfig(
            escape_char=self.escape_char,
            single_quote=self.single_quote,
            double_quote=self.double_quote,
            open_bracket=self.open_bracket,
            close_bracket=self.close_bracket,
            delimiter=self.delimiter,
        )

    def converter_config(self) -> ConverterConfig:
        """Return the conversion flags described by this configuration."""
        return ConverterConfig(
            trim_whitespace=self.trim_values,
            handle_empty=self.handle_empty,
            recognize_none_values=self.recognize_none_values,
        )


def load_parser_config(path: Path) -> ParserConfig:
    """Load and validate a parser configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to a YAML file.

    Returns:
        A validated ParserConfig instance.

    Raises:
        ParserConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParserConfigError(f"Cannot read parser config '{path}': {exc}") from exc

    return parse_parser_config(raw, source_label=str(path))


def parse_parser_config(text: str, source_label: str = "<string>") -> ParserConfig:
    """Parse parser configuration YAML text.

    Raises:
        ParserConfigError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParserConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParserConfigError(f"{source_label}: parser config must be a YAML mapping")

    try:
        return ParserConfig.model_validate(data)
    except ValidationError as exc:
        raise ParserConfigError(f"Invalid parser config {source_label}: {exc}") from exc
