# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser settings and logging setup."""

from pam_args.config.log_setup import (
    ROOT_LOGGER_NAME,
    LogDestination,
    LogOptions,
    dual_output,
    for_development,
    for_pam,
)
from pam_args.config.settings import ParserConfig, load_parser_config, parse_parser_config

__all__ = [
    "ROOT_LOGGER_NAME",
    "LogDestination",
    "LogOptions",
    "ParserConfig",
    "dual_output",
    "for_development",
    "for_pam",
    "load_parser_config",
    "parse_parser_config",
]
