# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the pam-args command-line interface.

The CLI exposes the lexical front-end for inspecting how a PAM module would
see its arguments: ``tokenize`` shows the token list, ``scan`` shows the
classified key-value pairs and ``convert`` runs a single value through the
conversion chain.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from pam_args.config.log_setup import LogDestination, LogOptions
from pam_args.config.settings import ParserConfig, load_parser_config
from pam_args.conversion import BOOL, CHAR, INT, TEXT, convert, optional
from pam_args.errors import InvalidValueError, PamArgsError
from pam_args.model.args import KeyValueArg
from pam_args.parser.formats import KeyValueFormat
from pam_args.parser.pipeline import scan_key_values
from pam_args.parser.text import compare_case
from pam_args.parser.tokenizer import Tokenizer
from pam_args.storage.store import KeyValueStore, NonArgTextStore

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the pam-args CLI."""
    parser = argparse.ArgumentParser(
        prog="pam-args",
        description="pam-args: inspect how PAM module arguments are tokenized and converted",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML parser configuration file (default: built-in settings)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=None,
        help="Log to stderr at the given level",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokenize subcommand
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Split arguments into tokens",
        description="Expand bracketed arguments and print one token per line.",
    )
    tokenize_parser.add_argument("args", nargs="+", metavar="ARG", help="Raw PAM arguments")

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Classify arguments as key-value pairs",
        description="Tokenize arguments, check their key-value format and print the pairs.",
    )
    scan_parser.add_argument("args", nargs="+", metavar="ARG", help="Raw PAM arguments")
    scan_parser.add_argument(
        "--formats",
        type=_parse_formats,
        default=None,
        help="Comma-separated allowed formats: "
        + ", ".join(fmt.value for fmt in KeyValueFormat)
        + " (default: multi-key-value-formats from the config if enabled, else key-all)",
    )
    scan_parser.add_argument(
        "--choices",
        type=_parse_choices,
        action="append",
        default=[],
        metavar="KEY=V1,V2",
        help="Restrict KEY to the listed values (repeatable)",
    )
    scan_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print values as written, without removing quotes or resolving escapes",
    )

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single value",
        description="Run a raw value through the conversion chain and print the result.",
    )
    convert_parser.add_argument("value", help="Raw value")
    convert_parser.add_argument(
        "--type",
        dest="target",
        choices=sorted(_CONVERTERS),
        default="text",
        help="Target type (default: text)",
    )
    convert_parser.add_argument("--optional", action="store_true", help="Allow the value to be absent")
    convert_parser.add_argument("--no-trim", action="store_true", help="Keep surrounding whitespace")
    convert_parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Do not treat an empty value as absent",
    )
    convert_parser.add_argument(
        "--literal-none",
        action="store_true",
        help="Do not treat 'none' and 'null' as absent",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_CONVERTERS = {
    "text": TEXT,
    "int": INT,
    "bool": BOOL,
    "char": CHAR,
}


def _parse_formats(value: str) -> tuple[KeyValueFormat, ...]:
    """Parse a comma-separated list of format names for argparse."""
    formats = []
    for name in value.split(","):
        name = name.strip()
        try:
            formats.append(KeyValueFormat(name))
        except ValueError:
            raise argparse.ArgumentTypeError(f"unknown format '{name}'") from None
    return tuple(formats)


def _parse_choices(value: str) -> KeyValueArg:
    """Parse ``KEY=V1,V2`` into an argument restricted to those values."""
    name, equals, values = value.partition("=")
    if not equals or not values:
        raise argparse.ArgumentTypeError(f"expected KEY=V1,V2, got '{value}'")
    try:
        arg = KeyValueArg(name=name)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid argument name '{name}'") from None
    return arg.with_allowed_values(*values.split(","))


def _dispatch(args: argparse.Namespace) -> int:
    """Load settings, set up logging and dispatch to the subcommand handler."""
    try:
        config = load_parser_config(args.config) if args.config is not None else ParserConfig()
        _setup_logging(config, args.log_level)
    except PamArgsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "tokenize":
        return _cmd_tokenize(args, config)
    if args.command == "scan":
        return _cmd_scan(args, config)
    if args.command == "convert":
        return _cmd_convert(args, config)
    return 0


def _setup_logging(config: ParserConfig, level: str | None) -> None:
    if level is not None:
        LogOptions(destination=LogDestination.TERMINAL, level=level, include_timestamps=False).apply()
    elif config.logging is not None:
        config.logging.apply()


def _cmd_tokenize(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle the tokenize subcommand."""
    try:
        result = Tokenizer(config.delimiters()).tokenize_batch(args.args)
    except PamArgsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for token in result.tokens:
        print(token)
    print(f"expanded: {'yes' if result.expanded else 'no'}")
    return 0


def _cmd_scan(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle the scan subcommand."""
    non_arg_text = NonArgTextStore() if config.collect_non_argument_text else None
    try:
        detections = scan_key_values(
            args.args,
            allowed_formats=_scan_formats(args, config),
            delimiters=config.delimiters(),
            resolve_values=not args.raw,
            non_arg_text=non_arg_text,
        )
        store = KeyValueStore.from_detections(detections, case_sensitive=config.case_sensitive)
        _check_choices(store, args.choices, config)
    except PamArgsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for key in store:
        value = store.get(key)
        print(key if value is None else f"{key}={value}")
    if non_arg_text is not None:
        for text in non_arg_text.texts:
            print(f"text: {text}")
    return 0


def _scan_formats(args: argparse.Namespace, config: ParserConfig) -> tuple[KeyValueFormat, ...]:
    """Formats given on the command line win over the config file."""
    if args.formats is not None:
        return args.formats
    if config.enable_multi_key_value:
        return tuple(config.multi_key_value_formats)
    return (KeyValueFormat.KEY_ALL,)


def _check_choices(store: KeyValueStore, choices: list[KeyValueArg], config: ParserConfig) -> None:
    """Raise InvalidValueError for the first stored value outside its argument's choices."""
    for key in store:
        value = store.get(key)
        if value is None:
            continue
        for arg in choices:
            if compare_case(key, arg.name, config.case_sensitive) and not arg.is_value_allowed(
                value, config.case_sensitive_values
            ):
                raise InvalidValueError(key, value)


def _cmd_convert(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle the convert subcommand."""
    converter = _CONVERTERS[args.target]
    target = optional(converter) if args.optional else converter

    converter_config = config.converter_config()
    if args.no_trim:
        converter_config = replace(converter_config, trim_whitespace=False)
    if args.keep_empty:
        converter_config = replace(converter_config, handle_empty=False)
    if args.literal_none:
        converter_config = replace(converter_config, recognize_none_values=False)

    try:
        value = convert(args.value, target, converter_config)
    except PamArgsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(value)
    return 0
