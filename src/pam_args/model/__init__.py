# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Argument declarations for PAM modules."""

from pam_args.model.args import Flag, KeyValueArg

__all__ = [
    "Flag",
    "KeyValueArg",
]
