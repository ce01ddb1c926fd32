# Copyright 2026 pam-args Contributors
# SPDX-License-Identifier: Apache-2.0

"""Storage for scanned arguments."""

from pam_args.storage.store import KeyValueStore, NonArgTextStore

__all__ = [
    "KeyValueStore",
    "NonArgTextStore",
]
