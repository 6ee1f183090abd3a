# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable


def next_numeric_id(existing: Iterable[str]) -> str:
    """Return one past the highest numeric id, skipping any id already taken.

    Non-numeric ids are left alone but still count as taken.
    """

    taken = set(existing)
    numeric = [int(value) for value in taken if value.isascii() and value.isdigit()]
    candidate = max(numeric, default=0) + 1
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)
