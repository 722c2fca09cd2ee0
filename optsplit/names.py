"""Identifier-safe name helpers for optsplit."""

from __future__ import annotations

import re

_LEADING_PATTERN = re.compile(r"^[^A-Za-z_]")
_UNSAFE_PATTERN = re.compile(r"[^A-Za-z0-9_=]")


def safe_name(value: str) -> str:
    """Return ``value`` with every character unusable in a variable name replaced by ``_``.

    The first character must be a letter or underscore; later characters may
    also be digits or ``=``. The mapping is many-to-one and never fails.
    """
    if not value:
        return ""
    head = _LEADING_PATTERN.sub("_", value[0])
    return head + _UNSAFE_PATTERN.sub("_", value[1:])
