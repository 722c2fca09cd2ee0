"""Option lookups."""

from __future__ import annotations

from typing import Iterable, List

from .classify import is_long_option, partition, split_short_options
from .names import safe_name

SENTINEL = "true"


def normalize_option_name(name: str) -> str:
    return safe_name(name.lstrip("-"))


def get_options(tokens: Iterable[str]) -> List[str]:
    """Return the option tokens exactly as given, e.g. to forward them to another command."""
    return partition(tokens).options


def get_option(name: str, tokens: Iterable[str]) -> str:
    """Return the value of option ``name``, or an empty string if it is absent.

    ``--name`` yields ``"true"`` and ``--name=value`` yields ``value``. Short
    groups such as ``-xyz`` set ``"true"`` for the flag matching the first
    character of ``name``. When the option repeats, the last occurrence wins.
    """
    target = normalize_option_name(name)
    if not target:
        return ""
    value = ""
    for token in get_options(tokens):
        if is_long_option(token):
            key, sep, raw_value = token.lstrip("-").partition("=")
            if safe_name(key) == target:
                value = raw_value if sep else SENTINEL
        elif target[0] in split_short_options(token):
            value = SENTINEL
    return value
