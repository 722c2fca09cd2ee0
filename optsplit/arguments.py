"""Positional argument lookups."""

from __future__ import annotations

from typing import Iterable, List

from .classify import partition


def get_arguments(tokens: Iterable[str]) -> List[str]:
    """Return every argument, including those after ``--``."""
    return partition(tokens).arguments


def get_argument(index: int, tokens: Iterable[str]) -> str:
    """Return the argument at ``index`` or an empty string when there is none."""
    arguments = get_arguments(tokens)
    if index < 0 or index >= len(arguments):
        return ""
    return arguments[index]
