"""Split a token stream into options and arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

TERMINATOR = "--"


@dataclass
class Partition:
    """Options and arguments of a token stream, in original order."""

    options: List[str] = field(default_factory=list)
    arguments: List[str] = field(default_factory=list)
    terminated: bool = False


def is_option(token: str) -> bool:
    return token.startswith("-") and token != TERMINATOR


def is_long_option(token: str) -> bool:
    return token.startswith("--")


def split_short_options(token: str) -> List[str]:
    """Expand a short option group: ``-abc`` becomes ``["a", "b", "c"]``."""
    return list(token[1:])


def partition(tokens: Iterable[str]) -> Partition:
    """Classify each token as an option or an argument.

    The first ``--`` is consumed and every later token is an argument, even
    when it starts with a hyphen.
    """
    result = Partition()
    for token in tokens:
        if result.terminated:
            result.arguments.append(token)
        elif token == TERMINATOR:
            result.terminated = True
        elif is_option(token):
            result.options.append(token)
        else:
            result.arguments.append(token)
    return result
