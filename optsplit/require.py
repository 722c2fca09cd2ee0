"""Presence checks for required arguments and options."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional, Sequence, Union

from .arguments import get_arguments
from .options import get_option
from .reporting import FailureCallback, Reporter, as_reporter, get_failure_reporter


class Status(IntEnum):
    """Outcome of a requirement check; the value doubles as an exit code."""

    OK = 0
    VALIDATION_FAILED = 1
    INVALID_USAGE = 2


def require_arguments(count: int, tokens: Iterable[str]) -> Status:
    """Check that exactly ``count`` non-empty arguments are present.

    A ``count`` that is not a non-negative integer is a usage error, reported
    as ``INVALID_USAGE`` rather than a failed check.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        return Status.INVALID_USAGE
    arguments = get_arguments(tokens)
    if len(arguments) != count:
        return Status.VALIDATION_FAILED
    if any(argument == "" for argument in arguments):
        return Status.VALIDATION_FAILED
    return Status.OK


def require_options(
    names: Sequence[str],
    tokens: Iterable[str],
    reporter: Optional[Union[Reporter, FailureCallback]] = None,
) -> Status:
    """Check that every option in ``names`` has a non-empty value.

    Each missing option is passed to the reporter; all names are checked even
    after the first failure.
    """
    if not names:
        return Status.OK
    active = get_failure_reporter() if reporter is None else as_reporter(reporter)
    token_list = list(tokens)
    status = Status.OK
    for raw_name in names:
        name = raw_name.lstrip("-")
        if get_option(name, token_list) == "":
            active.report(name)
            status = Status.VALIDATION_FAILED
    return status
