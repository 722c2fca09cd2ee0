"""Failure reporting for missing required options."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from rich.console import Console

DEFAULT_MESSAGE = "Missing required option: --{name}"

FailureCallback = Callable[[str], None]

_stderr_console = Console(stderr=True, emoji=False)


@dataclass(frozen=True)
class Reporter:
    """Reports one missing option at a time.

    A custom ``callback`` takes precedence, then ``logger``; without either the
    formatted message is written to stderr.
    """

    callback: Optional[FailureCallback] = None
    logger: Optional[logging.Logger] = None
    message: str = DEFAULT_MESSAGE
    console: Optional[Console] = None

    def format(self, name: str) -> str:
        return self.message.format(name=name)

    def report(self, name: str) -> None:
        try:
            if self.callback is not None:
                self.callback(name)
            elif self.logger is not None:
                self.logger.warning(self.format(name))
            else:
                self._write(self.format(name))
        except Exception as exc:
            self._write(f"Failure reporter raised for '{name}': {exc}")

    def _write(self, text: str) -> None:
        console = self.console or _stderr_console
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


_default_reporter = Reporter()


def as_reporter(value: Union[Reporter, FailureCallback, None]) -> Reporter:
    if value is None:
        return Reporter()
    if isinstance(value, Reporter):
        return value
    return Reporter(callback=value)


def set_failure_reporter(value: Union[Reporter, FailureCallback, None]) -> Reporter:
    """Replace the process-wide reporter used when none is passed explicitly."""
    global _default_reporter
    _default_reporter = as_reporter(value)
    return _default_reporter


def get_failure_reporter() -> Reporter:
    return _default_reporter


def reset_failure_reporter() -> None:
    set_failure_reporter(None)
