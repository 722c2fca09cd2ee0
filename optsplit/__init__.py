"""optsplit package exports."""

from __future__ import annotations

from .arguments import get_argument, get_arguments
from .classify import Partition, partition
from .names import safe_name
from .options import SENTINEL, get_option, get_options
from .reporting import (
    Reporter,
    get_failure_reporter,
    reset_failure_reporter,
    set_failure_reporter,
)
from .require import Status, require_arguments, require_options
from .settings import Settings, SettingsError, build_reporter, load_settings

__all__ = [
    "Partition",
    "partition",
    "get_argument",
    "get_arguments",
    "get_option",
    "get_options",
    "SENTINEL",
    "safe_name",
    "Reporter",
    "get_failure_reporter",
    "set_failure_reporter",
    "reset_failure_reporter",
    "Status",
    "require_arguments",
    "require_options",
    "Settings",
    "SettingsError",
    "build_reporter",
    "load_settings",
]

__version__ = "0.1.0"
