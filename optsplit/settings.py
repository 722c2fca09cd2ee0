"""Settings loader for the failure reporter."""

from __future__ import annotations

import hashlib
import importlib
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .reporting import DEFAULT_MESSAGE, FailureCallback, Reporter

CONFIG_ENV_VAR = "OPTSPLIT_CONFIG"


class SettingsError(RuntimeError):
    """Raised when a settings file cannot be loaded or resolved."""


class Settings(BaseModel):
    """Pydantic model describing the settings YAML document."""

    message: str = DEFAULT_MESSAGE
    logger: Optional[str] = None
    reporter: Optional[str] = None

    @field_validator("message")
    def message_has_placeholder(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("message must contain the {name} placeholder")
        try:
            value.format(name="name")
        except (IndexError, KeyError, ValueError) as exc:
            raise ValueError(f"message is not a valid format template: {exc}") from exc
        return value

    @field_validator("reporter")
    def reporter_is_import_path(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        module, sep, attribute = value.partition(":")
        if not sep or not module.strip() or not attribute.strip():
            raise ValueError("reporter must look like 'package.module:function'")
        return value


@dataclass
class LoadedSettings:
    """Validated settings plus where they came from."""

    settings: Settings
    path: str
    sha256: str


def _read_settings_text(settings_path: Optional[Path]) -> Tuple[str, str]:
    if settings_path is None and os.environ.get(CONFIG_ENV_VAR):
        settings_path = Path(os.environ[CONFIG_ENV_VAR])
    if settings_path is not None:
        try:
            return settings_path.read_text(encoding="utf-8"), str(settings_path.resolve())
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsError(f"Unable to read settings file {settings_path}: {exc}") from exc
    resource = resources.files("optsplit.defaults").joinpath("settings.yaml")
    return resource.read_text(encoding="utf-8"), "package://optsplit/defaults/settings.yaml"


def load_settings(settings_path: Optional[Path] = None) -> LoadedSettings:
    """Load settings from YAML (defaults to $OPTSPLIT_CONFIG, then the bundled file)."""
    raw_text, location = _read_settings_text(settings_path)
    try:
        raw_settings = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {location}: {exc}") from exc
    if not isinstance(raw_settings, dict):
        raise SettingsError(f"Settings in {location} must be a mapping")
    try:
        settings = Settings(**raw_settings)
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc
    checksum = hashlib.sha256(raw_text.encode("utf-8")).hexdigest()
    return LoadedSettings(settings=settings, path=location, sha256=checksum)


def _import_callback(import_path: str) -> FailureCallback:
    module_name, _, attribute = import_path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SettingsError(f"Cannot import reporter module '{module_name}': {exc}") from exc
    callback = getattr(module, attribute, None)
    if not callable(callback):
        raise SettingsError(f"Reporter '{import_path}' is not a callable")
    return callback


def build_reporter(settings: Settings) -> Reporter:
    """Turn settings into a ``Reporter``, importing the custom callback if one is named."""
    callback = _import_callback(settings.reporter) if settings.reporter else None
    logger = logging.getLogger(settings.logger) if settings.logger else None
    return Reporter(callback=callback, logger=logger, message=settings.message)
