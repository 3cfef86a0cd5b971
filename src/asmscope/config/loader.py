"""Configuration loading."""

from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003
from typing import Any

import yaml
from pydantic import ValidationError

from asmscope.config.models import AppConfig


class ConfigError(Exception):
    """Raised when a configuration file fails parsing or validation."""


class ConfigLoader:
    """Load and validate a configuration YAML file into an :class:`AppConfig`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> AppConfig:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.  Relative
        ``snapshots`` and ``resources_dir`` entries are resolved against the
        file's directory.

        Raises:
            ConfigError: On read errors, YAML parse errors or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration YAML must be a mapping")

        try:
            config = AppConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

        base = self._path.parent
        config.snapshots = [str(base / p) for p in config.snapshots]
        if config.resources_dir is not None:
            config.resources_dir = str(base / config.resources_dir)
        return config
