"""Configuration for svg-header.

Settings come from a YAML file and can be overridden by environment
variables. Lookup order for the file:

1. An explicit path passed to Config.load()
2. $SVG_HEADER_CONFIG
3. ./svg-header.yaml in the current directory

When no file is found the defaults are used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from svg_header.exceptions import ConfigError
from svg_header.log import LOG_LEVELS
from svg_header.svg.content import CONTENT_MODES

CONFIG_ENV_VAR = "SVG_HEADER_CONFIG"
DEFAULT_CONFIG_NAME = "svg-header.yaml"

# env var -> config field
ENV_OVERRIDES = {
    "SVG_HEADER_LOG_LEVEL": "log_level",
    "SVG_HEADER_CONTENT_MODE": "content_mode",
}


@dataclass
class Config:
    """Runtime settings shared by the API and the CLI."""

    log_level: str = "WARNING"
    content_mode: str = "legacy"
    save_prefix: str = "svg_"
    strict_save: bool = False
    output_dir: Path | None = None

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from YAML, then apply environment overrides.

        Args:
            path: Explicit config file. Must exist when given.

        Returns:
            A validated Config.

        Raises:
            FileNotFoundError: If an explicit path does not exist.
            ConfigError: If the file or a value is invalid.
        """
        config_path = cls._resolve_path(path)
        data: dict[str, Any] = {}
        if config_path is not None:
            data = _read_yaml(config_path)

        for env_var, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                data[key] = value

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a plain mapping, validating every key."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"{unknown[0]}: unknown setting")

        config = cls()
        if "log_level" in data:
            level = _expect(data, "log_level", str, "string")
            if level.upper() not in LOG_LEVELS:
                raise ConfigError(
                    f"log_level: must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
                )
            config.log_level = level.upper()
        if "content_mode" in data:
            mode = _expect(data, "content_mode", str, "string")
            if mode not in CONTENT_MODES:
                raise ConfigError(
                    f"content_mode: must be one of {', '.join(CONTENT_MODES)}, got {mode!r}"
                )
            config.content_mode = mode
        if "save_prefix" in data:
            config.save_prefix = _expect(data, "save_prefix", str, "string")
        if "strict_save" in data:
            config.strict_save = _expect(data, "strict_save", bool, "boolean")
        if data.get("output_dir") is not None:
            config.output_dir = Path(_expect(data, "output_dir", str, "string path"))
        return config

    @staticmethod
    def _resolve_path(path: str | Path | None) -> Path | None:
        if path is not None:
            explicit = Path(path)
            if not explicit.is_file():
                raise FileNotFoundError(f"Config file not found: {explicit}")
            return explicit

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidate = Path(env_path)
            if not candidate.is_file():
                raise FileNotFoundError(f"Config file not found: {candidate}")
            return candidate

        local = Path.cwd() / DEFAULT_CONFIG_NAME
        return local if local.is_file() else None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path}: top level must be a mapping, got {type(data).__name__}"
        )
    return data


def _expect(data: dict[str, Any], key: str, kind: type, label: str) -> Any:
    value = data[key]
    # bool is a subclass of int; keep the check exact
    if type(value) is not kind:
        raise ConfigError(f"{key}: expected {label}, got {type(value).__name__}")
    return value
