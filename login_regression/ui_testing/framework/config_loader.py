"""
================================================================================
Configuration Loader
================================================================================

Harness settings from ``config/config.yaml`` overlaid with the environment.

Features:
    - Dotted keys (``waits.poll_interval``) map to env names
      (``WAITS_POLL_INTERVAL``); the environment wins over the file
    - Environment strings are coerced to the type of the key's default
    - ``settings()`` yields the validated ``HarnessSettings`` page objects use

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

TRUTHY = ("true", "1", "yes", "on")

# HarnessSettings field -> (config key, converter)
SETTINGS_KEYS = {
    "base_url": ("ui.base_url", str),
    "browser": ("ui.browser", str),
    "headless": ("ui.headless", bool),
    "precondition_timeout": ("waits.precondition_timeout", float),
    "result_timeout": ("waits.result_timeout", float),
    "poll_interval": ("waits.poll_interval", float),
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning(f"Configuration file not found: {path}. Using defaults and environment")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must hold a mapping at the top level, got {type(data).__name__}"
        )
    logger.debug(f"Loaded configuration from: {path}")
    return data


def _coerce(env_name: str, raw: str, reference: Any) -> Any:
    """Convert an environment string to the type of ``reference``."""
    if reference is None or isinstance(reference, str):
        return raw
    if isinstance(reference, bool):
        return raw.strip().lower() in TRUTHY
    try:
        return type(reference)(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{env_name}={raw!r} is not a valid {type(reference).__name__}"
        ) from e


class ConfigLoader:
    """
    Process-wide configuration source.

    Lookup order for ``get("ui.base_url", default)``:
        1. Environment variable ``UI_BASE_URL``
        2. ``ui: {base_url: ...}`` in the YAML file
        3. ``default``

    Usage:
        >>> ConfigLoader().settings().result_timeout
        5.0
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        # One loader per process; reset() starts over
        if cls._instance is None:
            loader = super().__new__(cls)
            loader.path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
            loader._data = _read_yaml(loader.path)
            cls._instance = loader
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        env_name = key.upper().replace(".", "_")
        raw = os.environ.get(env_name)
        if raw is not None:
            return _coerce(env_name, raw, default)

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def settings(self) -> "HarnessSettings":
        """Validated harness settings from this loader."""
        return HarnessSettings.from_config(self)

    def reload(self) -> None:
        """Re-read the YAML file (environment is always read live)."""
        self._data = _read_yaml(self.path)
        logger.info(f"Configuration reloaded from: {self.path}")

    @classmethod
    def reset(cls) -> None:
        """Drop the shared loader so the next ConfigLoader() reads afresh."""
        cls._instance = None


@dataclass(frozen=True)
class HarnessSettings:
    """
    Settings consumed by page objects and scenarios.

    Attributes:
        base_url: Base URL of the application under test
        browser: 'chromium', 'firefox' or 'webkit'
        headless: Run the browser headless
        precondition_timeout: Wait for a field/control before acting (seconds)
        result_timeout: Wait for a status indicator after acting (seconds)
        poll_interval: Spacing between condition polls (seconds)
    """
    base_url: str = "http://localhost:3000"
    browser: str = "chromium"
    headless: bool = True
    precondition_timeout: float = 10.0
    result_timeout: float = 5.0
    poll_interval: float = 0.25

    def __post_init__(self) -> None:
        if self.precondition_timeout <= 0 or self.result_timeout <= 0:
            raise ConfigurationError(
                f"Wait timeouts must be positive "
                f"(precondition={self.precondition_timeout}, result={self.result_timeout})"
            )
        shortest = min(self.precondition_timeout, self.result_timeout)
        if not 0 < self.poll_interval <= shortest:
            raise ConfigurationError(
                f"poll_interval must be in (0, {shortest}], got {self.poll_interval}"
            )
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "HarnessSettings":
        """Build settings from a ConfigLoader (YAML + environment)."""
        config = config or ConfigLoader()
        values = {}
        try:
            for field in fields(cls):
                key, convert = SETTINGS_KEYS[field.name]
                values[field.name] = convert(config.get(key, field.default))
            return cls(**values)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid harness settings: {e}") from e


__all__ = [
    "ConfigLoader",
    "HarnessSettings",
    "DEFAULT_CONFIG_PATH",
]
