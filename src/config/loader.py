"""Configuration loader for the business justification validator.

Provides centralized access to scoring, prompt and label configuration.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from utils.error_handler import ConfigError

logger = structlog.get_logger(__name__)

CONFIG_FILE = Path(__file__).parent / "validator_config.yaml"

DEFAULT_COLOR_BANDS: list[dict[str, Any]] = [
    {"min": 70, "value": "green"},
    {"min": 50, "value": "yellow"},
    {"min": 30, "value": "orange"},
    {"min": 0, "value": "red"},
]

DEFAULT_LABEL_BANDS: list[dict[str, Any]] = [
    {"min": 80, "value": "Excellent"},
    {"min": 70, "value": "Ready"},
    {"min": 50, "value": "Needs Work"},
    {"min": 30, "value": "Draft"},
    {"min": 0, "value": "Incomplete"},
]


class ConfigLoader:
    """Loads and provides access to validator configuration."""

    _instance: Optional[ConfigLoader] = None
    _config: Optional[dict[str, Any]] = None

    def __new__(cls) -> ConfigLoader:
        """Singleton pattern - ensure only one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize config loader (only runs once due to singleton)."""
        if self._config is None:
            self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not CONFIG_FILE.exists():
            logger.warning("config_file_not_found", path=str(CONFIG_FILE))
            self._config = {}
            return

        try:
            with open(CONFIG_FILE, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(str(CONFIG_FILE), str(e)) from e

        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(str(CONFIG_FILE), "top-level document must be a mapping")

        self._config = loaded or {}
        logger.info("config_loaded", path=str(CONFIG_FILE))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Examples:
            config.get("slop.max_deduction")
            config.get("prompts.active_version")
            config.get("nonexistent.key", default=100)
        """
        if not self._config:
            return default

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get entire configuration section."""
        return self.get(section, default={})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = None
        self._load_config()


# Singleton instance
_config = ConfigLoader()


def get_config() -> ConfigLoader:
    """Get the global config instance."""
    return _config


def get_slop_max_deduction() -> int:
    """Ceiling on points removed for slop language."""
    return int(_config.get("slop.max_deduction", 5))


def get_slop_multiplier() -> float:
    """Factor applied to the raw slop penalty before flooring."""
    return float(_config.get("slop.multiplier", 0.6))


def get_slop_max_issues() -> int:
    """Number of slop issues carried into the report."""
    return int(_config.get("slop.max_issues", 2))


def get_active_prompt_version() -> str:
    return str(_config.get("prompts.active_version", "v1.0"))


def get_color_bands() -> list[dict[str, Any]]:
    """Score colour bands, highest threshold first."""
    return _config.get("labels.colors") or DEFAULT_COLOR_BANDS


def get_label_bands() -> list[dict[str, Any]]:
    """Score label bands, highest threshold first."""
    return _config.get("labels.names") or DEFAULT_LABEL_BANDS
