#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Config Loader

- Loads the validator YAML configuration (logging, literal checker, messages)
- Validates structure through pydantic before returning settings
- Provides consistent logging for config load operations
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from pydantic import ValidationError

from models.settings import ValidatorSettings
from utils.logger import get_logger

CONFIG_ENV_VAR = "ADDRINPUT_CONFIG"


class ConfigError(ValueError):
    """Raised when a configuration file parses but does not describe valid settings."""


def _summarize_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Compact view of a config dict for debug logs (message texts can be long).
    """
    summary: Dict[str, Any] = {}
    for k, v in config.items():
        if isinstance(v, dict) and k == "messages":
            summary[k] = sorted(v)
        else:
            summary[k] = v
    return summary


def load_config(path: str, logger: Optional[Any] = None) -> Dict[str, Any]:
    """
    Load a YAML config file with structured logging.

    Args:
        path: Path to config file
        logger: Optional logger; if None, uses default config logger

    Returns:
        Parsed configuration dict
    """
    log = logger or get_logger("config_loader", "INFO", "config_loader.log")

    config_path = Path(path)
    if not config_path.exists():
        log.error("Config file not found: %s", config_path)
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
        log.info("Loaded config file: %s", config_path)
        log.debug("Config contents (summary): %s", _summarize_config(config))
        return config
    except yaml.YAMLError as e:
        log.error("Failed to parse YAML config %s: %s", config_path, e, exc_info=True)
        raise


def load_settings(path: Optional[str] = None, logger: Optional[Any] = None) -> ValidatorSettings:
    """
    Resolve and validate settings.

    Resolution order: explicit ``path``, then the ``ADDRINPUT_CONFIG``
    environment variable, then built-in defaults.
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return ValidatorSettings()

    raw = load_config(path, logger)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    try:
        return ValidatorSettings.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
