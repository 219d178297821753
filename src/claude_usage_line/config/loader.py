"""Configuration file loading."""

import os
import sys

from pathlib import Path

import yaml

from pydantic import ValidationError

from ..utils.debug import debug_log
from .defaults import get_default_config
from .schema import UsageLineConfig


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "claude-usage-line"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def load_config() -> UsageLineConfig:
    """
    Load configuration from YAML file.

    If config file doesn't exist, returns defaults without creating it.
    If config is invalid, falls back to defaults and warns on stderr.
    """
    config_path = get_config_path()

    if not config_path.exists():
        debug_log(f"No config file at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ValueError("top level must be a mapping")

        return UsageLineConfig(**config_data)

    except (yaml.YAMLError, ValidationError, ValueError, OSError) as e:
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()
