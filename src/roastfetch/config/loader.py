"""YAML configuration file loading with Pydantic validation."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import RoastConfig

DEFAULT_CONFIG_PATH = Path.home() / ".roastfetch" / "config.yaml"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Read a UTF-8 YAML config file. An empty file reads as ``{}``.

    Raises:
        ConfigError: If the file is missing, unreadable, not UTF-8, or not YAML.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e


def load_config(path: Optional[Path] = None) -> RoastConfig:
    """Load and validate the roastfetch configuration.

    When no path is given the default location is used, and a missing
    default file yields the built-in defaults.

    Raises:
        ConfigError: If validation fails or an explicit path does not exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return RoastConfig()
        path = DEFAULT_CONFIG_PATH

    data = load_yaml(path)
    try:
        return RoastConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e
