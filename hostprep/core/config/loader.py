"""
Configuration loader — reads hostprep.yml into Settings.

The config file is optional. Lookup order:
    --config flag  >  HOSTPREP_CONFIG env var  >  hostprep.yml found walking up from cwd

``HOSTPREP_LOG_DIR`` overrides ``log_dir`` after the file is read.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from hostprep.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "hostprep.yml"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for hostprep.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to hostprep.yml, or None if not found.
    """
    env_path = os.environ.get("HOSTPREP_CONFIG")
    if env_path:
        return Path(env_path)

    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Explicit path to hostprep.yml. If None, searches for one and
            falls back to defaults when nothing is found.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return _apply_env(Settings())

    if not path.is_file():
        if explicit or os.environ.get("HOSTPREP_CONFIG"):
            raise ConfigError(f"Config file not found: {path}")
        return _apply_env(Settings())

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded settings from %s (%d extra apps)", path, len(settings.extra_apps))
    return _apply_env(settings)


def _apply_env(settings: Settings) -> Settings:
    """Apply environment variable overrides."""
    log_dir = os.environ.get("HOSTPREP_LOG_DIR")
    if log_dir:
        settings = settings.model_copy(update={"log_dir": log_dir})
    return settings
