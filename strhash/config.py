"""Configuration loading and lookup for strhash."""

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigFileError, ConfigValidationError
from .core.settings import load_settings

# Config keys shown by `strhash config`
CONFIGURABLE_KEYS = {
    "hash.default_algorithm": {
        "type": str,
        "default": "md5",
        "description": "Algorithm used when --algorithm is not given (md5, sha1, hmac-sha256)",
    },
    "hash.key_encoding": {
        "type": str,
        "default": "UTF-8",
        "description": "Text encoding used to turn an HMAC secret key into bytes",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.strhash/strhash.log",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'hash.key_encoding'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied

    Raises:
        ConfigFileError: If config_path is given but does not exist
    """
    if config_path is not None and not config_path.exists():
        raise ConfigFileError("Config file not found", file_path=str(config_path))
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, config_path: Path | None = None, start_dir: str | None = None) -> Any:
    """
    Get the effective value of a config key.

    Raises:
        ConfigValidationError: If the key is not a known config key
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(f"Unknown config key: {key}", key=key)
    config = load_config(config_path=config_path, start_dir=start_dir)
    return _get_nested(config, key, CONFIGURABLE_KEYS[key]["default"])


def config_list() -> dict:
    """Return the configurable keys with their defaults and descriptions."""
    return CONFIGURABLE_KEYS
