"""
Pydantic Settings for strhash configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR_NAME = ".strhash"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .strhash/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.strhash] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "strhash" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads sections from a TOML config file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)
        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("strhash", {})

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


# Module-level variables for passing to settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


class StrhashSettings(BaseSettings):
    """strhash configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (STRHASH_<section>__<field>)
    3. TOML config file (.strhash/config.toml or pyproject.toml [tool.strhash])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "STRHASH_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML loading below environment variables.

        The source is handed over through a module-level variable because
        this hook cannot receive per-instance arguments.
        """
        toml_source = _current_toml_source or TomlConfigSource(settings_cls)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the TOML file could not be used, if it could not."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a nested dict."""
        result: dict[str, Any] = {
            "hash": self.hash.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> StrhashSettings:
    """Load strhash settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        StrhashSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a file or environment value is invalid
    """
    global _current_toml_source

    toml_source = TomlConfigSource(StrhashSettings, config_path, start_dir)
    _current_toml_source = toml_source
    try:
        settings = StrhashSettings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration value for {key}: {first['msg']}",
            key=key,
            value=str(first.get("input")),
            context={"config_file": toml_source.config_file} if toml_source.config_file else None,
            cause=e,
        ) from e
    finally:
        _current_toml_source = None

    settings._config_file = toml_source.config_file
    settings._config_error = toml_source.config_error
    return settings
