"""
Configuration models.

Provides Pydantic models for strhash configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, field_validator

from .base import StrhashBaseModel

# Must stay in step with strhash.hashing.types.HashType values
HashAlgorithm = Literal["md5", "sha1", "hmac-sha256"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(StrhashBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
    )


class HashConfig(ConfigBaseModel):
    """Hash defaults used by the CLI when no option is given."""

    default_algorithm: HashAlgorithm = "md5"
    key_encoding: str = "UTF-8"

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        """Accept 'SHA_1', 'SHA-1' and friends as well as canonical values."""
        if isinstance(v, str):
            name = v.strip().lower().replace("_", "-")
            return "sha1" if name == "sha-1" else name
        return v

    @field_validator("key_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject names that are not text encodings (e.g. 'base64')."""
        try:
            "".encode(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
