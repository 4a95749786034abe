"""
Core infrastructure for strhash.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loaded from TOML and environment
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    AlgorithmUnavailableError,
    ConfigFileError,
    ConfigValidationError,
    HashingError,
    InvalidKeyError,
    StrhashConfigError,
    StrhashException,
    UnsupportedEncodingError,
    UnsupportedOperationError,
)

__all__ = [
    "AlgorithmUnavailableError",
    "ConfigFileError",
    "ConfigValidationError",
    "HashingError",
    "InvalidKeyError",
    "ServiceContainer",
    "StrhashConfigError",
    "StrhashException",
    "UnsupportedEncodingError",
    "UnsupportedOperationError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
    "resolve",
    "try_resolve",
]
