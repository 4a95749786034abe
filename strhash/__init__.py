"""
strhash - hex digests of strings.

Usage:
    from strhash import HashType, calculate, calculate_keyed

    calculate("abc", HashType.SHA_1)
    calculate_keyed("msg", "secret", "UTF-8", HashType.HMAC_SHA256)
"""

from .core.exceptions import (
    AlgorithmUnavailableError,
    HashingError,
    InvalidKeyError,
    StrhashException,
    UnsupportedEncodingError,
    UnsupportedOperationError,
)
from .hashing import HashAlgorithmRegistry, HashType

_registry = HashAlgorithmRegistry()


def calculate(input: str, hash_type: HashType) -> str:
    """Unkeyed hex digest of input. See HashAlgorithmRegistry.calculate."""
    return _registry.calculate(input, hash_type)


def calculate_keyed(input: str, secret_key: str, encoding: str, hash_type: HashType) -> str:
    """HMAC hex digest of input. See HashAlgorithmRegistry.calculate_keyed."""
    return _registry.calculate_keyed(input, secret_key, encoding, hash_type)


__all__ = [
    "AlgorithmUnavailableError",
    "HashAlgorithmRegistry",
    "HashType",
    "HashingError",
    "InvalidKeyError",
    "StrhashException",
    "UnsupportedEncodingError",
    "UnsupportedOperationError",
    "calculate",
    "calculate_keyed",
]
