"""
String digest algorithms and the registry that dispatches to them.
"""

from .hashers import (
    DigestHasher,
    Hasher,
    HmacSHA256Hasher,
    KeyedHasher,
    MD5Hasher,
    SHA1Hasher,
)
from .registry import HashAlgorithmRegistry, default_hashers
from .types import HashType

__all__ = [
    "DigestHasher",
    "HashAlgorithmRegistry",
    "HashType",
    "Hasher",
    "HmacSHA256Hasher",
    "KeyedHasher",
    "MD5Hasher",
    "SHA1Hasher",
    "default_hashers",
]
