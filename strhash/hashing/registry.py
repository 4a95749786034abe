"""
Hash algorithm registry.

Maps every HashType to the hasher that implements it and forwards
calculate calls. The mapping is fixed when the registry is built;
adding an algorithm means adding a HashType member and a hasher here.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..core.exceptions import UnsupportedOperationError
from .hashers import DigestHasher, Hasher, HmacSHA256Hasher, KeyedHasher, MD5Hasher, SHA1Hasher
from .types import HashType


def default_hashers() -> list[Hasher]:
    """Built-in hasher for each HashType."""
    return [MD5Hasher(), SHA1Hasher(), HmacSHA256Hasher()]


class HashAlgorithmRegistry:
    """
    Read-only lookup from HashType to hasher.

    Example:
        registry = HashAlgorithmRegistry()
        registry.calculate("abc", HashType.SHA_1)
        registry.calculate_keyed("msg", "secret", "UTF-8", HashType.HMAC_SHA256)
    """

    def __init__(self, hashers: Iterable[Hasher] | None = None):
        """
        Build the registry.

        Args:
            hashers: Hasher per HashType; defaults to the built-in set

        Raises:
            RuntimeError: If a HashType has no hasher or has more than one
        """
        table: dict[HashType, Hasher] = {}
        for hasher in default_hashers() if hashers is None else hashers:
            if hasher.hash_type in table:
                raise RuntimeError(f"Duplicate hasher for {hasher.hash_type.value}")
            table[hasher.hash_type] = hasher

        missing = [t.value for t in HashType if t not in table]
        if missing:
            raise RuntimeError(f"No hasher registered for: {', '.join(missing)}")

        self._hashers: Mapping[HashType, Hasher] = MappingProxyType(table)

    @property
    def hashers(self) -> Mapping[HashType, Hasher]:
        """Read-only view of the full table."""
        return self._hashers

    def get(self, hash_type: HashType) -> Hasher:
        """Return the hasher for an algorithm."""
        return self._hashers[hash_type]

    def calculate(self, input: str, hash_type: HashType) -> str:
        """
        Compute an unkeyed digest.

        Args:
            input: Text to hash
            hash_type: Algorithm to use

        Returns:
            Lower-case hex digest

        Raises:
            UnsupportedOperationError: If hash_type only supports keyed hashing
            AlgorithmUnavailableError: If the runtime cannot provide the algorithm
        """
        hasher = self.get(hash_type)
        if not isinstance(hasher, DigestHasher):
            raise UnsupportedOperationError(
                f"{hash_type.value} requires a secret key",
                operation="digest",
                algorithm=hash_type.value,
            )
        return hasher.digest(input)

    def calculate_keyed(self, input: str, secret_key: str, encoding: str, hash_type: HashType) -> str:
        """
        Compute a keyed digest (HMAC).

        Args:
            input: Text to authenticate
            secret_key: Key text
            encoding: Codec name used to turn secret_key into bytes
            hash_type: Algorithm to use

        Returns:
            Lower-case hex MAC

        Raises:
            UnsupportedOperationError: If hash_type does not support keyed hashing
            UnsupportedEncodingError: If encoding is unknown
            InvalidKeyError: If the key cannot be used
            AlgorithmUnavailableError: If the runtime cannot provide the algorithm
        """
        hasher = self.get(hash_type)
        if not isinstance(hasher, KeyedHasher):
            raise UnsupportedOperationError(
                f"{hash_type.value} does not accept a secret key",
                operation="mac",
                algorithm=hash_type.value,
            )
        return hasher.mac(input, secret_key, encoding)

    @property
    def available_algorithms(self) -> list[HashType]:
        """All algorithms, in declaration order."""
        return list(self._hashers)

    def __contains__(self, hash_type: object) -> bool:
        return hash_type in self._hashers
