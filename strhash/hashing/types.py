"""
Algorithm identifiers.
"""

from enum import Enum


class HashType(str, Enum):
    """Closed set of supported digest algorithms.

    Values are the names used in config files and on the command line.
    """

    MD5 = "md5"
    SHA_1 = "sha1"
    HMAC_SHA256 = "hmac-sha256"

    @property
    def keyed(self) -> bool:
        """True if the algorithm needs a secret key."""
        return self is HashType.HMAC_SHA256

    @property
    def digest_size(self) -> int:
        """Raw digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the hex-encoded digest."""
        return self.digest_size * 2

    @classmethod
    def parse(cls, name: str) -> "HashType":
        """
        Look up an algorithm by value or member name, ignoring case.

        'md5', 'MD5', 'sha1', 'SHA_1', 'SHA-1' and 'HMAC_SHA256' are all accepted.

        Raises:
            ValueError: If the name matches no algorithm
        """
        normalized = name.strip().lower().replace("_", "-")
        for member in cls:
            if normalized in (member.value, member.name.lower().replace("_", "-")):
                return member
        raise ValueError(f"Unknown hash algorithm: {name}")


_DIGEST_SIZES = {
    HashType.MD5: 16,
    HashType.SHA_1: 20,
    HashType.HMAC_SHA256: 32,
}
