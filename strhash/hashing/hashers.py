"""
Hash algorithm implementations.

Each hasher is bound to one HashType and supports exactly one mode:
plain digests (DigestHasher) or keyed MACs (KeyedHasher). Calling the
other mode raises UnsupportedOperationError instead of falling back.
"""

import codecs
import hashlib
import hmac
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..core.exceptions import (
    AlgorithmUnavailableError,
    InvalidKeyError,
    UnsupportedEncodingError,
    UnsupportedOperationError,
)
from .types import HashType

INPUT_ENCODING = "utf-8"

# Byte order for the unmarked UTF-16/32 codecs: big-endian, BOM only for UTF-16
UNMARKED_BYTE_ORDER = {
    "utf-16": ("utf-16-be", codecs.BOM_UTF16_BE),
    "utf-32": ("utf-32-be", b""),
}


def encode_key_text(text: str, encoding: str) -> bytes:
    """
    Encode key text, writing UTF-16 and UTF-32 in a fixed byte order.

    Python writes those two codecs in native order with a BOM; keys are
    written big-endian instead (UTF-16 with a FE FF mark) so a MAC does not
    depend on the host. Empty text encodes to no bytes at all.

    Raises:
        LookupError: If encoding is not a known text codec
        UnicodeEncodeError: If text is not representable in encoding
    """
    name = codecs.lookup(encoding).name
    if name not in UNMARKED_BYTE_ORDER:
        return text.encode(encoding)
    codec, bom = UNMARKED_BYTE_ORDER[name]
    data = text.encode(codec)
    return bom + data if data else data


def _get_logger():
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


class Hasher(ABC):
    """
    Base class for all hashers.

    Hashers hold no state and can be shared between threads.
    """

    @property
    @abstractmethod
    def hash_type(self) -> HashType:
        """Algorithm this hasher implements."""

    def digest(self, input: str) -> str:
        """Unkeyed digest; not supported unless a subclass says otherwise."""
        raise UnsupportedOperationError(
            f"{self.hash_type.value} does not support unkeyed hashing",
            operation="digest",
            algorithm=self.hash_type.value,
        )

    def mac(self, input: str, secret_key: str, encoding: str) -> str:
        """Keyed digest; not supported unless a subclass says otherwise."""
        raise UnsupportedOperationError(
            f"{self.hash_type.value} does not support keyed hashing",
            operation="mac",
            algorithm=self.hash_type.value,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DigestHasher(Hasher):
    """Plain one-way digest of the UTF-8 bytes of a string."""

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a fresh hashlib object."""

    def digest(self, input: str) -> str:
        """
        Hash a string.

        Args:
            input: Text to hash; encoded as UTF-8

        Returns:
            Lower-case hex digest

        Raises:
            AlgorithmUnavailableError: If the runtime cannot provide the algorithm
        """
        data = input.encode(INPUT_ENCODING)
        try:
            hasher = self.create_hasher()
        except ValueError as e:
            raise AlgorithmUnavailableError(
                f"{self.hash_type.value} is not available in this runtime",
                algorithm=self.hash_type.value,
                cause=e,
            ) from e
        hasher.update(data)
        _get_logger().debug("Computed %s digest of %d bytes", self.hash_type.value, len(data))
        return hasher.hexdigest()


class KeyedHasher(Hasher):
    """HMAC of the UTF-8 bytes of a string under a text secret key."""

    @property
    @abstractmethod
    def digestmod(self) -> Callable[..., Any]:
        """hashlib constructor used as the HMAC inner hash."""

    def mac(self, input: str, secret_key: str, encoding: str) -> str:
        """
        Compute an HMAC of a string.

        Args:
            input: Message text; encoded as UTF-8
            secret_key: Key text
            encoding: Codec name used to turn secret_key into bytes; UTF-16
                and UTF-32 are written big-endian (see encode_key_text)

        Returns:
            Lower-case hex MAC

        Raises:
            UnsupportedEncodingError: If encoding is not a known text codec
            InvalidKeyError: If the key is empty or not representable in encoding
            AlgorithmUnavailableError: If the runtime cannot provide the algorithm
        """
        algorithm = self.hash_type.value
        key = self._encode_key(secret_key, encoding)
        data = input.encode(INPUT_ENCODING)
        try:
            mac = hmac.new(key, data, self.digestmod)
        except ValueError as e:
            raise AlgorithmUnavailableError(
                f"{algorithm} is not available in this runtime",
                algorithm=algorithm,
                cause=e,
            ) from e
        _get_logger().debug("Computed %s MAC of %d bytes", algorithm, len(data))
        return mac.hexdigest()

    def _encode_key(self, secret_key: str, encoding: str) -> bytes:
        algorithm = self.hash_type.value
        try:
            key = encode_key_text(secret_key, encoding)
        except LookupError as e:
            raise UnsupportedEncodingError(
                f"Unsupported key encoding: {encoding}",
                encoding=encoding,
                algorithm=algorithm,
                cause=e,
            ) from e
        except UnicodeEncodeError as e:
            raise InvalidKeyError(
                f"Secret key cannot be encoded as {encoding}",
                algorithm=algorithm,
                context={"encoding": encoding},
                cause=e,
            ) from e
        if not key:
            raise InvalidKeyError("Secret key must not be empty", algorithm=algorithm)
        return key


class MD5Hasher(DigestHasher):
    """MD5 - for fingerprints and legacy signatures only."""

    @property
    def hash_type(self) -> HashType:
        return HashType.MD5

    def create_hasher(self) -> Any:
        return hashlib.md5()


class SHA1Hasher(DigestHasher):
    """SHA-1 - for fingerprints and legacy signatures only."""

    @property
    def hash_type(self) -> HashType:
        return HashType.SHA_1

    def create_hasher(self) -> Any:
        return hashlib.sha1()


class HmacSHA256Hasher(KeyedHasher):
    """HMAC with SHA-256."""

    @property
    def hash_type(self) -> HashType:
        return HashType.HMAC_SHA256

    @property
    def digestmod(self) -> Callable[..., Any]:
        return hashlib.sha256
