"""
Unit tests for HashAlgorithmRegistry and the module-level calculate helpers.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import strhash
from strhash.core.container import get_container
from strhash.core.exceptions import (
    InvalidKeyError,
    UnsupportedEncodingError,
    UnsupportedOperationError,
)
from strhash.core.interfaces.logger import ILogger
from strhash.hashing import (
    HashAlgorithmRegistry,
    HashType,
    HmacSHA256Hasher,
    MD5Hasher,
    SHA1Hasher,
)


class RecordingLogger(ILogger):
    """ILogger that keeps every formatted message."""

    def __init__(self):
        self.messages: list[str] = []

    def _record(self, message, *args, **kwargs):
        self.messages.append(message % args if args else message)

    debug = info = warning = error = _record

    def set_level(self, level):
        pass


@pytest.fixture
def registry():
    return HashAlgorithmRegistry()


class TestRegistryConstruction:
    """The table is total over HashType and cannot change."""

    def test_default_registry_covers_every_algorithm(self, registry):
        """Every HashType resolves to a hasher bound to it."""
        for hash_type in HashType:
            assert hash_type in registry
            assert registry.get(hash_type).hash_type is hash_type

    def test_available_algorithms_order(self, registry):
        """Algorithms are listed in declaration order."""
        assert registry.available_algorithms == [HashType.MD5, HashType.SHA_1, HashType.HMAC_SHA256]

    def test_missing_hasher_is_fatal(self):
        """A registry without an entry for some HashType cannot be built."""
        with pytest.raises(RuntimeError, match="hmac-sha256"):
            HashAlgorithmRegistry([MD5Hasher(), SHA1Hasher()])

    def test_duplicate_hasher_is_fatal(self):
        """Two hashers for the same HashType are rejected."""
        with pytest.raises(RuntimeError, match="Duplicate"):
            HashAlgorithmRegistry([MD5Hasher(), MD5Hasher(), SHA1Hasher(), HmacSHA256Hasher()])

    def test_table_is_read_only(self, registry):
        """The exposed mapping rejects writes."""
        with pytest.raises(TypeError):
            registry.hashers[HashType.MD5] = SHA1Hasher()  # type: ignore[index]

    def test_no_register_method(self, registry):
        """Entries cannot be added after construction."""
        assert not hasattr(registry, "register")


class TestCalculate:
    """Unkeyed dispatch."""

    def test_known_vectors(self, registry):
        """Known digests for MD5 and SHA-1."""
        assert registry.calculate("", HashType.MD5) == "d41d8cd98f00b204e9800998ecf8427e"
        assert registry.calculate("abc", HashType.SHA_1) == "a9993e364706816aba3e25717850c26c9cd0d89d"

    @pytest.mark.parametrize("hash_type", [HashType.MD5, HashType.SHA_1])
    @pytest.mark.parametrize("text", ["", "a", "hello world", "ü" * 100])
    def test_length_invariant(self, registry, hash_type, text):
        """Digest length is twice the raw digest size."""
        assert len(registry.calculate(text, hash_type)) == hash_type.hex_length

    @pytest.mark.parametrize("hash_type", [HashType.MD5, HashType.SHA_1])
    def test_deterministic(self, registry, hash_type):
        """Two calls with the same input agree."""
        assert registry.calculate("payload", hash_type) == registry.calculate("payload", hash_type)

    def test_keyed_algorithm_rejected(self, registry):
        """Unkeyed calculation against HMAC-SHA256 fails."""
        with pytest.raises(UnsupportedOperationError) as exc_info:
            registry.calculate("msg", HashType.HMAC_SHA256)
        assert exc_info.value.context == {"operation": "digest", "algorithm": "hmac-sha256"}


class TestCalculateKeyed:
    """Keyed dispatch."""

    def test_hmac_sha256(self, registry):
        """Keyed call reaches HMAC-SHA256."""
        result = registry.calculate_keyed("what do ya want for nothing?", "Jefe", "UTF-8", HashType.HMAC_SHA256)
        assert result == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_length_invariant(self, registry):
        """HMAC-SHA256 output is 64 hex characters."""
        assert len(registry.calculate_keyed("m", "k", "UTF-8", HashType.HMAC_SHA256)) == 64

    def test_key_sensitivity(self, registry):
        """Different keys give different MACs."""
        first = registry.calculate_keyed("msg", "key1", "UTF-8", HashType.HMAC_SHA256)
        second = registry.calculate_keyed("msg", "key2", "UTF-8", HashType.HMAC_SHA256)
        assert first != second

    @pytest.mark.parametrize("hash_type", [HashType.MD5, HashType.SHA_1])
    def test_unkeyed_algorithms_rejected(self, registry, hash_type):
        """Keyed calculation against MD5/SHA-1 fails with no output."""
        with pytest.raises(UnsupportedOperationError) as exc_info:
            registry.calculate_keyed("msg", "key", "UTF-8", hash_type)
        assert exc_info.value.context["algorithm"] == hash_type.value

    def test_errors_propagate_unchanged(self, registry):
        """Hasher errors reach the caller with their own type."""
        with pytest.raises(UnsupportedEncodingError):
            registry.calculate_keyed("msg", "key", "bogus-codec", HashType.HMAC_SHA256)
        with pytest.raises(InvalidKeyError):
            registry.calculate_keyed("msg", "", "UTF-8", HashType.HMAC_SHA256)


class TestConcurrentUse:
    """A single registry can be shared across threads."""

    def test_parallel_calls_agree(self, registry):
        """Parallel digests match the sequential result."""
        expected = registry.calculate("shared", HashType.SHA_1)
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: registry.calculate("shared", HashType.SHA_1), range(64)))
        assert set(results) == {expected}


class TestModuleHelpers:
    """strhash.calculate / strhash.calculate_keyed."""

    def test_calculate(self):
        """Package-level calculate uses the default registry."""
        assert strhash.calculate("", strhash.HashType.MD5) == "d41d8cd98f00b204e9800998ecf8427e"

    def test_calculate_keyed(self):
        """Package-level calculate_keyed uses the default registry."""
        result = strhash.calculate_keyed("msg", "key", "UTF-8", strhash.HashType.HMAC_SHA256)
        assert len(result) == 64

    def test_calculate_keyed_rejects_md5(self):
        """Package-level keyed call against MD5 fails."""
        with pytest.raises(strhash.UnsupportedOperationError):
            strhash.calculate_keyed("msg", "key", "UTF-8", strhash.HashType.MD5)


class TestDiagnostics:
    """Digest calls log through the container's ILogger."""

    def test_logs_algorithm_not_key(self, registry):
        """The debug line names the algorithm and never includes the key."""
        logger = RecordingLogger()
        get_container().register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]

        registry.calculate_keyed("hello", "super-secret", "UTF-8", HashType.HMAC_SHA256)
        registry.calculate("hello", HashType.MD5)

        assert logger.messages == [
            "Computed hmac-sha256 MAC of 5 bytes",
            "Computed md5 digest of 5 bytes",
        ]
        assert not any("super-secret" in m for m in logger.messages)
