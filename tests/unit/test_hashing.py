"""
Hashing Unit Tests
Tests for chunktree/crypto/hashing.py

Tests:
- sha256 known value and determinism
- algorithm resolution (fixed-size only)
- collaborator failures surface as HashFailureException
- digest encodings
"""
import hashlib

import pytest

from chunktree.crypto.hashing import (
    algorithm_name,
    call_hash,
    encode_digest,
    get_hash_function,
    sha256,
    to_hex,
)
from chunktree.schemas.errors import (
    ErrorCodes,
    HashFailureException,
    InvalidConfigurationException,
)
from fixtures.common import failing_hash


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """Known SHA-256 hash of "hello"."""
        assert sha256(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_sha256_matches_hashlib(self):
        data = b"chunk of content"
        assert sha256(data) == hashlib.sha256(data).digest()
        assert len(sha256(data)) == 32

    def test_sha256_different_inputs_different_outputs(self):
        assert sha256(b"input1") != sha256(b"input2")


class TestGetHashFunction:
    """Tests for algorithm resolution."""

    def test_default_is_sha256(self):
        assert get_hash_function() is sha256
        assert get_hash_function("SHA256") is sha256

    @pytest.mark.parametrize("name", ["sha512", "sha3_256", "blake2b", "sha1"])
    def test_named_algorithm_matches_hashlib(self, name):
        fn = get_hash_function(name)
        assert fn(b"abc") == hashlib.new(name, b"abc").digest()
        assert algorithm_name(fn) == name

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            get_hash_function("not-a-hash")

        assert exc_info.value.code == ErrorCodes.INVALID_CONFIGURATION
        assert exc_info.value.details["field"] == "algorithm"

    @pytest.mark.parametrize("name", ["shake_128", "shake_256"])
    def test_variable_length_algorithm_rejected(self, name):
        with pytest.raises(InvalidConfigurationException, match="fixed digest size"):
            get_hash_function(name)


class TestCallHash:
    """Tests for the guarded collaborator call."""

    def test_returns_digest(self):
        assert call_hash(sha256, b"x") == sha256(b"x")

    def test_collaborator_error_wrapped(self):
        with pytest.raises(HashFailureException) as exc_info:
            call_hash(failing_hash, b"x")

        err = exc_info.value
        assert err.code == ErrorCodes.HASH_FAILURE
        assert err.retryable is False
        assert err.details["algorithm"] == "failing_hash"
        assert isinstance(err.__cause__, RuntimeError)

    def test_chunktree_error_passes_through(self):
        original = HashFailureException("backend offline", algorithm="remote")

        def _raise(data):
            raise original

        with pytest.raises(HashFailureException) as exc_info:
            call_hash(_raise, b"x")

        assert exc_info.value is original
        assert exc_info.value.__cause__ is None

    def test_non_bytes_result_rejected(self):
        with pytest.raises(HashFailureException, match="expected non-empty bytes"):
            call_hash(lambda data: data.hex(), b"x")

    def test_empty_result_rejected(self):
        with pytest.raises(HashFailureException):
            call_hash(lambda data: b"", b"x")


class TestEncodings:
    """Tests for digest encodings."""

    def test_encode_digest_is_lowercase_hex(self):
        assert encode_digest(bytes.fromhex("00ABff")) == b"00abff"

    def test_encode_digest_fixed_width(self):
        assert len(encode_digest(sha256(b"a"))) == 64
        assert len(encode_digest(sha256(b"a much longer input"))) == 64

    def test_to_hex(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"
