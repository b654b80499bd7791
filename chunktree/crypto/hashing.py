"""
Hashing Utilities
The hash function collaborator (H) and digest encodings used by the tree.

This module provides:
- SHA-256 hashing for raw bytes (the default H)
- Resolution of any fixed-size hashlib algorithm by name
- A guarded call path that reports collaborator failures as HashFailureException
- Hex encodings: bare lowercase hex for composition, 0x-prefixed for display

Determinism Notes:
- Always hash raw bytes exactly as given
- Internal digests compose the bare hex text of child digests, never the raw bytes
"""
from __future__ import annotations

import hashlib
from typing import Callable

from chunktree.schemas.errors import (
    ChunkTreeException,
    HashFailureException,
    InvalidConfigurationException,
)


HashFunction = Callable[[bytes], bytes]

DEFAULT_ALGORITHM = "sha256"


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def get_hash_function(algorithm: str = DEFAULT_ALGORITHM) -> HashFunction:
    """
    Resolve a hashlib algorithm name to a hash function.

    Only fixed-output algorithms are accepted; extendable-output functions
    (shake_128, shake_256) report a digest size of zero and are rejected.

    Args:
        algorithm: hashlib algorithm name, e.g. "sha256", "sha3_256", "blake2b"

    Returns:
        Callable mapping bytes to a fixed-size digest

    Raises:
        InvalidConfigurationException: If the algorithm is unknown or variable-length
    """
    name = algorithm.strip().lower().replace("-", "_")
    if name == DEFAULT_ALGORITHM:
        return sha256

    try:
        probe = hashlib.new(name)
    except (ValueError, TypeError) as e:
        raise InvalidConfigurationException(
            f"Unsupported hash algorithm: {algorithm!r}",
            field="algorithm",
        ) from e

    if probe.digest_size == 0:
        raise InvalidConfigurationException(
            f"Hash algorithm {algorithm!r} has no fixed digest size",
            field="algorithm",
        )

    def _hash(data: bytes) -> bytes:
        return hashlib.new(name, data).digest()

    _hash.__name__ = name
    return _hash


def algorithm_name(hash_fn: HashFunction) -> str:
    """Best-effort display name of a hash function."""
    return getattr(hash_fn, "__name__", repr(hash_fn))


def call_hash(hash_fn: HashFunction, data: bytes) -> bytes:
    """
    Invoke the hash collaborator on data.

    Failures inside the collaborator are fatal and reported as
    HashFailureException, chained to the original error: the exception
    hash_fn raised is available as __cause__. A ChunkTreeException raised
    by hash_fn itself propagates unchanged.

    Args:
        hash_fn: Hash function to call
        data: Bytes to hash

    Returns:
        The digest produced by hash_fn

    Raises:
        HashFailureException: If hash_fn raises or returns something other than bytes
    """
    try:
        digest = hash_fn(data)
    except ChunkTreeException:
        raise
    except Exception as e:
        raise HashFailureException(
            f"Hash function failed: {e}",
            algorithm=algorithm_name(hash_fn),
        ) from e

    if not isinstance(digest, bytes) or len(digest) == 0:
        raise HashFailureException(
            f"Hash function returned {type(digest).__name__}, expected non-empty bytes",
            algorithm=algorithm_name(hash_fn),
        )
    return digest


def encode_digest(digest: bytes) -> bytes:
    """
    Canonical encoding of a digest for parent composition.

    Lowercase ASCII hex: injective and fixed-width for a given algorithm.

    Example:
        >>> encode_digest(bytes.fromhex("00ff"))
        b'00ff'
    """
    return digest.hex().encode("ascii")


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "HashFunction",
    "DEFAULT_ALGORITHM",
    "sha256",
    "get_hash_function",
    "algorithm_name",
    "call_hash",
    "encode_digest",
    "to_hex",
]
