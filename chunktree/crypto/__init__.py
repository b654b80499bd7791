"""
Cryptographic utilities: the hash collaborator and digest encodings.
"""
from .hashing import (
    HashFunction,
    DEFAULT_ALGORITHM,
    sha256,
    get_hash_function,
    algorithm_name,
    call_hash,
    encode_digest,
    to_hex,
)

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
