"""
Common test fixtures shared by all test modules.

Provides factory functions for content and trees.
"""

import random
from typing import Optional

from chunktree.crypto.hashing import HashFunction
from chunktree.merkle import Node, build


ABCDEFGH = b"ABCDEFGH"
ABCDXXGH = b"ABCDXXGH"


def make_content(length: int, seed: int = 0) -> bytes:
    """
    Create deterministic pseudo-random content.

    Args:
        length: Number of bytes
        seed: Seed for the generator; same seed gives same bytes
    """
    rng = random.Random(seed)
    return bytes(rng.getrandbits(8) for _ in range(length))


def make_tree(
    content: bytes,
    leaf_size: int,
    algorithm: str = "sha256",
    hash_fn: Optional[HashFunction] = None,
) -> Node:
    """Build a tree; thin wrapper so tests read uniformly."""
    return build(content, leaf_size, algorithm=algorithm, hash_fn=hash_fn)


def flip_byte(content: bytes, position: int, mask: int = 0x01) -> bytes:
    """Return content with the byte at position XOR-ed with mask."""
    mutated = bytearray(content)
    mutated[position] ^= mask
    return bytes(mutated)


def failing_hash(data: bytes) -> bytes:
    """Hash collaborator that always fails."""
    raise RuntimeError("hash backend unavailable")
