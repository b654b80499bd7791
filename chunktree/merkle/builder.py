"""
Tree Builder
Bottom-up construction of a perfect binary hash tree from content chunks.

Construction Rules:
1. One leaf per chunk, in content order
2. A level with an odd count greater than one gets one padding node appended:
   the sentinel leaf at the leaf level, a perfect subtree of sentinel
   leaves above it. The sentinel is longer than every chunk of the build.
3. Consecutive pairs become internal nodes (first = left, second = right)
4. Repeat until a single node remains; that node is the root
5. A single chunk is its own root (height 1, never padded)

Because every level above the leaves is even before pairing, every leaf
ends up at the same depth, which is what makes positional leaf diffs valid.
Two builds over the same content and leaf size always agree on shape and root.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from chunktree.config.runtime import TreeConfig, get_default_config
from chunktree.crypto.hashing import (
    DEFAULT_ALGORITHM,
    HashFunction,
    algorithm_name,
    get_hash_function,
    to_hex,
)
from chunktree.merkle.chunker import chunk_content
from chunktree.merkle.node import Node, padding_content
from chunktree.merkle.traversal import height, leaves, node_count
from chunktree.schemas.errors import InvalidConfigurationException
from chunktree.schemas.reports import TreeSummary


logger = logging.getLogger(__name__)


def _reduce_level(
    level: list[Node],
    hash_fn: HashFunction,
    level_index: int,
    sentinel: bytes,
) -> list[Node]:
    if len(level) % 2 == 1:
        logger.debug(f"Level {level_index}: padding odd count {len(level)}")
        # Padding matches the height of the nodes it sits beside
        level = level + [Node.padding(hash_fn, height=level_index + 1, content=sentinel)]

    return [
        Node.internal(level[i], level[i + 1], hash_fn)
        for i in range(0, len(level), 2)
    ]


def build_from_chunks(chunks: Sequence[bytes], *, hash_fn: HashFunction) -> Node:
    """
    Build a tree from pre-split chunks.

    Args:
        chunks: Ordered chunk bytes (at least one)
        hash_fn: Hash collaborator used for every node

    Returns:
        Root node

    Raises:
        InvalidConfigurationException: If chunks is empty
        HashFailureException: If hash_fn fails
    """
    if len(chunks) == 0:
        raise InvalidConfigurationException(
            "Cannot build a tree from zero chunks",
            field="content",
        )

    level: list[Node] = [Node.leaf(chunk, hash_fn) for chunk in chunks]
    sentinel = padding_content(chunks)
    level_index = 0

    while len(level) > 1:
        level = _reduce_level(level, hash_fn, level_index, sentinel)
        level_index += 1
        logger.debug(f"Level {level_index}: {len(level)} nodes")

    return level[0]


def build(
    content: bytes | str,
    leaf_size: int,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
    hash_fn: Optional[HashFunction] = None,
) -> Node:
    """
    Build a tree over content split into leaf_size chunks.

    Args:
        content: Non-empty content (str is encoded as UTF-8)
        leaf_size: Positive maximum bytes per chunk
        algorithm: hashlib algorithm name, ignored when hash_fn is given
        hash_fn: Explicit hash collaborator

    Returns:
        Root node

    Raises:
        InvalidConfigurationException: On empty content, bad leaf_size or unknown algorithm
        HashFailureException: If the hash collaborator fails

    Example:
        >>> root = build(b"ABCDEFGH", 2)
        >>> root.height(), root.node_count()
        (3, 7)
    """
    if hash_fn is None:
        hash_fn = get_hash_function(algorithm)

    chunks = chunk_content(content, leaf_size)
    logger.debug(f"Building tree over {len(chunks)} chunks (leaf_size={leaf_size})")
    return build_from_chunks(chunks, hash_fn=hash_fn)


def expected_height(num_chunks: int) -> int:
    """
    Height build() produces for the given number of chunks.

    A single chunk has height 1, two chunks height 2, and padding rounds
    every odd level up, so n chunks give ceil(log2(n)) + 1.
    Returns 0 for zero chunks.
    """
    if num_chunks <= 0:
        return 0

    depth = 1
    n = num_chunks
    while n > 1:
        if n % 2 == 1:
            n += 1
        n = n // 2
        depth += 1

    return depth


class MerkleTreeBuilder:
    """
    Builder bound to a TreeConfig.

    Example:
        >>> builder = MerkleTreeBuilder(TreeConfig(leaf_size=2))
        >>> builder.build(b"ABCD").height()
        2
    """

    def __init__(self, config: Optional[TreeConfig] = None) -> None:
        self.config = config or get_default_config()
        self.config.validate()
        self.hash_fn = get_hash_function(self.config.algorithm)

    @property
    def leaf_size(self) -> int:
        return self.config.leaf_size

    @property
    def algorithm(self) -> str:
        return algorithm_name(self.hash_fn)

    def build(self, content: bytes | str) -> Node:
        """Build a tree over content with the configured leaf size and algorithm."""
        return build(content, self.config.leaf_size, hash_fn=self.hash_fn)

    def build_file(self, path: str | Path) -> Node:
        """Read a file and build a tree over its bytes."""
        path = Path(path)
        logger.info(f"Building tree for file: {path}")
        return self.build(path.read_bytes())

    def summarize(self, root: Node) -> TreeSummary:
        """Shape and identity summary of a tree built by this builder."""
        all_leaves = leaves(root)
        padding = sum(1 for leaf in all_leaves if leaf.is_padding)
        return TreeSummary(
            root_digest=to_hex(root.digest),
            algorithm=self.algorithm,
            leaf_size=self.config.leaf_size,
            height=height(root),
            node_count=node_count(root),
            leaf_count=len(all_leaves),
            chunk_count=len(all_leaves) - padding,
            padding_count=padding,
        )


__all__ = [
    "build",
    "build_from_chunks",
    "expected_height",
    "MerkleTreeBuilder",
]
