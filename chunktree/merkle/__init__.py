"""
Merkle Tree over Content Chunks
Deterministic construction, traversal, and comparison of binary hash trees.

This module provides:
- chunk_content: Split content into fixed-size chunks
- Node: Immutable tree node with digest, raw content and two or zero children
- build: Build a perfect binary tree over content, padding odd levels
- depth_first / breadth_first / leaves: Orderings over a built tree
- equal / inconsistent_leaves / compare_trees: Root equality and leaf diffs

Usage:
    from chunktree.merkle import build

    old = build(b"ABCDEFGH", leaf_size=2)
    new = build(b"ABCDXXGH", leaf_size=2)

    assert not old.equal(new)
    changed = old.inconsistent_leaves(new)   # [leaf for b"XX"]
"""
from .chunker import (
    chunk_content,
    count_chunks,
    validate_leaf_size,
)
from .traversal import (
    TraversalOrder,
    height,
    node_count,
    depth_first,
    breadth_first,
    leaves,
    real_leaves,
)
from .comparator import (
    equal,
    ensure_congruent,
    inconsistent_leaves,
    compare_trees,
)
from .node import (
    PADDING_MARKER,
    padding_content,
    Node,
    leaf_digest,
    internal_digest,
)
from .builder import (
    build,
    build_from_chunks,
    expected_height,
    MerkleTreeBuilder,
)


__all__ = [
    # Chunking
    "chunk_content",
    "count_chunks",
    "validate_leaf_size",
    # Node model and hash combiner
    "PADDING_MARKER",
    "padding_content",
    "Node",
    "leaf_digest",
    "internal_digest",
    # Construction
    "build",
    "build_from_chunks",
    "expected_height",
    "MerkleTreeBuilder",
    # Traversal and metrics
    "TraversalOrder",
    "height",
    "node_count",
    "depth_first",
    "breadth_first",
    "leaves",
    "real_leaves",
    # Comparison
    "equal",
    "ensure_congruent",
    "inconsistent_leaves",
    "compare_trees",
]
