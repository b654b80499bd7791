"""
chunktree - content-addressed binary hash trees over chunked bytes.

Build a tree over content, then compare roots or pinpoint differing chunks
between two snapshots without exchanging the content itself.

Usage:
    import chunktree

    old = chunktree.build(b"ABCDEFGH", leaf_size=2)
    new = chunktree.build(b"ABCDXXGH", leaf_size=2)
    chunktree.inconsistent_leaves(old, new)
"""

from chunktree.merkle import (
    MerkleTreeBuilder,
    Node,
    TraversalOrder,
    build,
    compare_trees,
    equal,
    inconsistent_leaves,
)
from chunktree.config import TreeConfig
from chunktree.schemas.errors import (
    ChunkTreeException,
    HashFailureException,
    IncongruentTreesException,
    InvalidConfigurationException,
)

__version__ = "0.1.0"

__all__ = [
    "ChunkTreeException",
    "HashFailureException",
    "IncongruentTreesException",
    "InvalidConfigurationException",
    "MerkleTreeBuilder",
    "Node",
    "TraversalOrder",
    "TreeConfig",
    "build",
    "compare_trees",
    "equal",
    "inconsistent_leaves",
]
