"""
Node Model and Hash Combiner

A Node is the tree's only entity. Leaves carry the chunk bytes they were
hashed from; internal nodes carry only the combined digest of their two
children. Nodes are frozen: once the builder links a parent to its
children, nothing can rewrite them.

Hash Combiner Rules:
1. Leaf digest: H(chunk)
2. Internal digest: H(hex(left.digest) + hex(right.digest)), order-sensitive
3. Padding leaf: a run of PADDING_MARKER one byte longer than the longest
   chunk of the build, hashed like any other leaf. No real chunk of the
   same build can equal it, so padding never shares a digest with content.
   Padding above the leaf level is a perfect subtree of padding leaves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from chunktree.crypto.hashing import HashFunction, call_hash, encode_digest, sha256
from chunktree.merkle.comparator import equal, inconsistent_leaves
from chunktree.merkle.traversal import (
    TraversalOrder,
    breadth_first,
    depth_first,
    height,
    leaves,
    node_count,
)


# Byte repeated to form the sentinel content of padding leaves
PADDING_MARKER: bytes = b"$"

# Hex characters shown when a digest is abbreviated
SHORT_DIGEST_LEN = 12


def padding_content(chunks: Sequence[bytes]) -> bytes:
    """
    Sentinel content for padding a build over chunks.

    Longer than every chunk, so it cannot collide with any of them.

    Example:
        >>> padding_content([b"AB", b"CD", b"E"])
        b'$$$'
    """
    longest = max((len(chunk) for chunk in chunks), default=0)
    return PADDING_MARKER * (longest + 1)


def leaf_digest(chunk: bytes, hash_fn: HashFunction = sha256) -> bytes:
    """Digest of a leaf: H(chunk)."""
    return call_hash(hash_fn, chunk)


def internal_digest(left: "Node", right: "Node", hash_fn: HashFunction = sha256) -> bytes:
    """
    Digest of an internal node.

    H(encode(left.digest) + encode(right.digest)). Swapping the children
    changes the result, which is what makes leaf positions meaningful.
    """
    return call_hash(hash_fn, encode_digest(left.digest) + encode_digest(right.digest))


@dataclass(frozen=True, eq=False, repr=False)
class Node:
    """
    A node in the tree.

    Attributes:
        digest: Hash of this node's subtree content; its identity for comparison
        raw_content: Chunk bytes at leaves, b"" at internal nodes
        left: Left child, None for leaves
        right: Right child, None for leaves
        is_padding: True only for synthetic nodes balancing an odd level
    """
    digest: bytes
    raw_content: bytes = b""
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    is_padding: bool = False

    def __post_init__(self) -> None:
        """Enforce the zero-or-two children shape."""
        if not isinstance(self.digest, bytes) or len(self.digest) == 0:
            raise ValueError("Node digest must be non-empty bytes")
        if (self.left is None) != (self.right is None):
            raise ValueError("Node must have either zero or two children")
        if self.is_padding and self.left is not None:
            if not (self.left.is_padding and self.right.is_padding):
                raise ValueError("Padding node may only have padding children")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def leaf(cls, chunk: bytes, hash_fn: HashFunction = sha256) -> "Node":
        """Materialize a leaf for one chunk."""
        return cls(digest=leaf_digest(chunk, hash_fn), raw_content=chunk)

    @classmethod
    def padding(
        cls,
        hash_fn: HashFunction = sha256,
        height: int = 1,
        content: bytes = PADDING_MARKER,
    ) -> "Node":
        """
        Materialize padding of the given height.

        Height 1 is the sentinel leaf. Greater heights are perfect subtrees
        of sentinel leaves, so padding an upper level keeps every leaf at
        the same depth. Each call builds fresh nodes; nothing is shared.

        content is the sentinel leaf content; builds pass padding_content()
        of their chunks.
        """
        if height < 1:
            raise ValueError(f"Padding height must be at least 1, got {height}")
        if height == 1:
            return cls(
                digest=leaf_digest(content, hash_fn),
                raw_content=content,
                is_padding=True,
            )
        left = cls.padding(hash_fn, height - 1, content)
        right = cls.padding(hash_fn, height - 1, content)
        return cls(
            digest=internal_digest(left, right, hash_fn),
            left=left,
            right=right,
            is_padding=True,
        )

    @classmethod
    def internal(cls, left: "Node", right: "Node", hash_fn: HashFunction = sha256) -> "Node":
        """Link two nodes under a new parent."""
        return cls(digest=internal_digest(left, right, hash_fn), left=left, right=right)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    @property
    def short_digest(self) -> str:
        return self.digest.hex()[:SHORT_DIGEST_LEN]

    # ------------------------------------------------------------------
    # Metrics and traversal
    # ------------------------------------------------------------------

    def height(self) -> int:
        return height(self)

    def node_count(self) -> int:
        return node_count(self)

    def depth_first(self, order: Union[TraversalOrder, str] = TraversalOrder.PRE) -> list["Node"]:
        return depth_first(self, order)

    def breadth_first(self) -> list["Node"]:
        return breadth_first(self)

    def leaves(self) -> list["Node"]:
        return leaves(self)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equal(self, other: "Node") -> bool:
        """Root-digest equality; see comparator.equal."""
        return equal(self, other)

    def inconsistent_leaves(self, other: "Node") -> list["Node"]:
        """Leaves of other that differ from this tree; see comparator.inconsistent_leaves."""
        return inconsistent_leaves(self, other)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _child_label(self, child: Optional["Node"], missing: str) -> str:
        if child is None:
            return missing
        if child.is_leaf:
            return repr(child.raw_content)
        return child.short_digest

    def summary(self) -> str:
        """One-line rendering for log messages."""
        kind = "padding" if self.is_padding else ("leaf" if self.is_leaf else "internal")
        if self.is_leaf:
            return f"{kind} {self.short_digest} {self.raw_content!r}"
        return f"{kind} {self.short_digest}"

    def __str__(self) -> str:
        return (
            f"RawContent:\t\t{self.raw_content!r}\n"
            f"Digest:\t\t\t{self.hexdigest}\n"
            f"Padding:\t\t{self.is_padding}\n"
            f"LeftChild:\t\t{self._child_label(self.left, 'no_left_child')}\n"
            f"RightChild:\t\t{self._child_label(self.right, 'no_right_child')}\n"
        )

    def __repr__(self) -> str:
        return f"Node({self.summary()})"


__all__ = [
    "PADDING_MARKER",
    "padding_content",
    "Node",
    "leaf_digest",
    "internal_digest",
]
