"""
Traversal Engine and Structural Metrics

Depth-first (pre/in/post) and breadth-first orderings over a built tree.
Every call recomputes and returns a fresh list.

Metrics rely on the perfect-binary-tree shape the builder guarantees:
only the leftmost path is walked for height, and node count and the
leaf cutoff are derived from it.
"""
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Union

from chunktree.schemas.errors import InvalidConfigurationException

if TYPE_CHECKING:
    from chunktree.merkle.node import Node


class TraversalOrder(str, Enum):
    """Depth-first visit orders."""
    PRE = "pre"
    IN = "in"
    POST = "post"

    @classmethod
    def coerce(cls, value: Union["TraversalOrder", str]) -> "TraversalOrder":
        """
        Accept a TraversalOrder or its string value.

        "preorder"/"inorder"/"postorder" are accepted as aliases.

        Raises:
            InvalidConfigurationException: If value names no known order
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key.endswith("order"):
                key = key[: -len("order")]
            try:
                return cls(key)
            except ValueError:
                pass
        raise InvalidConfigurationException(
            f"Unknown traversal order: {value!r}",
            field="order",
        )


def height(node: "Node") -> int:
    """1 for a leaf, else 1 + height of the left subtree."""
    if node.left is None:
        return 1
    return 1 + height(node.left)


def node_count(node: "Node") -> int:
    """Total nodes in the subtree: 2^height - 1."""
    return 2 ** height(node) - 1


def depth_first(node: "Node", order: Union[TraversalOrder, str] = TraversalOrder.PRE) -> list["Node"]:
    """
    Depth-first ordering of every node in the subtree rooted at node.

    Args:
        node: Subtree root
        order: PRE visits a node before its children, IN between them,
               POST after them

    Returns:
        New list of node_count(node) nodes
    """
    order = TraversalOrder.coerce(order)

    if node.left is None or node.right is None:
        return [node]

    left = depth_first(node.left, order)
    right = depth_first(node.right, order)

    if order is TraversalOrder.PRE:
        return [node] + left + right
    if order is TraversalOrder.IN:
        return left + [node] + right
    return left + right + [node]


def breadth_first(node: "Node") -> list["Node"]:
    """
    Level-order ordering of the subtree rooted at node.

    Nodes are grouped by depth, left to right within a depth.
    """
    visited: list["Node"] = []
    queue: deque["Node"] = deque([node])

    while queue:
        current = queue.popleft()
        visited.append(current)
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)

    return visited


def leaves(node: "Node") -> list["Node"]:
    """
    Nodes at maximum depth, left to right.

    The suffix of the breadth-first order starting at 2^(height-1) - 1.
    """
    cutoff = 2 ** (height(node) - 1) - 1
    return breadth_first(node)[cutoff:]


def real_leaves(node: "Node") -> list["Node"]:
    """Leaves excluding synthetic padding."""
    return [leaf for leaf in leaves(node) if not leaf.is_padding]


__all__ = [
    "TraversalOrder",
    "height",
    "node_count",
    "depth_first",
    "breadth_first",
    "leaves",
    "real_leaves",
]
