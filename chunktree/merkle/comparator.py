"""
Comparator
Root equality and leaf-level diffing between two built trees.

Equality is root-digest equality only; collision resistance makes equal
roots a certificate of equal content, so no recursive comparison is done.

Leaf diffing is positional and therefore only defined for congruent trees
(same height, hence same leaf count). Incongruent inputs raise instead of
being truncated.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chunktree.crypto.hashing import to_hex
from chunktree.merkle.traversal import height, leaves
from chunktree.schemas.errors import IncongruentTreesException
from chunktree.schemas.reports import LeafChange, LeafDiffReport

if TYPE_CHECKING:
    from chunktree.merkle.node import Node


logger = logging.getLogger(__name__)


def equal(a: "Node", b: "Node") -> bool:
    """True iff the two roots carry the same digest."""
    return a.digest == b.digest


def ensure_congruent(a: "Node", b: "Node") -> int:
    """
    Check that two trees have the same height.

    Returns:
        The shared height

    Raises:
        IncongruentTreesException: If the heights differ
    """
    height_a = height(a)
    height_b = height(b)
    if height_a != height_b:
        logger.warning(f"Refusing leaf diff of incongruent trees: height {height_a} vs {height_b}")
        raise IncongruentTreesException(
            f"Cannot diff trees of different height ({height_a} vs {height_b})",
            left_height=height_a,
            right_height=height_b,
        )
    return height_a


def _changed_positions(a: "Node", b: "Node") -> list[tuple[int, "Node", "Node"]]:
    leaves_a = leaves(a)
    leaves_b = leaves(b)
    # Congruent trees have equal leaf counts, so zip drops nothing
    return [
        (index, old, new)
        for index, (old, new) in enumerate(zip(leaves_a, leaves_b))
        if old.digest != new.digest
    ]


def inconsistent_leaves(a: "Node", b: "Node") -> list["Node"]:
    """
    Leaves of b whose digest differs from the leaf of a at the same position.

    Args:
        a: Reference tree
        b: Tree to check against a

    Returns:
        Differing leaves from b, left to right; empty when the roots match

    Raises:
        IncongruentTreesException: If a and b differ in height
    """
    ensure_congruent(a, b)
    if equal(a, b):
        return []

    changed = [new for _, _, new in _changed_positions(a, b)]
    logger.info(f"Leaf diff found {len(changed)} inconsistent leaves")
    return changed


def compare_trees(a: "Node", b: "Node") -> LeafDiffReport:
    """
    Positional diff of two congruent trees as a report.

    Raises:
        IncongruentTreesException: If a and b differ in height
    """
    shared_height = ensure_congruent(a, b)
    leaf_count = 2 ** (shared_height - 1)

    changes: list[LeafChange] = []
    if not equal(a, b):
        for index, old, new in _changed_positions(a, b):
            changes.append(
                LeafChange(
                    index=index,
                    old_digest=to_hex(old.digest),
                    new_digest=to_hex(new.digest),
                    is_padding=new.is_padding,
                    content_length=len(new.raw_content),
                )
            )
        logger.info(f"Leaf diff found {len(changes)} of {leaf_count} leaves changed")

    return LeafDiffReport(
        equal=equal(a, b),
        height=shared_height,
        leaf_count=leaf_count,
        old_root=to_hex(a.digest),
        new_root=to_hex(b.digest),
        changes=changes,
    )


__all__ = [
    "equal",
    "ensure_congruent",
    "inconsistent_leaves",
    "compare_trees",
]
