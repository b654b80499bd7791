"""
Test fixtures package for chunktree tests.

Usage:
    from fixtures import make_tree, make_content

    def test_something():
        root = make_tree(b"ABCDEFGH", 2)
"""

from .common import (
    ABCDEFGH,
    ABCDXXGH,
    make_content,
    make_tree,
    flip_byte,
    failing_hash,
)

__all__ = [
    "ABCDEFGH",
    "ABCDXXGH",
    "make_content",
    "make_tree",
    "flip_byte",
    "failing_hash",
]
